"""StudyResult — the outcome of a completed study session."""

from pydantic import BaseModel, Field


class StudyResult(BaseModel, frozen=True):
    questions: int = Field(ge=0)  # size of the queue when the session began
    attempts: int = Field(ge=0)  # answers judged, right or wrong
