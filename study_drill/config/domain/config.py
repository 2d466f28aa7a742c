"""Top-level DrillConfig aggregate — the root configuration object."""

from pathlib import Path
from typing import Self

from pydantic import BaseModel, Field, model_validator


class QuestionsConfig(BaseModel, frozen=True):
    """Where a drill's questions come from: a bank file or generated cube questions."""

    path: Path | None = None
    generated_count: int | None = Field(default=None, ge=1)
    tag: str | None = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def _exactly_one_source(self) -> Self:
        if (self.path is None) == (self.generated_count is None):
            raise ValueError("exactly one of 'path' or 'generated_count' must be set")
        return self


class ClassifierConfig(BaseModel, frozen=True):
    type: str = "knn"
    k: int = Field(default=3, ge=1)


class DrillConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a study drill."""

    name: str = Field(min_length=1)
    questions: QuestionsConfig
    classifier: ClassifierConfig = ClassifierConfig()
