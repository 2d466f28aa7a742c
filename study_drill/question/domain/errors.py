"""Error types raised by the question domain."""

from study_drill.core.errors import StudyDrillError


class QuestionFormatError(StudyDrillError):
    """Raised when a serialized question record cannot be parsed."""

    def __init__(self, record: str, reason: str) -> None:
        self.record = record
        self.reason = reason
        super().__init__(f"Failed to parse question record {record!r}: {reason}")
