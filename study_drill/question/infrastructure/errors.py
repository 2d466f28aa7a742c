"""Error types raised by question infrastructure."""

from study_drill.core.errors import StudyDrillError


class QuestionBankLoadError(StudyDrillError):
    """Raised when a question bank file cannot be loaded or is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load question bank: {reason}")
