"""Error types raised by classifier infrastructure."""

from study_drill.core.errors import StudyDrillError


class ClassifierTypeNotSupportedError(StudyDrillError):
    """Raised when a config names a classifier type that does not exist."""

    def __init__(self, classifier_type: str) -> None:
        super().__init__(
            f"Failed to create classifier: unsupported type {classifier_type!r}"
        )
