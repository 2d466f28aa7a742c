"""Base exception class for all study-drill-specific errors."""


class StudyDrillError(Exception):
    """Base class for all study-drill errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
