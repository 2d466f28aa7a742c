"""Error types raised by config infrastructure."""

from pathlib import Path

from study_drill.core.errors import StudyDrillError


class ConfigValidationError(StudyDrillError):
    """Raised when the loaded config fails validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(StudyDrillError):
    """Raised when the config file cannot be opened or read."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        super().__init__(f"Failed to load config: {reason}: {path}")
