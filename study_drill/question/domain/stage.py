"""QueueStage — the display stage of a question queue."""

from enum import StrEnum


class QueueStage(StrEnum):
    QUESTIONING = "questioning"  # question text is visible
    ANSWERING = "answering"  # answer text is visible
    COMPLETED = "completed"  # every question retired
