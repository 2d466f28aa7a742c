"""QuestionQueue — the immutable rotating-question state machine."""

from collections.abc import Iterable
from typing import Self

from pydantic import BaseModel, model_validator

from study_drill.question.domain.stage import QueueStage
from study_drill.question.domain.tagged_question import TaggedQuestion


class QuestionQueue(BaseModel, frozen=True):
    """Questions still to be answered, the one on display, and those retired.

    The head of ``remaining`` is the question currently on display. Every
    transition returns a new QuestionQueue; earlier values stay valid, so two
    sessions may branch from a shared ancestor.

    Transitions requested in the wrong stage return the queue unchanged.
    """

    remaining: tuple[TaggedQuestion, ...]
    stage: QueueStage
    retired: tuple[TaggedQuestion, ...] = ()

    @model_validator(mode="after")
    def _completed_iff_empty(self) -> Self:
        if (self.stage == QueueStage.COMPLETED) != (not self.remaining):
            raise ValueError(
                f"stage {self.stage.value!r} does not match"
                f" {len(self.remaining)} remaining question(s)"
            )
        return self

    @classmethod
    def start(cls, questions: Iterable[TaggedQuestion]) -> "QuestionQueue":
        """Build a fresh queue showing the first question.

        An empty question list yields a queue that is already COMPLETED.
        """
        remaining = tuple(questions)
        stage = QueueStage.QUESTIONING if remaining else QueueStage.COMPLETED
        return cls(remaining=remaining, stage=stage)

    def current_text(self) -> str | None:
        """Return the visible text: the question, its answer, or None when completed."""
        if self.stage == QueueStage.QUESTIONING:
            return self.remaining[0].question
        if self.stage == QueueStage.ANSWERING:
            return self.remaining[0].answer
        return None

    def current_question(self) -> TaggedQuestion | None:
        if self.stage == QueueStage.COMPLETED:
            return None
        return self.remaining[0]

    def reveal(self) -> "QuestionQueue":
        """Flip from the question to its answer."""
        if self.stage != QueueStage.QUESTIONING:
            return self
        return QuestionQueue(
            remaining=self.remaining,
            stage=QueueStage.ANSWERING,
            retired=self.retired,
        )

    def judge(self, was_correct: bool) -> "QuestionQueue":
        """Retire the head if it was answered correctly, otherwise cycle it to the back."""
        if self.stage != QueueStage.ANSWERING:
            return self

        head, rest = self.remaining[0], self.remaining[1:]
        if was_correct:
            remaining = rest
            retired = (*self.retired, head)
        else:
            remaining = (*rest, head)
            retired = self.retired

        stage = QueueStage.QUESTIONING if remaining else QueueStage.COMPLETED
        return QuestionQueue(remaining=remaining, stage=stage, retired=retired)

    def size(self) -> int:
        return len(self.remaining)

    def all_questions(self) -> tuple[TaggedQuestion, ...]:
        """Return the live working set (questions not yet retired)."""
        return self.remaining
