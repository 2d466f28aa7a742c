"""QuestionSource Protocol — where the initial contents of a queue come from."""

from typing import Protocol

from study_drill.question.domain.queue import QuestionQueue
from study_drill.question.domain.tagged_question import TaggedQuestion


class QuestionSource(Protocol):
    """Produces the ordered questions a new QuestionQueue starts with."""

    def questions(self) -> list[TaggedQuestion]: ...


class ListQuestionSource:
    """Serves a caller-supplied list of questions, in order.

    Satisfies the QuestionSource protocol structurally.
    """

    def __init__(self, questions: list[TaggedQuestion]) -> None:
        self._questions = list(questions)

    def questions(self) -> list[TaggedQuestion]:
        return list(self._questions)


def start_queue(source: QuestionSource) -> QuestionQueue:
    """Build a fresh QuestionQueue from any QuestionSource."""
    return QuestionQueue.start(source.questions())
