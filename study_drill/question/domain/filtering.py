"""Derived question sources that narrow another source's working set."""

from study_drill.question.domain.queue import QuestionQueue
from study_drill.question.domain.tagged_question import TaggedQuestion


def filter_by_tag(
    questions: tuple[TaggedQuestion, ...] | list[TaggedQuestion], tag: str
) -> list[TaggedQuestion]:
    """Keep the questions carrying ``tag`` (case-insensitive), preserving order."""
    return [question for question in questions if question.has_tag(tag)]


class TagFilteredSource:
    """Serves the questions of an existing queue that carry a given tag.

    Reads the queue's live working set, so questions already retired there are
    not offered again. Satisfies the QuestionSource protocol structurally.
    """

    def __init__(self, queue: QuestionQueue, tag: str) -> None:
        self._queue = queue
        self._tag = tag

    def questions(self) -> list[TaggedQuestion]:
        return filter_by_tag(self._queue.all_questions(), self._tag)
