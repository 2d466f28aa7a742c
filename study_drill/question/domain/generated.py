"""Procedurally generated questions: "What is n cubed?" for n = 1..count."""

from study_drill.question.domain.tagged_question import TaggedQuestion

CUBED_TAGS = ("Cubes", "Math", "Easy")


def cubed_question(n: int) -> TaggedQuestion:
    return TaggedQuestion(
        question=f"What is {n} cubed?",
        answer=str(n**3),
        tags=CUBED_TAGS,
    )


class CubedQuestionSource:
    """Generates ``count`` cube questions, starting at 1.

    Satisfies the QuestionSource protocol structurally.
    """

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self._count = count

    def questions(self) -> list[TaggedQuestion]:
        return [cubed_question(n) for n in range(1, self._count + 1)]
