"""Structlog implementation of the StudyObserver port."""

import structlog


class StructlogStudyObserver:
    """Delegates study session events to structlog.

    Satisfies the StudyObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def session_started(self, total_questions: int) -> None:
        self._log.info("study.session_started", total_questions=total_questions)

    def question_shown(self, question: str) -> None:
        self._log.debug("study.question_shown", question=question)

    def answer_judged(
        self, question: str, reply: str, correct: bool, remaining: int
    ) -> None:
        self._log.info(
            "study.answer_judged",
            question=question,
            reply=reply,
            correct=correct,
            remaining=remaining,
        )

    def session_completed(self, questions: int, attempts: int) -> None:
        self._log.info(
            "study.session_completed", questions=questions, attempts=attempts
        )
