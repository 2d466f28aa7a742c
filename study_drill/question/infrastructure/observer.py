"""Structlog implementation of the QuestionLoaderObserver port."""

import structlog


class StructlogQuestionLoaderObserver:
    """Delegates question loading events to structlog.

    Satisfies the QuestionLoaderObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def question_bank_loading_started(self, path: str) -> None:
        self._log.info("question_bank.loading_started", path=path)

    def question_loaded(self, index: int) -> None:
        self._log.debug("question_bank.question_loaded", index=index)

    def question_bank_loading_completed(self, path: str, total_questions: int) -> None:
        self._log.info(
            "question_bank.loading_completed",
            path=path,
            total_questions=total_questions,
        )

    def question_bank_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("question_bank.loading_failed", path=path, reason=reason)
