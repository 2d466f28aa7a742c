"""Observer port for question bank loading — defines events in domain language."""

from typing import Protocol


class QuestionLoaderObserver(Protocol):
    def question_bank_loading_started(self, path: str) -> None: ...

    def question_loaded(self, index: int) -> None: ...

    def question_bank_loading_completed(self, path: str, total_questions: int) -> None: ...

    def question_bank_loading_failed(self, path: str, reason: str) -> None: ...
