"""Observer port for study sessions — defines events in domain language."""

from typing import Protocol


class StudyObserver(Protocol):
    def session_started(self, total_questions: int) -> None: ...

    def question_shown(self, question: str) -> None: ...

    def answer_judged(
        self, question: str, reply: str, correct: bool, remaining: int
    ) -> None: ...

    def session_completed(self, questions: int, attempts: int) -> None: ...
