"""Text question bank loader — reads ``question|answer|tags`` lines into TaggedQuestions."""

from pathlib import Path

from study_drill.question.domain.errors import QuestionFormatError
from study_drill.question.domain.observer import QuestionLoaderObserver
from study_drill.question.domain.record import parse_question
from study_drill.question.domain.tagged_question import TaggedQuestion
from study_drill.question.infrastructure.errors import QuestionBankLoadError


class TextQuestionLoader:
    """Loads a question bank file and returns a list of TaggedQuestion value objects."""

    def __init__(self, observer: QuestionLoaderObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> list[TaggedQuestion]:
        """
        Load all questions from the file at path.

        Blank lines are skipped. Collects ALL malformed records before raising a
        single QuestionBankLoadError listing every issue found.

        Raises:
            QuestionBankLoadError: if the file cannot be read or any record is malformed.
        """
        path_str = str(path)
        self._observer.question_bank_loading_started(path=path_str)

        try:
            lines = self._read_lines(path=path)
        except FileNotFoundError:
            reason = f"file not found: {path_str}"
            self._observer.question_bank_loading_failed(path=path_str, reason=reason)
            raise QuestionBankLoadError(reason=reason)
        except (OSError, UnicodeDecodeError) as exc:
            reason = f"cannot read {path_str}: {exc}"
            self._observer.question_bank_loading_failed(path=path_str, reason=reason)
            raise QuestionBankLoadError(reason=reason) from exc

        questions, errors = self._parse_lines(lines=lines)

        if errors:
            reason = "; ".join(errors)
            self._observer.question_bank_loading_failed(path=path_str, reason=reason)
            raise QuestionBankLoadError(reason=reason)

        self._observer.question_bank_loading_completed(
            path=path_str,
            total_questions=len(questions),
        )
        return questions

    def _read_lines(self, path: Path) -> list[str]:
        """Open the file and return all of its lines."""
        with open(path, encoding="utf-8") as fh:
            return fh.readlines()

    def _parse_lines(self, lines: list[str]) -> tuple[list[TaggedQuestion], list[str]]:
        """Parse each non-blank line into a TaggedQuestion, collecting errors without aborting early.

        Indexes are 0-based positions in the file, blank lines included.
        """
        questions: list[TaggedQuestion] = []
        errors: list[str] = []

        for index, line in enumerate(lines):
            if not line.strip():
                continue
            try:
                question = parse_question(line)
            except QuestionFormatError as exc:
                errors.append(f"line {index}: {exc.reason}")
                continue
            questions.append(question)
            self._observer.question_loaded(index=index)

        return questions, errors


class FileQuestionSource:
    """Serves the questions stored in a question bank file.

    The file is read on every call to questions(). Satisfies the QuestionSource
    protocol structurally.
    """

    def __init__(self, path: Path, loader: TextQuestionLoader) -> None:
        self._path = path
        self._loader = loader

    def questions(self) -> list[TaggedQuestion]:
        return self._loader.load(path=self._path)
