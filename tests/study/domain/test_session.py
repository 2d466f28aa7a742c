"""Tests for the StudySession domain model."""

import pytest
from pydantic import ValidationError

from study_drill.classifier.domain.naive import naive_classifier
from study_drill.classifier.domain.nearest_neighbor import classify
from study_drill.question.domain.queue import QuestionQueue
from study_drill.question.domain.stage import QueueStage
from study_drill.question.domain.tagged_question import TaggedQuestion
from study_drill.study.domain.result import StudyResult
from study_drill.study.domain.session import StudySession

Q1 = TaggedQuestion(question="What is 1 cubed?", answer="1")
Q2 = TaggedQuestion(question="What is 2 cubed?", answer="8")


def _session() -> StudySession:
    return StudySession(queue=QuestionQueue.start([Q1, Q2]))


def _always(verdict: bool):
    def classifier(reply: str) -> bool:
        return verdict

    return classifier


class TestRespond:
    """respond reveals on a question and judges on an answer."""

    def test_reply_to_question_reveals_answer(self) -> None:
        session = _session().respond("", naive_classifier)

        assert session.queue.stage == QueueStage.ANSWERING
        assert session.attempts == 0

    def test_reply_to_question_does_not_consult_classifier(self) -> None:
        def exploding(reply: str) -> bool:
            raise AssertionError("classifier must not be called")

        _session().respond("anything", exploding)

    def test_yes_reply_retires_question(self) -> None:
        session = _session().respond("", naive_classifier).respond("yes", naive_classifier)

        assert session.queue.retired == (Q1,)
        assert session.attempts == 1

    def test_no_reply_requeues_question(self) -> None:
        session = _session().respond("", naive_classifier).respond("no", naive_classifier)

        assert session.queue.all_questions() == (Q2, Q1)
        assert session.attempts == 1

    def test_classifier_is_chosen_per_call(self) -> None:
        answering = _session().respond("", naive_classifier)

        # naive says no to "affirmative"; k-NN says yes
        assert answering.respond("affirmative", naive_classifier).queue.size() == 2
        assert answering.respond("affirmative", classify).queue.size() == 1

    def test_completed_session_is_unchanged(self) -> None:
        session = StudySession(queue=QuestionQueue.start([Q1]))
        session = session.respond("", _always(True)).respond("y", _always(True))

        assert session.completed is True
        assert session.respond("y", _always(True)) == session

    def test_respond_leaves_previous_session_untouched(self) -> None:
        original = _session()
        original.respond("", naive_classifier)

        assert original == _session()


class TestAttempts:
    """attempts counts judged answers, right or wrong."""

    def test_wrong_then_right_counts_three_attempts_for_two_questions(self) -> None:
        session = _session()
        for verdict in [False, True, True]:
            session = session.respond("", _always(verdict))
            session = session.respond("reply", _always(verdict))

        assert session.completed is True
        assert session.attempts == 3

    def test_negative_attempts_raise_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            StudySession(queue=QuestionQueue.start([Q1]), attempts=-1)


class TestStudyResult:
    """StudyResult is a frozen pair of counts."""

    def test_holds_counts(self) -> None:
        result = StudyResult(questions=2, attempts=3)

        assert result.questions == 2
        assert result.attempts == 3

    def test_negative_counts_raise_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            StudyResult(questions=-1, attempts=0)
