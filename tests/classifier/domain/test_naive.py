"""Tests for the first-letter naive classifier."""

import pytest

from study_drill.classifier.domain.naive import naive_classifier
from study_drill.classifier.domain.nearest_neighbor import classify


class TestNaiveClassifier:
    """naive_classifier says yes to anything starting with y."""

    @pytest.mark.parametrize("reply", ["yes", "Y", "yep", "yeah right", "YOLO"])
    def test_replies_starting_with_y_are_true(self, reply: str) -> None:
        assert naive_classifier(reply) is True

    @pytest.mark.parametrize("reply", ["no", "affirmative", "nope", " yes", "oh yes"])
    def test_other_replies_are_false(self, reply: str) -> None:
        assert naive_classifier(reply) is False

    def test_empty_reply_is_false(self) -> None:
        assert naive_classifier("") is False


class TestInterchangeability:
    """Both classifiers fit anywhere a str -> bool callable is expected."""

    @pytest.mark.parametrize("classifier", [naive_classifier, classify])
    def test_both_accept_a_reply_and_return_bool(self, classifier) -> None:
        assert classifier("yes") is True
        assert classifier("no") is False

    def test_classifiers_disagree_where_heuristic_is_too_naive(self) -> None:
        assert naive_classifier("affirmative") is False
        assert classify("affirmative") is True
