"""Tests for the study-drill CLI commands."""

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner

from study_drill.cli.main import app, build_queue
from study_drill.config.domain.config import QuestionsConfig

# __file__ is tests/cli/test_main.py
# parent.parent is the tests/ directory
FIXTURES = Path(__file__).parent.parent / "fixtures"

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


class TestClassifyCommand:
    """`classify` prints yes or no for a reply."""

    def test_knn_classifies_yep_as_yes(self) -> None:
        result = runner.invoke(app, ["classify", "yep"])

        assert result.exit_code == 0
        assert result.output.strip() == "yes"

    def test_knn_classifies_maybe_as_no(self) -> None:
        result = runner.invoke(app, ["classify", "maybe"])

        assert result.output.strip() == "no"

    def test_naive_classifier_option(self) -> None:
        result = runner.invoke(app, ["classify", "affirmative", "--classifier", "naive"])

        assert result.exit_code == 0
        assert result.output.strip() == "no"

    def test_unknown_classifier_exits_with_error(self) -> None:
        result = runner.invoke(app, ["classify", "yes", "--classifier", "oracle"])

        assert result.exit_code == 1
        assert "oracle" in result.output


class TestStudyCommand:
    """`study` runs a whole drill from a config file."""

    def test_runs_tag_filtered_drill_to_completion(self) -> None:
        result = runner.invoke(
            app, ["study", str(FIXTURES / "drill.yaml")], input="\ny\n\ny\n"
        )

        assert result.exit_code == 0
        assert "Question: What is the capital of France?" in result.output
        assert "Answer: Madrid. Were you right? (Y/N)" in result.output
        assert "Questions: 2, Attempts: 2" in result.output

    def test_wrong_answer_adds_an_attempt(self) -> None:
        result = runner.invoke(
            app,
            ["study", str(FIXTURES / "generated_drill.yaml")],
            input="\nno\n\nyes\n\nyes\n\nyes\n",
        )

        assert result.exit_code == 0
        assert "Questions: 3, Attempts: 4" in result.output

    def test_json_log_format_is_accepted(self) -> None:
        result = runner.invoke(
            app,
            ["study", str(FIXTURES / "generated_drill.yaml"), "--log-format", "json"],
            input="\ny\n\ny\n\ny\n",
        )

        assert result.exit_code == 0

    def test_invalid_log_format_exits_with_error(self) -> None:
        result = runner.invoke(
            app, ["study", str(FIXTURES / "drill.yaml"), "--log-format", "xml"]
        )

        assert result.exit_code == 1

    def test_missing_config_exits_with_error(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["study", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 1
        assert "Failed to load config" in result.output

    def test_malformed_question_bank_exits_with_error(self, tmp_path: Path) -> None:
        (tmp_path / "bad.txt").write_text("no separators here\n", encoding="utf-8")
        config = tmp_path / "drill.yaml"
        config.write_text("name: bad\nquestions:\n  path: bad.txt\n", encoding="utf-8")

        result = runner.invoke(app, ["study", str(config)])

        assert result.exit_code == 1
        assert "Failed to load question bank" in result.output

    def test_undecodable_question_bank_exits_with_error(self, tmp_path: Path) -> None:
        (tmp_path / "bad.txt").write_bytes(b"Q\xff?|A|t\n")
        config = tmp_path / "drill.yaml"
        config.write_text("name: bad\nquestions:\n  path: bad.txt\n", encoding="utf-8")

        result = runner.invoke(app, ["study", str(config)])

        assert result.exit_code == 1
        assert "Failed to load question bank" in result.output

    def test_undecodable_config_exits_with_error(self, tmp_path: Path) -> None:
        config = tmp_path / "drill.yaml"
        config.write_bytes(b"name: caf\xff\n")

        result = runner.invoke(app, ["study", str(config)])

        assert result.exit_code == 1
        assert "Failed to load config" in result.output

    def test_running_out_of_input_is_reported_as_interrupted(self) -> None:
        result = runner.invoke(
            app, ["study", str(FIXTURES / "generated_drill.yaml")], input="\n"
        )

        assert result.exit_code == 1
        assert "interrupted" in result.output


class TestBuildQueue:
    """build_queue turns a QuestionsConfig into a starting queue."""

    def test_generated_questions(self) -> None:
        queue = build_queue(config=QuestionsConfig(generated_count=4))

        assert queue.size() == 4
        assert queue.current_text() == "What is 1 cubed?"

    def test_file_questions(self) -> None:
        queue = build_queue(config=QuestionsConfig(path=FIXTURES / "questions.txt"))

        assert queue.size() == 3

    def test_tag_filter_is_applied(self) -> None:
        queue = build_queue(
            config=QuestionsConfig(path=FIXTURES / "questions.txt", tag="SUBTRACTION")
        )

        assert queue.size() == 1
        assert queue.current_text() == "What is 7 - 4?"

    def test_tag_matching_nothing_gives_empty_queue(self) -> None:
        queue = build_queue(config=QuestionsConfig(generated_count=2, tag="history"))

        assert queue.size() == 0
