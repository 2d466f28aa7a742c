"""CLI entrypoint for study-drill — typer app with `study` and `classify` commands."""

import sys
from pathlib import Path

import structlog
import typer

from study_drill.classifier.infrastructure.registry import create_classifier
from study_drill.config.domain.config import (
    ClassifierConfig,
    DrillConfig,
    QuestionsConfig,
)
from study_drill.config.infrastructure.observer import StructlogConfigObserver
from study_drill.config.infrastructure.yaml_loader import YamlConfigLoader
from study_drill.core.errors import StudyDrillError
from study_drill.question.domain.filtering import TagFilteredSource
from study_drill.question.domain.generated import CubedQuestionSource
from study_drill.question.domain.queue import QuestionQueue
from study_drill.question.domain.source import QuestionSource, start_queue
from study_drill.question.infrastructure.observer import StructlogQuestionLoaderObserver
from study_drill.question.infrastructure.text_loader import (
    FileQuestionSource,
    TextQuestionLoader,
)
from study_drill.study.application.runner import StudyRunner
from study_drill.study.infrastructure.console_prompter import ConsolePrompter
from study_drill.study.infrastructure.observer import StructlogStudyObserver

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def build_queue(config: QuestionsConfig) -> QuestionQueue:
    """Build the starting queue described by a QuestionsConfig."""
    source: QuestionSource
    if config.path is not None:
        loader = TextQuestionLoader(observer=StructlogQuestionLoaderObserver())
        source = FileQuestionSource(path=config.path, loader=loader)
    else:
        source = CubedQuestionSource(count=config.generated_count or 0)

    queue = start_queue(source)
    if config.tag is None:
        return queue
    return start_queue(TagFilteredSource(queue=queue, tag=config.tag))


def _load_config(config_path: Path) -> DrillConfig:
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    return loader.load(path=config_path)


@app.command()
def study(
    config_path: Path = typer.Argument(..., help="Path to drill config YAML"),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Run an interactive study drill from a YAML config file."""
    try:
        _configure_structlog(log_format=log_format)
        config = _load_config(config_path=config_path)
        queue = build_queue(config=config.questions)
        classifier = create_classifier(config=config.classifier)

        typer.echo(
            f"Starting '{config.name}' with {queue.size()} question(s)"
            f" using the {config.classifier.type} classifier.\n"
        )
        runner = StudyRunner(prompter=ConsolePrompter(), observer=StructlogStudyObserver())
        result = runner.run(queue=queue, classifier=classifier)
        typer.echo(
            f"\nStudy session completed. Questions: {result.questions},"
            f" Attempts: {result.attempts}"
        )

    except (KeyboardInterrupt, typer.Abort):
        typer.echo("\nStudy session interrupted.")
        sys.exit(1)
    except StudyDrillError as exc:
        typer.echo(str(exc))
        sys.exit(1)


@app.command()
def classify(
    text: str = typer.Argument(..., help="Reply to classify as yes or no"),
    classifier_type: str = typer.Option(
        "knn",
        "--classifier",
        "-c",
        help="Classifier: 'knn' or 'naive'",
    ),
) -> None:
    """Classify a free-text reply as yes or no."""
    try:
        classifier = create_classifier(config=ClassifierConfig(type=classifier_type))
    except StudyDrillError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    typer.echo("yes" if classifier(text) else "no")


if __name__ == "__main__":
    app()
