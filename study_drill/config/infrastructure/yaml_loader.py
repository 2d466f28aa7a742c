"""YAML config loader — parses, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from study_drill.config.domain.config import DrillConfig
from study_drill.config.domain.observer import ConfigObserver
from study_drill.config.infrastructure.errors import ConfigLoadError, ConfigValidationError


class YamlConfigLoader:
    """Loads, validates, and returns a DrillConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> DrillConfig:
        """
        Load, validate, and return a DrillConfig from a YAML file.

        A relative ``questions.path`` is resolved against the config file's
        directory.

        Raises:
            ConfigLoadError: if the file does not exist or cannot be read.
            ConfigValidationError: if the YAML is invalid or the schema is violated.
        """
        raw = _parse_yaml(path=path)
        cfg = _build_config(raw=raw)
        cfg = _resolve_questions_path(cfg=cfg, base_dir=path.parent)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(name=cfg.name)
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(path=path, reason=f"cannot read file ({exc})") from exc
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML: {exc}") from exc


def _build_config(raw: Any) -> DrillConfig:
    try:
        return DrillConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _resolve_questions_path(cfg: DrillConfig, base_dir: Path) -> DrillConfig:
    questions_path = cfg.questions.path
    if questions_path is None or questions_path.is_absolute():
        return cfg
    questions = cfg.questions.model_copy(update={"path": base_dir / questions_path})
    return cfg.model_copy(update={"questions": questions})


def _emit_warnings(cfg: DrillConfig, observer: ConfigObserver) -> None:
    if cfg.classifier.type == "knn" and cfg.classifier.k % 2 == 0:
        observer.config_even_k_warning(cfg.classifier.k)
