"""Configuration loading for issuelens (.issuelens.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .structuring.constants import (
    ANALYSIS_LABELS,
    BEST_PRACTICE_LABELS,
    SOLUTION_LABELS,
    TERMINATOR_LABELS,
)
from .structuring.sections import SectionLabels

CONFIG_FILENAME = ".issuelens.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class LoggingConfig:
    """Logging settings from .issuelens.yml."""

    verbose: bool = False
    log_file: Optional[Path] = None


@dataclass
class LabelConfig:
    """Section label vocabulary used when structuring AI answers."""

    analysis: List[str] = field(default_factory=lambda: list(ANALYSIS_LABELS))
    solution: List[str] = field(default_factory=lambda: list(SOLUTION_LABELS))
    best_practices: List[str] = field(default_factory=lambda: list(BEST_PRACTICE_LABELS))
    terminators: List[str] = field(default_factory=lambda: list(TERMINATOR_LABELS))

    def to_section_labels(self) -> SectionLabels:
        return SectionLabels(
            analysis=tuple(self.analysis),
            solution=tuple(self.solution),
            best_practices=tuple(self.best_practices),
            terminators=tuple(self.terminators),
        )


@dataclass
class IssueLensConfig:
    """Represents the settings defined in .issuelens.yml."""

    root: Path
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    labels: LabelConfig = field(default_factory=LabelConfig)


def load_config(config_path: Path) -> IssueLensConfig:
    """Load configuration from disk; a missing file yields defaults."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return IssueLensConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    logging_config = LoggingConfig()
    logging_data = _as_dict(data.get("logging"))
    if logging_data:
        logging_config.verbose = _as_bool(logging_data.get("verbose")) or False
        log_file = _as_str(logging_data.get("log_file"))
        logging_config.log_file = root / log_file if log_file else None

    labels = LabelConfig()
    labels_data = _as_dict(data.get("labels"))
    if labels_data:
        # A key that is present replaces the defaults; an absent key keeps them.
        for name in ("analysis", "solution", "best_practices", "terminators"):
            if name in labels_data:
                setattr(labels, name, _as_str_list(labels_data.get(name)))

    return IssueLensConfig(root=root, logging=logging_config, labels=labels)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
