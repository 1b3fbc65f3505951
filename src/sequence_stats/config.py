"""Load run settings from an optional YAML file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from .pipeline import AnalysisConfig

OUTPUT_FORMATS = ("text", "table", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(slots=True)
class Settings:
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    log_level: str = "WARNING"
    output_format: str = "text"

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def load_config(path: Path | None) -> dict:
    if path is None:
        return {}
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        try:
            payload = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in config file {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValueError(f"Config file must hold a mapping: {path}")
    return payload


def _as_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    raise ValueError(f"`{key}` must be true or false; got {value!r}.")


def build_settings(raw: Mapping[str, Any], **overrides: Any) -> Settings:
    """Merge file values with command-line overrides (``None`` means unset)."""
    merged = dict(raw)
    merged.update({key: value for key, value in overrides.items() if value is not None})

    unknown = sorted(
        set(merged) - {"normalize_case", "on_invalid", "log_level", "output_format"}, key=str
    )
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(map(str, unknown))}")

    log_level = str(merged.get("log_level", "WARNING")).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"`log_level` must be one of {', '.join(LOG_LEVELS)}; got {log_level!r}.")

    output_format = str(merged.get("output_format", "text")).lower()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"`output_format` must be one of {', '.join(OUTPUT_FORMATS)}; got {output_format!r}."
        )

    analysis = AnalysisConfig(
        normalize_case=_as_bool(merged.get("normalize_case", False), "normalize_case"),
        on_invalid=str(merged.get("on_invalid", "continue")).lower(),
    )
    return Settings(analysis=analysis, log_level=log_level, output_format=output_format)
