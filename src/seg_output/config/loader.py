from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from seg_output.config.models import OutputConfig


# ConfigError is raised for invalid configuration (fail fast).
class ConfigError(ValueError):
    pass


def load_output_config(path: Path) -> OutputConfig:
    # YAML loader: the `output` section becomes a validated OutputConfig.
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    section = _output_section(raw)
    try:
        return OutputConfig.model_validate(section)
    except ValidationError as exc:
        raise ConfigError(f"Invalid output config: {exc}") from exc


def _output_section(raw: dict[str, Any]) -> dict[str, Any]:
    # Fail fast on unknown keys to prevent silent misconfiguration.
    unknown = set(raw.keys()) - {"version", "output"}
    if unknown:
        raise ConfigError(f"Unknown top-level keys: {sorted(unknown)}")
    if "output" not in raw:
        raise ConfigError("Missing required top-level key: output")
    section = raw["output"]
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError("output must be a mapping")
    return section
