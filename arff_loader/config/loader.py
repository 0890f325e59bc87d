from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Config loader for the arff-loader CLI.

Responsibilities:
- Load the YAML config (default ``config/arff_loader.yml``)
- Validate it against the packaged JSON schema
- Apply defaults (batch=true, encoding=utf-8, preview_rows=3)
"""

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "ConfigError",
    "LoaderConfig",
    "load_config",
]

DEFAULT_CONFIG_PATH = Path("config/arff_loader.yml")
SCHEMA_PATH = Path(__file__).with_name("schema.json")


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class LoaderConfig:
    """Settings for one CLI run.

    ``files`` are resolved relative to the current working directory.
    """
    files: list[str]
    batch: bool = True
    encoding: str = "utf-8"
    preview_rows: int = 3


def _validate_config_schema(data: Any) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or invalid, or the data
            fails validation (missing ``files``, wrong types, unknown keys).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> LoaderConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    _validate_config_schema(data)

    return LoaderConfig(
        files=list(data["files"]),
        batch=data.get("batch", True),
        encoding=data.get("encoding", "utf-8"),
        preview_rows=data.get("preview_rows", 3),
    )
