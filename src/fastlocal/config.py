"""Config loading — declarative file lists from TOML/JSON, settings from env."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from fastlocal.errors import ConfigError

try:
    import tomllib
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib  # type: ignore[no-redef]

LOG_LEVEL_ENV = "FASTLOCAL_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


class Settings(BaseModel):
    """Process-level settings read from the environment."""

    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> Settings:
        return cls(log_level=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper())


def load_config(path: Path) -> dict[str, Any]:
    """Read a data source config (``files`` + ``add_newline_at_end``) from TOML or JSON.

    The mapping is returned unvalidated; the data source reports schema
    problems as diagnostics.
    """
    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
        elif suffix == ".json":
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise ConfigError(path, f"unsupported config format {suffix or '(none)'!r}; use .toml or .json")
    except OSError as e:
        raise ConfigError(path, e.strerror or str(e)) from e
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        raise ConfigError(path, f"parse error: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(path, "top level must be a table/object")
    return data
