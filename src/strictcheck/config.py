from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from strictcheck.style import ColorMode


class RunnerSettings(BaseModel):
    """Settings for a ``TestRunner``.

    ``on_error`` decides what happens when a test expression raises:
    ``raise`` lets the exception abort the group, ``fail`` counts it as a
    failed expression and moves on to the next one.
    """

    model_config = ConfigDict(extra="forbid")

    color: ColorMode = ColorMode.AUTO
    on_error: Literal["raise", "fail"] = "raise"
    debug_log: str | None = None
    verbose: bool = False

    @field_validator("debug_log")
    @classmethod
    def debug_log_must_not_be_blank(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("debug_log must not be blank")
        return v


def load_config(path: Path) -> RunnerSettings:
    """Load and validate runner settings from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config must be a mapping, got {type(raw).__name__}")

    settings = RunnerSettings(**raw)

    # Resolve a relative debug log relative to the config file location
    if settings.debug_log is not None:
        log_path = Path(settings.debug_log)
        if not log_path.is_absolute():
            settings.debug_log = str((config_dir / log_path).resolve())

    return settings
