"""Monitor configuration with environment overrides."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, replace
from pathlib import Path

LOG_PATH_ENV = "COH3_LOG_PATH"
ENCODING_ENV = "COH3_LOG_ENCODING"


def default_log_path() -> Path:
    """Return the default location of the game's warnings.log."""
    return Path.home() / "Documents" / "My Games" / "Company of Heroes 3" / "warnings.log"


@dataclass(frozen=True, slots=True)
class MonitorConfig:
    log_path: Path
    encoding: str = "utf-8"


def resolve_monitor_config(cfg: MonitorConfig | None = None) -> MonitorConfig:
    """Return config with optional env overrides applied."""
    if cfg is None:
        cfg = MonitorConfig(log_path=default_log_path())

    raw_path = os.getenv(LOG_PATH_ENV)
    if raw_path:
        cfg = replace(cfg, log_path=Path(raw_path).expanduser())

    encoding = os.getenv(ENCODING_ENV)
    if encoding:
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise ValueError(f"{ENCODING_ENV} is not a known encoding: {encoding}") from exc
        cfg = replace(cfg, encoding=encoding)

    return cfg
