"""Runtime settings read from the environment."""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .storage import STORAGE_KEY

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class TrackerSettings:
    """Where entries are stored and how the page behaves.

    Attributes:
        storage_path: JSON file that backs the key-value store.
        storage_key: Slot inside the store holding the serialised entry list.
        allow_edit: Whether entry cards expose inline editing.
        log_level: Name of the logging level, e.g. ``"INFO"``.
    """

    storage_path: Path = Path("jobtracker_data.json")
    storage_key: str = STORAGE_KEY
    allow_edit: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TrackerSettings":
        env = os.environ if environ is None else environ
        allow_edit = env.get("JOBTRACKER_ALLOW_EDIT", "true").strip().lower() in _TRUE_VALUES
        return cls(
            storage_path=Path(env.get("JOBTRACKER_STORAGE", "jobtracker_data.json")),
            storage_key=env.get("JOBTRACKER_STORAGE_KEY", STORAGE_KEY) or STORAGE_KEY,
            allow_edit=allow_edit,
            log_level=env.get("JOBTRACKER_LOG_LEVEL", "INFO"),
        )


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once for the app process."""

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
