from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from randompeople.core.names import GENDERS

logger = logging.getLogger("randompeople.config")

@dataclass
class Settings:
    log_level: str
    log_dir: str
    host: str
    port: int
    default_gender: str | None
    max_batch: int
    clear_logs_on_launch: bool

    @staticmethod
    def from_env() -> "Settings":
        default_log_dir = str(Path(os.path.expanduser("~")) / ".randompeople" / ".logs")
        default_gender = (os.getenv("RANDOMPEOPLE_DEFAULT_GENDER") or "").strip().lower() or None
        if default_gender and default_gender not in {g.value for g in GENDERS}:
            logger.warning("Ignoring RANDOMPEOPLE_DEFAULT_GENDER=%r (expected male or female)", default_gender)
            default_gender = None
        return Settings(
            log_level=os.getenv("RANDOMPEOPLE_LOG_LEVEL", "info"),
            log_dir=os.getenv("RANDOMPEOPLE_LOG_DIR") or default_log_dir,
            host=os.getenv("RANDOMPEOPLE_HOST", "127.0.0.1"),
            port=int(os.getenv("RANDOMPEOPLE_PORT", "18791")),
            default_gender=default_gender,
            max_batch=int(os.getenv("RANDOMPEOPLE_MAX_BATCH", "100")),
            clear_logs_on_launch=os.getenv("RANDOMPEOPLE_CLEAR_LOGS_ON_LAUNCH", "false").lower() in {"1", "true", "yes"},
        )
