"""Centralized logging configuration for randompeople.

Sets up Python's logging system to write to both stdout and a rotating
log file in the configured log directory. Also provides a dedicated
JSONL logger recording every generated name.

Log directory structure::

    ~/.randompeople/.logs/
    ├── randompeople.log          # All Python logger output (rotating)
    └── generated.log             # One JSON record per generated name
"""
from __future__ import annotations

import glob
import json
import logging
import logging.handlers
import os
import time
from pathlib import Path
from typing import Optional

# Module-level log directory — set by setup_logging()
_log_dir: Optional[str] = None

generated_logger = logging.getLogger("randompeople._generated")


def get_log_dir() -> str:
    """Return the configured log directory, falling back to default."""
    if _log_dir:
        return _log_dir
    default = str(Path(os.path.expanduser("~")) / ".randompeople" / ".logs")
    return os.getenv("RANDOMPEOPLE_LOG_DIR") or default


def clear_logs(log_dir: str) -> None:
    """Remove ``*.log`` and ``*.jsonl`` files from the log directory.

    Called before any handlers are attached so there are no open-file
    conflicts.
    """
    if not os.path.isdir(log_dir):
        return
    for pattern in ("*.log", "*.jsonl"):
        for path in glob.glob(os.path.join(log_dir, pattern)):
            try:
                os.remove(path)
            except OSError:
                pass


def setup_logging(log_dir: str, log_level: str = "info", *, clear_on_launch: bool = False) -> None:
    """Configure the logging system with both stdout and file handlers.

    Safe to call more than once; existing handlers are replaced.
    """
    global _log_dir
    _log_dir = log_dir

    if clear_on_launch:
        clear_logs(log_dir)

    os.makedirs(log_dir, exist_ok=True)

    level = getattr(logging, log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    fmt = logging.Formatter(
        "%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    stdout_handler = logging.StreamHandler()
    stdout_handler.setLevel(level)
    stdout_handler.setFormatter(fmt)
    root.addHandler(stdout_handler)

    file_handler = logging.handlers.RotatingFileHandler(
        os.path.join(log_dir, "randompeople.log"),
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    _setup_jsonl_logger(generated_logger, os.path.join(log_dir, "generated.log"))

    logging.getLogger("randompeople").info(
        "Logging initialized: log_dir=%s, level=%s", log_dir, log_level
    )


def _setup_jsonl_logger(logger_instance: logging.Logger, path: str) -> None:
    """Configure a logger to write raw JSONL messages to a rotating file."""
    logger_instance.setLevel(logging.INFO)
    logger_instance.propagate = False
    for handler in logger_instance.handlers:
        handler.close()
    logger_instance.handlers.clear()

    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    # Raw formatter — message is already JSON
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger_instance.addHandler(handler)


def log_generated(
    name: str,
    gender: str,
    seed: str | None = None,
    source: str = "api",
) -> None:
    """Record a generated name to the dedicated JSONL log."""
    record = {
        "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "source": source,
        "name": name,
        "gender": gender,
    }
    if seed:
        record["seed"] = seed[:200]
    try:
        generated_logger.info(json.dumps(record))
    except Exception:  # noqa: BLE001
        pass


def get_generated_log_path() -> str:
    """Return the path to the generated-names log file."""
    return os.path.join(get_log_dir(), "generated.log")
