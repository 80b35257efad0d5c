"""
Centralized logging configuration for the Hadith Overlay.

Usage:
    from hadith_overlay.logger_config import get_logger
    logger = get_logger(__name__)
    logger.info("message")

The composition root calls ``configure_logging`` once. Logs go to:
  - Console (configured level, INFO by default)
  - <log_dir>/hadith-overlay.log (rotating, 1 MB per file, 3 backups, DEBUG+)
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FILE_NAME = "hadith-overlay.log"

_CONFIGURED = False


def default_log_dir() -> Path:
    """Resolve the XDG state directory used for log files."""
    state_home = os.environ.get("XDG_STATE_HOME") or str(Path.home() / ".local" / "state")
    return Path(state_home) / "hadith-overlay" / "logs"


def resolve_level(name: str) -> int:
    """Map a level name such as "debug" to its numeric value, defaulting to INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> None:
    """Attach console and rotating file handlers to the root logger (once)."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    _CONFIGURED = True

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(resolve_level(level))
    console.setFormatter(logging.Formatter("[%(name)s] %(message)s"))
    root.addHandler(console)

    target_dir = log_dir or default_log_dir()
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            target_dir / LOG_FILE_NAME,
            maxBytes=1024 * 1024,  # 1 MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(file_handler)
    except OSError as exc:
        # Last resort - the logger itself is not usable for this
        sys.stderr.write(f"[logger_config] Could not create log file: {exc}\n")


def get_logger(name: str) -> logging.Logger:
    """Return a named logger. Does not configure handlers."""
    return logging.getLogger(name)
