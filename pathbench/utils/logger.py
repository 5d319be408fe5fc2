"""Logging setup for benchmark runs.

Modules obtain loggers with `BenchLogger.get_logger(__name__)`. The entry
script applies the `logging` section of the run configuration with
`BenchLogger.configure_from_section`.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Plotting backends are chatty at DEBUG
_QUIET_LIBRARIES = ("matplotlib", "PIL")

Level = Union[int, str]


def parse_level(level: Level) -> int:
    """Convert a level name ("debug", "INFO", ...) or number to a logging level.

    Raises:
        ValueError: If the name is not a known level.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


class BenchLogger:
    """Process-wide logging configuration for pathbench."""

    _configured = False

    @classmethod
    def configure(
        cls,
        level: Level = logging.INFO,
        format_str: Optional[str] = None,
        log_file: Optional[Path] = None,
        include_console: bool = True,
        force: bool = False,
    ) -> None:
        """Install console and file handlers on the root logger.

        Args:
            level: Level name or number (default: INFO).
            format_str: Format for every handler; defaults to `DEFAULT_FORMAT`.
            log_file: Optional file that receives a copy of every record.
            include_console: Log to stderr, keeping stdout for the summary table.
            force: Replace an earlier configuration.
        """
        if cls._configured and not force:
            return

        numeric_level = parse_level(level)
        formatter = logging.Formatter(format_str or DEFAULT_FORMAT)

        handlers: List[logging.Handler] = []
        if include_console:
            handlers.append(logging.StreamHandler(sys.stderr))
        if log_file:
            log_file = Path(log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.setLevel(numeric_level)
        for handler in handlers:
            handler.setLevel(numeric_level)
            handler.setFormatter(formatter)
            root_logger.addHandler(handler)

        for name in _QUIET_LIBRARIES:
            logging.getLogger(name).setLevel(logging.WARNING)

        cls._configured = True

    @classmethod
    def configure_from_section(cls, section: Optional[Dict[str, Any]], debug: bool = False) -> None:
        """Apply the `logging` section of a run configuration.

        Recognised keys are `level`, `file` and `format`. `debug` overrides
        the configured level with DEBUG.
        """
        section = section or {}
        log_file = section.get("file")
        cls.configure(
            level=logging.DEBUG if debug else section.get("level", logging.INFO),
            format_str=section.get("format"),
            log_file=Path(log_file) if log_file else None,
            force=True,
        )

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Return the named logger, configuring defaults on first use."""
        if not cls._configured:
            cls.configure()
        return logging.getLogger(name)

    @classmethod
    def set_level(cls, level: Level) -> None:
        numeric_level = parse_level(level)
        root_logger = logging.getLogger()
        root_logger.setLevel(numeric_level)
        for handler in root_logger.handlers:
            handler.setLevel(numeric_level)
