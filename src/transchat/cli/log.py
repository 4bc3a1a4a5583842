"""Logging setup for the CLI.

Log records go to stderr through Rich so they never interleave with the
chat transcript printed on stdout.
"""

import logging
from enum import Enum

from rich.console import Console
from rich.logging import RichHandler


class LogLevel(str, Enum):
    """Log levels selectable with --log-level."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def numeric(self) -> int:
        return logging.getLevelName(self.value.upper())


def configure_logging(level: LogLevel = LogLevel.WARNING) -> None:
    """Route the root logger through a Rich handler on stderr."""
    logging.basicConfig(
        level=level.numeric,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(level.numeric, logging.WARNING))
