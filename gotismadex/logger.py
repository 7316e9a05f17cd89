"""Plain key=value logger writing to the standard streams."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime
from typing import TextIO

DRAW_COLOR = "\033[96;1m"
NONE_COLOR = "\033[0m"

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class Logger:
    """Writes log lines; the level filters info (0) and warning (<= 1) output."""

    level: int = 0
    stdout: TextIO | None = None
    stderr: TextIO | None = None

    def _out(self) -> TextIO:
        return self.stdout if self.stdout is not None else sys.stdout

    def _err(self) -> TextIO:
        return self.stderr if self.stderr is not None else sys.stderr

    @staticmethod
    def _line(level: str, endpoint: str, message: str, details: object = None) -> str:
        stamp = datetime.now().strftime(_TIME_FORMAT)
        line = f'timestamp="{stamp}" level={level} endpoint={endpoint} message="{message}"'
        if details is not None:
            line += f' detailes="{details}"'
        return line

    def configure(self, level: int) -> None:
        """Set the logging level."""
        self.level = level

    def draw(self, drawing: str) -> None:
        """Print a coloured banner to standard output."""
        print(DRAW_COLOR, drawing, NONE_COLOR, file=self._out())

    def info(self, endpoint: str, message: str) -> None:
        if self.level == 0:
            print(self._line("INFO", endpoint, message), file=self._out())

    def warning(self, endpoint: str, message: str, details: object) -> None:
        if self.level <= 1:
            print(self._line("WARNING", endpoint, message, details), file=self._err())

    def error(self, endpoint: str, message: str, details: object) -> None:
        print(self._line("ERROR", endpoint, message, details), file=self._err())

    def critical(self, endpoint: str, message: str, details: object, exit: bool = True) -> None:
        """Log a critical line and, unless exit is false, stop with status 1."""
        print(self._line("CRITICAL", endpoint, message, details), file=self._err())
        if exit:
            raise SystemExit(1)


_logger = Logger()


def get_logger() -> Logger:
    """Return the application-wide logger."""
    return _logger