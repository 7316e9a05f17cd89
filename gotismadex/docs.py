"""API documentation models, start banner and version."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version

from gotismadex.logger import get_logger

_DRAW = ""
_DEFAULT_VERSION = "latest"


@dataclass
class CommonSuccess:
    """Generic success response body."""

    status: int
    message: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class CommonError:
    """Generic error response body."""

    status: int
    message: str

    def to_dict(self) -> dict:
        return asdict(self)


@lru_cache(maxsize=None)
def get_version() -> str:
    """Return the version of the installed package, or "latest"."""
    try:
        return version("gotismadex")
    except PackageNotFoundError:
        return _DEFAULT_VERSION


def draw_start() -> None:
    """Print the start banner and the version."""
    log = get_logger()
    log.draw(_DRAW)
    log.draw("Version : " + get_version() + "\n")