from __future__ import annotations

import posixpath
from collections.abc import Callable
from enum import Enum

from ..logging_conf import get_logger

__all__ = [
    "Strategy",
    "PathVersioner",
    "split_extension",
    "prepend_path_with_version",
    "insert_version_before_extension",
]

logger = get_logger("domain.paths")

TraceHook = Callable[[str, str], None]


class Strategy(str, Enum):
    """Where the release token goes in an asset path."""

    prefix = "prefix"
    extension = "extension"


def split_extension(path: str) -> tuple[str, str]:
    """Split ``path`` at the last dot of its final segment.

    The extension keeps its dot; dotfiles such as ``.htaccess`` have none.
    """
    return posixpath.splitext(path)


def prepend_path_with_version(path: str | None, version: str | None) -> str | None:
    """Use the version as the assets root for this release.

    Rooted paths stay rooted and relative paths stay relative:

        prepend_path_with_version("/images/logo.png", "1")  # "/1/images/logo.png"
        prepend_path_with_version("images/logo.png", "1")   # "1/images/logo.png"

    Not idempotent: a second call adds a second version segment.
    """
    if not version or not path:
        return path
    if path.startswith("/"):
        return f"/{version}{path}"
    return f"{version}/{path}"


def insert_version_before_extension(path: str | None, version: str | None) -> str | None:
    """Embed the version in the file name, just before the extension.

        insert_version_before_extension("images/logo.png", "1")  # "images/logo.1.png"
    """
    if not version or not path:
        return path
    stem, ext = split_extension(path)
    return f"{stem}.{version}{ext}"


_STRATEGIES: dict[Strategy, Callable[[str | None, str | None], str | None]] = {
    Strategy.prefix: prepend_path_with_version,
    Strategy.extension: insert_version_before_extension,
}


def _log_change(old: str, new: str) -> None:
    logger.info("Changing %s to %s", old, new, extra={"event": "path_versioned"})


class PathVersioner:
    """Apply one versioning strategy, fixed at construction.

    ``trace`` is called with ``(old, new)`` whenever the output differs from
    the input; it defaults to an INFO log line.
    """

    def __init__(self, strategy: Strategy | str = Strategy.prefix, trace: TraceHook | None = None):
        self.strategy = Strategy(strategy)
        self._transform = _STRATEGIES[self.strategy]
        self._trace = trace or _log_change

    def apply(self, path: str | None, version: str | None) -> str | None:
        versioned = self._transform(path, version)
        if versioned != path:
            self._trace(path, versioned)
        return versioned

    def __repr__(self) -> str:
        return f"PathVersioner(strategy={self.strategy.value!r})"
