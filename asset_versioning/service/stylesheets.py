"""Rewrite ``url(...)`` references inside compiled stylesheets.

This is the host-pipeline side of the integration: every local asset
reference is passed through an AssetPathResolver, which is where release
versioning plugs in.
"""
from __future__ import annotations

import re
from pathlib import Path

from ..logging_conf import get_logger
from .resolvers import AssetPathResolver

__all__ = [
    "CSS_ASSET_RE",
    "is_external",
    "rewrite_stylesheet",
    "rewrite_stylesheet_file",
]

logger = get_logger("service.stylesheets")

# url(path.ext) with optional quotes and an optional numeric cache-buster.
CSS_ASSET_RE = re.compile(
    r"""url\(\s*(?P<quote>['"]?)(?P<path>[^\s)'"?]+\.[A-Za-z0-9]+)(?P<query>\?\d+)?(?P=quote)\s*\)"""
)

_EXTERNAL_RE = re.compile(r"^(?:[A-Za-z][A-Za-z0-9+.-]*:|//)")


def is_external(path: str) -> bool:
    """True for URLs with a scheme (http:, data:, ...) or protocol-relative ones."""
    return bool(_EXTERNAL_RE.match(path))


def rewrite_stylesheet(css: str, source_file_path: str, resolver: AssetPathResolver) -> str:
    changed = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal changed
        path = match.group("path")
        if is_external(path):
            return match.group(0)
        resolved = resolver.resolve(path, source_file_path)
        if resolved == path:
            return match.group(0)
        changed += 1
        quote = match.group("quote")
        query = match.group("query") or ""
        return f"url({quote}{resolved}{query}{quote})"

    out = CSS_ASSET_RE.sub(_replace, css)
    if changed:
        logger.info(
            "stylesheet.rewritten",
            extra={"event": "stylesheet_rewritten", "source": source_file_path, "changed": changed},
        )
    return out


def rewrite_stylesheet_file(path: str | Path, resolver: AssetPathResolver) -> str:
    """Read a UTF-8 stylesheet and return it with references resolved."""
    p = Path(path)
    return rewrite_stylesheet(p.read_text(encoding="utf-8"), str(p), resolver)
