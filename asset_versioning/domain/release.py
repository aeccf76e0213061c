from __future__ import annotations

import os

__all__ = [
    "ASSET_ID_ENV",
    "ReleaseVersion",
    "EnvReleaseVersion",
    "current_version",
    "set_current_version",
]

# Rails' cache-busting token doubles as the release identifier.
ASSET_ID_ENV = "RAILS_ASSET_ID"


class ReleaseVersion:
    """Holds the release token injected into resolvers and helpers.

    An empty token means "do not version". ``set`` rebinds a single str
    reference, so concurrent readers see either the old or the new value.
    """

    def __init__(self, value: str | None = ""):
        self._value = value or ""

    def current(self) -> str:
        return self._value

    def set(self, value: str | None) -> None:
        self._value = value or ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.current()!r})"


class EnvReleaseVersion(ReleaseVersion):
    """Release token backed by an environment variable (RAILS_ASSET_ID)."""

    def __init__(self, var_name: str = ASSET_ID_ENV):
        self.var_name = var_name

    def current(self) -> str:
        return os.getenv(self.var_name) or ""

    def set(self, value: str | None) -> None:
        if value:
            os.environ[self.var_name] = value
        else:
            os.environ.pop(self.var_name, None)


def current_version() -> str:
    """Return RAILS_ASSET_ID, or an empty string when unset."""
    return EnvReleaseVersion().current()


def set_current_version(value: str | None) -> None:
    """Write RAILS_ASSET_ID; an empty value unsets it."""
    EnvReleaseVersion().set(value)
