from __future__ import annotations

import posixpath
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..domain.paths import PathVersioner
from ..domain.policy import ConfigSource, VersioningPolicy
from ..domain.release import EnvReleaseVersion, ReleaseVersion
from ..logging_conf import get_logger

__all__ = [
    "AssetPathResolver",
    "PassThroughResolver",
    "PublicRootResolver",
    "VersioningResolver",
    "build_resolver",
]

logger = get_logger("service.resolvers")


@runtime_checkable
class AssetPathResolver(Protocol):
    """Maps an asset path referenced from ``source_file_path`` to its final form."""

    def resolve(self, path: str, source_file_path: str) -> str: ...


class PassThroughResolver:
    def resolve(self, path: str, source_file_path: str) -> str:
        return path


class PublicRootResolver:
    """Re-express relative stylesheet references as absolute public paths.

    ``url(../images/bg.png)`` in ``public/stylesheets/site.css`` resolves to
    ``/images/bg.png``. Absolute paths and references that climb out of the
    public root are returned unchanged.
    """

    def __init__(self, public_root: str | Path):
        self.public_root = Path(public_root).resolve()

    def resolve(self, path: str, source_file_path: str) -> str:
        if not path or path.startswith("/"):
            return path
        source_dir = Path(source_file_path).resolve().parent
        full_path = Path(posixpath.normpath((source_dir / path).as_posix()))
        try:
            relative = full_path.relative_to(self.public_root)
        except ValueError:
            return path
        return "/" + relative.as_posix()


class VersioningResolver:
    """Decorate a host resolver with release-path versioning.

    While the policy is active the inner resolver is bypassed and the raw
    path is versioned. While inactive the inner result is returned as is.
    """

    def __init__(
        self,
        inner: AssetPathResolver,
        policy: VersioningPolicy,
        versioner: PathVersioner,
        release: ReleaseVersion,
    ):
        self.inner = inner
        self.policy = policy
        self.versioner = versioner
        self.release = release

    def resolve(self, path: str, source_file_path: str) -> str:
        if not self.policy.is_active():
            return self.inner.resolve(path, source_file_path)

        versioned = self.versioner.apply(path, self.release.current())
        if versioned != path:
            logger.info(
                "Rewriting %s as %s",
                path,
                versioned,
                extra={"event": "asset_path_rewritten", "source": source_file_path},
            )
        return versioned


def build_resolver(
    config: ConfigSource,
    *,
    inner: AssetPathResolver | None = None,
    release: ReleaseVersion | None = None,
) -> VersioningResolver:
    """Wire a VersioningResolver around ``inner`` (pass-through by default).

    The strategy is read from the configuration once, here.
    """
    policy = VersioningPolicy(config)
    return VersioningResolver(
        inner=inner or PassThroughResolver(),
        policy=policy,
        versioner=PathVersioner(policy.config.versioning_strategy),
        release=release if release is not None else EnvReleaseVersion(),
    )
