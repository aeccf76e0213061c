from __future__ import annotations

from ..domain.paths import PathVersioner
from ..domain.policy import ConfigSource, VersioningPolicy
from ..domain.release import EnvReleaseVersion, ReleaseVersion

__all__ = ["asset_host", "asset_path", "asset_url"]


def asset_host(config: ConfigSource) -> str:
    """Host to advertise for assets: the CloudFront host, else the S3 bucket host."""
    return VersioningPolicy(config).resolve_host()


def asset_path(path: str, *, config: ConfigSource, release: ReleaseVersion | None = None) -> str:
    """Path a template should emit for ``path``.

    Versioned only when the policy is active; otherwise returned as given.
    """
    policy = VersioningPolicy(config)
    if not policy.is_active():
        return path
    release = release if release is not None else EnvReleaseVersion()
    return PathVersioner(policy.config.versioning_strategy).apply(path, release.current())


def asset_url(
    path: str,
    *,
    config: ConfigSource,
    release: ReleaseVersion | None = None,
    scheme: str = "https",
) -> str:
    """Fully qualified URL for ``path`` on the asset host."""
    resolved = asset_path(path, config=config, release=release)
    if not resolved.startswith("/"):
        resolved = "/" + resolved
    return f"{scheme}://{asset_host(config)}{resolved}"
