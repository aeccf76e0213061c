"""Embed a release identifier in asset paths served from S3/CloudFront.

CloudFront ignores cache-busting query strings, so each release gets its
own path prefix (or file-name infix) instead.
"""
from importlib.metadata import PackageNotFoundError, version

from .domain.paths import PathVersioner, Strategy
from .domain.policy import AssetsConfig, VersioningPolicy
from .domain.release import EnvReleaseVersion, ReleaseVersion, current_version, set_current_version
from .service.resolvers import (
    AssetPathResolver,
    PassThroughResolver,
    PublicRootResolver,
    VersioningResolver,
    build_resolver,
)

try:
    __version__ = version("s3-asset-versioning")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "AssetPathResolver",
    "AssetsConfig",
    "EnvReleaseVersion",
    "PassThroughResolver",
    "PathVersioner",
    "PublicRootResolver",
    "ReleaseVersion",
    "Strategy",
    "VersioningPolicy",
    "VersioningResolver",
    "build_resolver",
    "current_version",
    "set_current_version",
]
