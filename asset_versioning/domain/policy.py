from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from .paths import Strategy

__all__ = [
    "S3_HOST_SUFFIX",
    "AssetsConfig",
    "VersioningPolicy",
]

S3_HOST_SUFFIX = "s3.amazonaws.com"

_TRUTHY = {"always", "on", "yes", "true", "1"}


class AssetsConfig(BaseModel):
    """The slice of assets.yml the versioning layer reads.

    Keys it does not know about are ignored, so the whole file can be fed in.
    """

    model_config = ConfigDict(extra="ignore")

    package_assets: bool = False
    s3_cloudfront_host: str | None = None
    s3_bucket: str | None = None
    versioning_strategy: Strategy = Strategy.prefix

    @field_validator("package_assets", mode="before")
    @classmethod
    def _coerce_package_assets(cls, value: Any) -> bool:
        # "always" forces packaging in every environment.
        if value is None:
            return False
        if isinstance(value, str):
            return value.strip().lower() in _TRUTHY
        return bool(value)

    @field_validator("s3_cloudfront_host", "s3_bucket", mode="before")
    @classmethod
    def _scalar_to_str(cls, value: Any) -> Any:
        # YAML reads an all-digit bucket name as an int.
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "AssetsConfig":
        return cls.model_validate(dict(data or {}))


ConfigSource = AssetsConfig | Callable[[], AssetsConfig]


class VersioningPolicy:
    """Decide whether asset paths get versioned, and which host serves them.

    Both queries re-read the configuration on every call.
    """

    def __init__(self, config: ConfigSource):
        self._source = config

    @property
    def config(self) -> AssetsConfig:
        if isinstance(self._source, AssetsConfig):
            return self._source
        return self._source()

    def is_active(self) -> bool:
        """True only when packaging is on and a CloudFront host is set."""
        cfg = self.config
        return bool(cfg.package_assets and cfg.s3_cloudfront_host)

    def resolve_host(self) -> str:
        cfg = self.config
        if cfg.s3_cloudfront_host:
            return cfg.s3_cloudfront_host
        return f"{cfg.s3_bucket}.{S3_HOST_SUFFIX}"
