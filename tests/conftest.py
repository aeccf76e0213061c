"""Shared fixtures for the asset versioning tests."""

from __future__ import annotations

import logging

import pytest

from asset_versioning.domain.policy import AssetsConfig
from asset_versioning.domain.release import ASSET_ID_ENV, ReleaseVersion

CLOUDFRONT_HOST = "d1234.cloudfront.net"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep the release token and config path from leaking between tests."""
    monkeypatch.delenv(ASSET_ID_ENV, raising=False)
    monkeypatch.delenv("ASSETS_CONFIG", raising=False)
    yield
    pkg = logging.getLogger("asset_versioning")
    for handler in list(pkg.handlers):
        pkg.removeHandler(handler)
    pkg.setLevel(logging.NOTSET)


@pytest.fixture
def active_config() -> AssetsConfig:
    return AssetsConfig(
        package_assets=True,
        s3_cloudfront_host=CLOUDFRONT_HOST,
        s3_bucket="my-assets",
    )


@pytest.fixture
def inactive_config() -> AssetsConfig:
    return AssetsConfig(package_assets=False, s3_bucket="my-assets")


@pytest.fixture
def release() -> ReleaseVersion:
    return ReleaseVersion("1")


@pytest.fixture
def assets_yml(tmp_path):
    """Write an assets.yml and return its path."""

    def _write(body: str):
        path = tmp_path / "assets.yml"
        path.write_text(body, encoding="utf-8")
        return path

    return _write
