"""Tests for asset_versioning/domain/paths.py."""

from __future__ import annotations

import logging

import pytest

from asset_versioning.domain.paths import (
    PathVersioner,
    Strategy,
    insert_version_before_extension,
    prepend_path_with_version,
    split_extension,
)


class TestPrefixStrategy:
    """Release identifier as the assets root."""

    def test_absolute_path(self):
        assert prepend_path_with_version("/images/logo.png", "1") == "/1/images/logo.png"

    def test_relative_path(self):
        assert prepend_path_with_version("images/logo.png", "1") == "1/images/logo.png"

    @pytest.mark.parametrize("path", ["/images/logo.png", "images/logo.png", "logo", "/"])
    def test_absolute_rule_is_literal_concatenation(self, path):
        if path.startswith("/"):
            assert prepend_path_with_version(path, "v9") == "/v9" + path
        else:
            assert prepend_path_with_version(path, "v9") == "v9/" + path

    @pytest.mark.parametrize("version", ["", None])
    def test_empty_version_is_identity(self, version):
        assert prepend_path_with_version("/images/logo.png", version) == "/images/logo.png"

    @pytest.mark.parametrize("path", ["", None])
    def test_empty_path_is_identity(self, path):
        assert prepend_path_with_version(path, "1") == path

    def test_not_idempotent(self):
        """Applying twice stacks a second version segment."""
        once = prepend_path_with_version("/images/logo.png", "1")
        twice = prepend_path_with_version(once, "1")
        assert twice == "/1/1/images/logo.png"
        assert twice != once


class TestExtensionStrategy:
    """Release identifier inserted before the file extension."""

    def test_inserts_before_extension(self):
        assert insert_version_before_extension("images/logo.png", "1") == "images/logo.1.png"

    def test_uses_last_dot_of_final_segment(self):
        assert (
            insert_version_before_extension("/js/v1.2/app.min.js", "42")
            == "/js/v1.2/app.min.42.js"
        )

    def test_dot_in_directory_only(self):
        assert insert_version_before_extension("assets.v1/readme", "7") == "assets.v1/readme.7"

    @pytest.mark.parametrize("version", ["", None])
    def test_empty_version_is_identity(self, version):
        assert insert_version_before_extension("images/logo.png", version) == "images/logo.png"

    def test_empty_path_is_identity(self):
        assert insert_version_before_extension("", "1") == ""


class TestSplitExtension:
    def test_split(self):
        assert split_extension("images/logo.png") == ("images/logo", ".png")

    def test_dotfile_has_no_extension(self):
        assert split_extension("/public/.htaccess") == ("/public/.htaccess", "")


class TestPathVersioner:
    """Strategy selection and the change trace hook."""

    def test_defaults_to_prefix(self):
        versioner = PathVersioner()
        assert versioner.strategy is Strategy.prefix
        assert versioner.apply("/images/logo.png", "1") == "/1/images/logo.png"

    def test_extension_strategy_by_name(self):
        versioner = PathVersioner("extension")
        assert versioner.strategy is Strategy.extension
        assert versioner.apply("images/logo.png", "1") == "images/logo.1.png"

    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValueError):
            PathVersioner("suffix")

    def test_trace_called_only_on_change(self):
        seen: list[tuple[str, str]] = []
        versioner = PathVersioner(trace=lambda old, new: seen.append((old, new)))

        versioner.apply("/a.css", "")
        versioner.apply("", "3")
        versioner.apply("/a.css", "3")

        assert seen == [("/a.css", "/3/a.css")]

    def test_does_not_mutate_inputs(self):
        path, version = "images/logo.png", "1"
        PathVersioner(trace=lambda *_: None).apply(path, version)
        assert (path, version) == ("images/logo.png", "1")

    def test_default_trace_logs_change(self, caplog):
        caplog.set_level(logging.INFO, logger="asset_versioning")
        PathVersioner().apply("/images/logo.png", "1")
        assert "Changing /images/logo.png to /1/images/logo.png" in caplog.text

    def test_default_trace_silent_without_change(self, caplog):
        caplog.set_level(logging.INFO, logger="asset_versioning")
        PathVersioner().apply("/images/logo.png", "")
        assert "Changing" not in caplog.text
