"""Tests for config.py loading and validation."""

import logging

import pytest

from retag.config import (
    DEFAULT_ID3_VERSION, DEFAULT_OUTPUT_SUFFIX, eprint, load_config,
    setup_logging, validate_config,
)

ENV_VARS = ("RETAG_OUTPUT_SUFFIX", "RETAG_ID3_VERSION", "RETAG_NO_COLOR")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure values loaded from .env files do not leak between tests."""
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_env_file(self, tmp_path, capsys):
        """Should warn and fall back to defaults when .env is missing."""
        config = load_config(str(tmp_path / "missing.env"))
        assert config["output_suffix"] == DEFAULT_OUTPUT_SUFFIX
        assert config["id3_version"] == DEFAULT_ID3_VERSION
        assert config["no_color"] is False
        assert "Warning" in capsys.readouterr().err

    def test_reads_env_file(self, tmp_path, capsys):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "RETAG_OUTPUT_SUFFIX=_tagged\n"
            "RETAG_ID3_VERSION=3\n"
            "RETAG_NO_COLOR=true\n"
        )
        config = load_config(str(env_file))
        assert config["output_suffix"] == "_tagged"
        assert config["id3_version"] == 3
        assert config["no_color"] is True
        assert "Loaded environment" in capsys.readouterr().err

    def test_process_env_is_used(self, tmp_path, monkeypatch):
        monkeypatch.setenv("RETAG_ID3_VERSION", "3")
        assert load_config(str(tmp_path / "missing.env"))["id3_version"] == 3

    def test_invalid_version_becomes_none(self, tmp_path, monkeypatch):
        monkeypatch.setenv("RETAG_ID3_VERSION", "four")
        assert load_config(str(tmp_path / "missing.env"))["id3_version"] is None


class TestValidateConfig:
    """Tests for validate_config."""

    def test_valid_config(self):
        config = {"output_suffix": "-edited", "id3_version": 4, "no_color": False}
        assert validate_config(config) == []

    @pytest.mark.parametrize("version", [2, 5, None])
    def test_rejects_bad_id3_version(self, version):
        problems = validate_config({"output_suffix": "-edited", "id3_version": version})
        assert len(problems) == 1
        assert "RETAG_ID3_VERSION" in problems[0]

    @pytest.mark.parametrize("suffix", ["", "   "])
    def test_rejects_empty_suffix(self, suffix):
        problems = validate_config({"output_suffix": suffix, "id3_version": 4})
        assert problems == ["RETAG_OUTPUT_SUFFIX must not be empty"]

    def test_rejects_path_separator_in_suffix(self):
        problems = validate_config({"output_suffix": "/edited", "id3_version": 4})
        assert "path separators" in problems[0]


class TestHelpers:
    """Tests for eprint and setup_logging."""

    def test_eprint_writes_to_stderr(self, capsys):
        eprint("oops")
        captured = capsys.readouterr()
        assert captured.err == "oops\n"
        assert captured.out == ""

    def test_setup_logging_levels(self):
        assert setup_logging(verbose=True).level == logging.DEBUG
        logger = setup_logging(verbose=False)
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
