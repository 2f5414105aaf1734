"""Tests for environment-driven configuration."""

import os

from polyimg.config import Settings, configure_logging


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("POLYIMG_MAX_NODES", "42")
    assert Settings().polyimg_max_nodes == 42


def test_env_file_loaded_only_on_configure(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("POLYIMG_TEST_MARKER=1\n")
    monkeypatch.delenv("POLYIMG_TEST_MARKER", raising=False)

    import polyimg  # noqa: F401

    assert "POLYIMG_TEST_MARKER" not in os.environ
    configure_logging("debug", env_file=str(env_file))
    assert os.environ["POLYIMG_TEST_MARKER"] == "1"
    monkeypatch.delenv("POLYIMG_TEST_MARKER")
