"""Tests for platform_dirs.py."""

import sys
from pathlib import Path
from unittest.mock import patch

from azmgmt.config.platform_dirs import (
    get_config_location,
    get_logs_location,
    in_virtualenv,
    is_user_install,
)


class TestInVirtualenv:
    """Test virtual environment detection."""

    def test_in_virtualenv_true(self):
        with (
            patch.object(sys, "prefix", "/path/to/venv"),
            patch.object(sys, "base_prefix", "/usr/local"),
        ):
            assert in_virtualenv() is True

    def test_in_virtualenv_false(self):
        with (
            patch.object(sys, "prefix", "/usr/local"),
            patch.object(sys, "base_prefix", "/usr/local"),
        ):
            assert in_virtualenv() is False


class TestIsUserInstall:
    """Test user installation detection."""

    def test_is_user_install_true(self):
        with (
            patch("pathlib.Path.home", return_value=Path("/home/user")),
            patch.object(sys, "prefix", "/home/user/.local"),
        ):
            assert is_user_install() is True

    def test_is_user_install_false_system(self):
        with (
            patch("pathlib.Path.home", return_value=Path("/home/user")),
            patch.object(sys, "prefix", "/usr/local"),
        ):
            assert is_user_install() is False


class TestGetConfigLocation:
    """Test config directory resolution order."""

    def test_environment_variable_wins(self, monkeypatch, tmp_path):
        monkeypatch.setenv("AZMGMT_CONFIG_DIR", str(tmp_path / "custom"))

        assert get_config_location() == tmp_path / "custom"

    def test_development_checkout(self, monkeypatch, tmp_path):
        monkeypatch.delenv("AZMGMT_CONFIG_DIR", raising=False)
        (tmp_path / "pyproject.toml").write_text("[project]\n", encoding="utf-8")
        nested = tmp_path / "src" / "pkg"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        assert get_config_location() == tmp_path / "config"


class TestGetLogsLocation:
    """Test logs directory resolution."""

    def test_environment_variable(self, monkeypatch, tmp_path):
        monkeypatch.setenv("AZMGMT_LOG_DIR", str(tmp_path / "logs"))

        assert get_logs_location() == tmp_path / "logs"

    def test_sibling_of_config_dir(self, monkeypatch, tmp_path):
        monkeypatch.delenv("AZMGMT_LOG_DIR", raising=False)
        monkeypatch.setenv("AZMGMT_CONFIG_DIR", str(tmp_path / "config"))

        assert get_logs_location() == tmp_path / "logs"
