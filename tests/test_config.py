"""Tests for configuration loading."""

import pytest

from kingtime import config as config_module
from kingtime.config import Config
from kingtime.errors import ConfigNotFoundError


def test_from_env(monkeypatch):
    """Test loading configuration from environment variables."""
    monkeypatch.setenv("KINGTIME_ACCESS_TOKEN", "secret")
    monkeypatch.setenv("KINGTIME_EMPLOYEE_CODE", "1000")

    assert Config.from_env() == Config(access_token="secret", employee_code="1000")


def test_from_env_incomplete(monkeypatch):
    """Test a partial environment is ignored."""
    monkeypatch.setenv("KINGTIME_ACCESS_TOKEN", "secret")
    monkeypatch.delenv("KINGTIME_EMPLOYEE_CODE", raising=False)

    assert Config.from_env() is None


def test_save_and_load(tmp_path):
    """Test a saved configuration loads back."""
    path = tmp_path / "kingtime" / "config.ini"
    config = Config(access_token="se%cret", employee_code="1000")

    config.save(path)

    assert Config.load(path) == config
    assert path.stat().st_mode & 0o777 == 0o600


def test_load_missing(tmp_path):
    """Test loading when no file exists."""
    assert Config.load(tmp_path / "missing.ini") is None


def test_load_wrong_section(tmp_path):
    """Test a file without the kingtime section."""
    path = tmp_path / "config.ini"
    path.write_text("[recoru]\naccessToken = secret\nemployeeCode = 1000\n")

    with pytest.raises(ConfigNotFoundError, match="kingtime"):
        Config.load(path)


def test_load_missing_key(tmp_path):
    """Test a file without the employee code."""
    path = tmp_path / "config.ini"
    path.write_text("[kingtime]\naccessToken = secret\n")

    with pytest.raises(ConfigNotFoundError, match="employeeCode"):
        Config.load(path)


def test_load_unparsable(tmp_path):
    """Test a file that is not ini."""
    path = tmp_path / "config.ini"
    path.write_text("accessToken = secret\n")

    with pytest.raises(ConfigNotFoundError):
        Config.load(path)


def test_save_replaces_loose_permissions(tmp_path):
    """Test saving over a world-readable file restricts it to the owner."""
    path = tmp_path / "config.ini"
    path.write_text("")
    path.chmod(0o644)

    Config(access_token="secret", employee_code="1000").save(path)

    assert path.stat().st_mode & 0o777 == 0o600
    assert Config.load(path) == Config(access_token="secret", employee_code="1000")


def test_default_path(tmp_path, monkeypatch):
    """Test the default path is resolved when loading and saving."""
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", tmp_path / "kingtime" / "config.ini")

    Config(access_token="secret", employee_code="1000").save()

    assert Config.load() == Config(access_token="secret", employee_code="1000")
