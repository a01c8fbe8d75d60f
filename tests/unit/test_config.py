"""Unit tests for shapekit.config."""

import pytest

from shapekit import config
from shapekit.errors import InvalidEncodingError, InvalidReadFlagError

# pylint: disable=magic-value-comparison

pytestmark = pytest.mark.usefixtures("clean_shapekit_env")


def test_defaults():
    """Without environment overrides the built-in defaults apply."""
    assert config.get_default_encoding() == "utf-8"
    assert config.get_default_read_flag() == "r"
    assert config.get_shell_executable() is None


def test_environment_overrides(monkeypatch):
    """Environment variables replace the defaults at call time."""
    monkeypatch.setenv(config.ENCODING_ENV_VAR, "latin-1")
    monkeypatch.setenv(config.READ_FLAG_ENV_VAR, "rb")
    monkeypatch.setenv(config.SHELL_ENV_VAR, "/bin/bash")
    assert config.get_default_encoding() == "latin-1"
    assert config.get_default_read_flag() == "rb"
    assert config.get_shell_executable() == "/bin/bash"


def test_empty_variables_fall_back_to_defaults(monkeypatch):
    """An empty value counts as unset."""
    monkeypatch.setenv(config.ENCODING_ENV_VAR, "")
    monkeypatch.setenv(config.SHELL_ENV_VAR, "")
    assert config.get_default_encoding() == "utf-8"
    assert config.get_shell_executable() is None


def test_unknown_encoding_from_environment(monkeypatch):
    """An unknown encoding name is reported, not silently used."""
    monkeypatch.setenv(config.ENCODING_ENV_VAR, "klingon-8")
    with pytest.raises(InvalidEncodingError, match="Unknown text encoding: 'klingon-8'"):
        config.get_default_encoding()


@pytest.mark.parametrize("flag", ["w", "a", "r+", "x", "wb"])
def test_write_flags_are_rejected(flag):
    """Flags that could modify a file are not read-only modes."""
    with pytest.raises(InvalidReadFlagError) as exc:
        config.validate_read_flag(flag)
    assert exc.value.flag == flag


@pytest.mark.parametrize("flag", ["r", "rb", "rt", "br"])
def test_read_flags_are_accepted(flag):
    """Plain read modes pass validation unchanged."""
    assert config.validate_read_flag(flag) == flag


@pytest.mark.parametrize("flag", ["q", "rr", "b", "rbt", "rU"])
def test_malformed_flags_are_rejected(flag):
    """Anything but one `r` with at most one of `b`/`t` is refused."""
    with pytest.raises(InvalidReadFlagError, match="is not a read-only mode"):
        config.validate_read_flag(flag)


def test_malformed_flag_from_environment(monkeypatch):
    """SHAPEKIT_READ_FLAG goes through the same validation."""
    monkeypatch.setenv(config.READ_FLAG_ENV_VAR, "q")
    with pytest.raises(InvalidReadFlagError):
        config.get_default_read_flag()
