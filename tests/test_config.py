"""Tests for configuration loading."""

import logging
from pathlib import Path

import pytest

from wcli.wcli_core.config import Config, parse_timeout
from wcli.wcli_core.errors import ConfigError


@pytest.fixture
def env_file(tmp_path: Path) -> Path:
    path = tmp_path / ".env"
    path.write_text(
        "PASS='password'\n"
        "EC2='ec2-user@ec2-1-2-3-4.compute.amazonaws.com'\n"
        "PEM='/home/user/key.pem'\n"
    )
    return path


def test_load_from_env_file(env_file: Path) -> None:
    config = Config.load(env_file, environ={})

    assert config.password == "password"
    assert config.host == "ec2-user@ec2-1-2-3-4.compute.amazonaws.com"
    assert config.pem == "/home/user/key.pem"
    assert config.ssh_binary == "ssh"
    assert config.command_timeout is None
    assert config.package_manager == "yum"


def test_environment_overrides_file(env_file: Path) -> None:
    config = Config.load(env_file, environ={"EC2": "root@other", "WCLI_PACKAGE_MANAGER": "dnf"})

    assert config.host == "root@other"
    assert config.package_manager == "dnf"
    assert config.password == "password"


def test_missing_env_file_uses_environment(tmp_path: Path) -> None:
    config = Config.load(tmp_path / "absent.env", environ={"PASS": "pw", "PEM": "k.pem", "EC2": "h"})

    assert config.host == "h"


def test_missing_keys_are_all_reported(tmp_path: Path) -> None:
    path = tmp_path / ".env"
    path.write_text("PEM=/key.pem\nPASS=\n")

    with pytest.raises(ConfigError, match="PASS, EC2"):
        Config.load(path, environ={})


def test_optional_settings() -> None:
    config = Config.from_mapping({
        "PASS": "pw",
        "PEM": "k.pem",
        "EC2": "h",
        "WCLI_SSH_OPTIONS": "-o StrictHostKeyChecking=accept-new -p 2222",
        "WCLI_COMMAND_TIMEOUT": "30",
        "WCLI_TEST_RUNNER": "pytest -q",
    })

    assert config.ssh_options == ["-o", "StrictHostKeyChecking=accept-new", "-p", "2222"]
    assert config.command_timeout == 30.0
    assert config.test_runner == "pytest -q"


def test_bad_ssh_options_rejected() -> None:
    with pytest.raises(ConfigError, match="WCLI_SSH_OPTIONS"):
        Config.from_mapping({"PASS": "pw", "PEM": "k", "EC2": "h", "WCLI_SSH_OPTIONS": "-o 'unterminated"})


def test_repr_hides_password() -> None:
    config = Config(password="s3cret", pem="k.pem", host="h")

    assert "s3cret" not in repr(config)


def test_config_is_immutable() -> None:
    config = Config(password="pw", pem="k.pem", host="h")

    with pytest.raises(AttributeError):
        config.password = "other"


@pytest.mark.parametrize("raw, expected", [(None, None), ("", None), ("2.5", 2.5), ("10", 10.0)])
def test_parse_timeout(raw, expected) -> None:
    assert parse_timeout(raw) == expected


@pytest.mark.parametrize("raw", ["soon", "0", "-3"])
def test_parse_timeout_invalid_is_ignored(raw: str, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        assert parse_timeout(raw) is None

    assert "WCLI_COMMAND_TIMEOUT" in caplog.text
