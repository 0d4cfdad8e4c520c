"""Tests for settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from core import logging_config
from core.config import AppSettings, RendererKind, get_user_config_dir


# --- AppSettings ---

def test_defaults():
    settings = AppSettings()
    assert settings.tick_interval_seconds == 0.25
    assert settings.poll_timeout_seconds == 0.1
    assert settings.quit_keys == "q"
    assert settings.renderer is RendererKind.AUTO
    assert settings.fail_on_command_error is False
    assert settings.command_timeout_seconds is None


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ENDZEIT_TICK_INTERVAL_SECONDS", "0.5")
    monkeypatch.setenv("ENDZEIT_RENDERER", "plain")
    monkeypatch.setenv("ENDZEIT_FAIL_ON_COMMAND_ERROR", "true")
    monkeypatch.setenv("ENDZEIT_QUIT_KEYS", "qx")
    settings = AppSettings()
    assert settings.tick_interval_seconds == 0.5
    assert settings.renderer is RendererKind.PLAIN
    assert settings.fail_on_command_error is True
    assert settings.quit_keys == "qx"


def test_command_timeout_from_env(monkeypatch):
    monkeypatch.setenv("ENDZEIT_COMMAND_TIMEOUT_SECONDS", "30")
    assert AppSettings().command_timeout_seconds == 30.0


def test_command_timeout_must_be_positive(monkeypatch):
    monkeypatch.setenv("ENDZEIT_COMMAND_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError):
        AppSettings()


def test_dotenv_in_working_directory(tmp_path):
    (tmp_path / ".env").write_text("ENDZEIT_RENDERER=gauge\n", encoding="utf-8")
    assert AppSettings().renderer is RendererKind.GAUGE


def test_poll_timeout_must_fit_in_tick(monkeypatch):
    monkeypatch.setenv("ENDZEIT_POLL_TIMEOUT_SECONDS", "0.3")
    with pytest.raises(ValidationError):
        AppSettings()


def test_tick_interval_must_be_positive(monkeypatch):
    monkeypatch.setenv("ENDZEIT_TICK_INTERVAL_SECONDS", "0")
    with pytest.raises(ValidationError):
        AppSettings()


def test_user_config_dir_respects_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "endzeit"


# --- RendererKind ---

@pytest.mark.parametrize(
    "kind, interactive, expected",
    [
        (RendererKind.AUTO, True, RendererKind.GAUGE),
        (RendererKind.AUTO, False, RendererKind.PLAIN),
        (RendererKind.GAUGE, False, RendererKind.GAUGE),
        (RendererKind.PLAIN, True, RendererKind.PLAIN),
    ],
)
def test_renderer_resolution(kind, interactive, expected):
    assert kind.resolve(interactive=interactive) is expected


# --- Logging ---

def test_configure_logging_installs_single_handler(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    monkeypatch.setattr(root, "level", root.level)
    before = len(root.handlers)

    logging_config.configure_logging("debug")
    logging_config.configure_logging("info")

    assert len(root.handlers) == before + 1
    assert root.level == logging.INFO
