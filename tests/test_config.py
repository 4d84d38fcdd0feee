from __future__ import annotations

import pytest

from term_editor import __version__
from term_editor.config import EditorSettings, env_flag
from term_editor.runtime import telemetry


def test_default_settings() -> None:
    settings = EditorSettings()

    assert settings.quit_times == 3
    assert settings.status_bar_height == 2
    assert settings.message_lifetime == 5.0
    assert settings.welcome_text == f"Term editor -- version {__version__}"


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TERM_EDITOR_QUIT_TIMES", "1")
    monkeypatch.setenv("TERM_EDITOR_MESSAGE_LIFETIME", "not-a-number")

    settings = EditorSettings.from_env()

    assert settings.quit_times == 1
    assert settings.message_lifetime == 5.0


def test_env_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TERM_EDITOR_SAMPLE", "yes")
    assert env_flag("SAMPLE", False)

    monkeypatch.setenv("TERM_EDITOR_SAMPLE", "off")
    assert not env_flag("SAMPLE", True)

    monkeypatch.delenv("TERM_EDITOR_SAMPLE")
    assert env_flag("SAMPLE", True)


def test_configure_rejects_conflicting_arguments() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="production")
    with pytest.raises(ValueError):
        telemetry.configure(preset="no-such-preset")


def test_span_collects_metadata_and_reraises() -> None:
    with telemetry.span("test::ok", metadata={"n": 1}) as handle:
        handle.add_metadata("rows", [1, 2])
    assert handle.metadata == {"n": "1", "rows": "[1, 2]"}

    with pytest.raises(KeyError):
        with telemetry.span("test::fail", component=True):
            raise KeyError("missing")
