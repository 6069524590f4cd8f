"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from macro_tracker.config import Settings


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    monkeypatch.delenv("TRANSPORT", raising=False)
    monkeypatch.delenv("PORT", raising=False)

    settings = Settings(_env_file=None)

    assert settings.github_token == "env-token"
    assert settings.repository == "PeterBowles/Macro_Tracker"
    assert settings.github_file_path == "data.json"
    assert settings.github_branch == "main"
    assert settings.transport == "http"
    assert settings.port == 7870
    assert settings.refresh_sha_before_commit is False


def test_settings_read_transport_and_port(monkeypatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    monkeypatch.setenv("TRANSPORT", "stdio")
    monkeypatch.setenv("PORT", "9000")

    settings = Settings(_env_file=None)

    assert settings.transport == "stdio"
    assert settings.port == 9000


def test_settings_require_token(monkeypatch) -> None:
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_reject_unknown_transport(monkeypatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    monkeypatch.setenv("TRANSPORT", "carrier-pigeon")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
