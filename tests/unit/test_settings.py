"""Testes de Settings (variáveis de ambiente WHATSAPP_*)."""

from __future__ import annotations

import pytest

from whatsapp_cloud.config.settings import GRAPH_API_VERSION, Settings, get_settings


def test_settings_read_prefixed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WHATSAPP_TOKEN", "env-token")
    monkeypatch.setenv("WHATSAPP_PHONE_NUMBER_ID", "123")
    monkeypatch.setenv("WHATSAPP_API_VERSION", "v21.0")

    settings = Settings(_env_file=None)

    assert settings.token == "env-token"
    assert settings.phone_number_id == "123"
    assert settings.api_version == "v21.0"


def test_defaults_without_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WHATSAPP_API_VERSION", raising=False)

    settings = Settings(_env_file=None)

    assert settings.api_version == GRAPH_API_VERSION
    assert settings.app_secret is None
    assert settings.is_production is False


def test_to_api_config_snapshot() -> None:
    settings = Settings(_env_file=None, token="t", phone_number_id="p", verify_token="v")

    config = settings.to_api_config()

    assert config.token == "t"
    assert config.phone_number_id == "p"
    assert config.verify_token == "v"
    assert config.api_root == settings.api_endpoint


def test_validate_whatsapp_config_reports_missing() -> None:
    settings = Settings(_env_file=None, token="", phone_number_id="")

    errors = settings.validate_whatsapp_config()

    assert "WHATSAPP_PHONE_NUMBER_ID não configurado" in errors
    assert "WHATSAPP_TOKEN não configurado" in errors


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
