"""Testes da configuração carregada do ambiente."""

import pytest

from web.config import WebConfig

ENV_VARS = ["DATABASE_URL", "WEB_SECRET_KEY", "WEB_HOST", "WEB_PORT", "MESSAGE_TIMEOUT", "CLOSE_DELAY"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_database_url_is_required():
    with pytest.raises(ValueError, match="DATABASE_URL"):
        WebConfig.from_env()


def test_defaults(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./test.db")

    config = WebConfig.from_env()

    assert config.port == 8000
    assert config.host == "0.0.0.0"
    assert config.message_timeout == 5
    assert config.close_delay == 2
    # Sem WEB_SECRET_KEY é gerada uma chave aleatória
    assert len(config.secret_key) == 64


def test_values_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
    monkeypatch.setenv("WEB_SECRET_KEY", "chave")
    monkeypatch.setenv("WEB_PORT", "9000")
    monkeypatch.setenv("MESSAGE_TIMEOUT", "3")
    monkeypatch.setenv("CLOSE_DELAY", "1")

    config = WebConfig.from_env()

    assert config.secret_key == "chave"
    assert config.port == 9000
    assert config.message_timeout == 3
    assert config.close_delay == 1


def test_invalid_number(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
    monkeypatch.setenv("WEB_PORT", "porta")

    with pytest.raises(ValueError, match="numérico"):
        WebConfig.from_env()
