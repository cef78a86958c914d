"""Fixtures compartilhadas dos testes do E-Plenarius."""

import asyncio

import pytest
from starlette.testclient import TestClient

from database import MemoryStorage, UserStore, ChamberStore
from web.app import create_app
from web.config import WebConfig


@pytest.fixture
def storage():
    """Armazenamento em memória, vazio a cada teste."""
    return MemoryStorage()


@pytest.fixture
def user_store(storage):
    return UserStore(storage)


@pytest.fixture
def chamber_store(storage):
    return ChamberStore(storage)


@pytest.fixture
def config():
    return WebConfig(
        secret_key="test-secret",
        database_url="sqlite+aiosqlite://",
        message_timeout=5,
        close_delay=2,
    )


@pytest.fixture
def client(config, storage):
    """Cliente HTTP da aplicação usando o armazenamento em memória."""
    app = create_app(config, storage=storage)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def run():
    """Executa uma corrotina de um teste síncrono."""
    return asyncio.run
