"""Testes dos backends de armazenamento local."""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from database import Base, MemoryStorage, DatabaseStorage, UserStore


@pytest.fixture
async def db_storage(tmp_path):
    """DatabaseStorage sobre um SQLite temporário."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'storage.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    yield DatabaseStorage(session_maker)

    await engine.dispose()


@pytest.fixture(params=["memory", "database"])
def any_storage(request, db_storage):
    if request.param == "memory":
        return MemoryStorage()
    return db_storage


async def test_missing_key_returns_none(any_storage):
    assert await any_storage.get_item("@EPlenarius:usuarios") is None


async def test_set_then_get(any_storage):
    await any_storage.set_item("chave", '["a"]')

    assert await any_storage.get_item("chave") == '["a"]'


async def test_set_overwrites(any_storage):
    await any_storage.set_item("chave", "1")
    await any_storage.set_item("chave", "2")

    assert await any_storage.get_item("chave") == "2"


async def test_remove_item(any_storage):
    await any_storage.set_item("chave", "1")
    await any_storage.remove_item("chave")
    await any_storage.remove_item("inexistente")

    assert await any_storage.get_item("chave") is None


async def test_clear(any_storage):
    await any_storage.set_item("a", "1")
    await any_storage.set_item("b", "2")
    await any_storage.clear()

    assert await any_storage.get_item("a") is None
    assert await any_storage.get_item("b") is None


async def test_user_store_over_database_storage(db_storage):
    store = UserStore(db_storage)
    user = await store.add_user(name="X", email="x@x.com", password="pw")

    reloaded = await UserStore(db_storage).get_user_by_id(user.id)

    assert reloaded == user
    assert [u.id for u in await store.list_users()] == ["1", "2", user.id]


def test_memory_storage_initial_items():
    storage = MemoryStorage({"chave": "valor"})

    assert "chave" in storage
    assert len(storage) == 1
