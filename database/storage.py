"""Armazenamento chave/valor dos dados do painel

Cada chave guarda um único blob JSON, como o localStorage do navegador.
O backend é injetado nos stores: MemoryStorage para testes e execução
local, DatabaseStorage para persistência via SQLAlchemy.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import Callable, Dict, Optional
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from .models import StorageItem

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


class LocalStorage(ABC):
    """Interface do armazenamento chave/valor"""

    @abstractmethod
    async def get_item(self, key: str) -> Optional[str]:
        """Retorna o valor da chave ou None se ela não existir"""

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        """Grava (sobrescreve) o valor da chave"""

    @abstractmethod
    async def remove_item(self, key: str) -> None:
        """Remove a chave; não faz nada se ela não existir"""

    @abstractmethod
    async def clear(self) -> None:
        """Remove todas as chaves"""


class MemoryStorage(LocalStorage):
    """Armazenamento em memória (perde os dados ao reiniciar)"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    async def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    async def clear(self) -> None:
        self._items.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)


class DatabaseStorage(LocalStorage):
    """Armazenamento na tabela local_storage

    Args:
        session_factory: Fábrica de sessões assíncronas, por exemplo
            get_session do módulo database ou um async_sessionmaker
    """

    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    async def get_item(self, key: str) -> Optional[str]:
        async with self._session_factory() as session:
            item = await session.get(StorageItem, key)
            return item.value if item else None

    async def set_item(self, key: str, value: str) -> None:
        async with self._session_factory() as session:
            item = await session.get(StorageItem, key)
            if item is None:
                session.add(StorageItem(key=key, value=value))
            else:
                item.value = value
            await session.commit()
        logger.debug(f"Chave {key} gravada ({len(value)} bytes)")

    async def remove_item(self, key: str) -> None:
        async with self._session_factory() as session:
            await session.execute(delete(StorageItem).where(StorageItem.key == key))
            await session.commit()

    async def clear(self) -> None:
        async with self._session_factory() as session:
            await session.execute(delete(StorageItem))
            await session.commit()
        logger.info("🗑️  Armazenamento local limpo")
