import json
import logging
import time
from dataclasses import fields, replace
from datetime import datetime, timezone
from typing import Any, List, Optional, Union
from .models import User, UserRole, Chamber, ChamberOption, CouncilMember, utc_now
from .security import hash_password
from .storage import LocalStorage

logger = logging.getLogger(__name__)

USERS_STORAGE_KEY = "@EPlenarius:usuarios"
CHAMBERS_STORAGE_KEY = "@EPlenarius:camaras"

# Erros de leitura do blob que não devem derrubar a tela
_PARSE_ERRORS = (ValueError, KeyError, TypeError, AttributeError)


def _example_users() -> List[User]:
    """Usuários de exemplo gravados no primeiro acesso"""
    now = utc_now()
    return [
        User(
            id="1",
            name="Admin Principal",
            email="admin@eplenarius.com",
            role=UserRole.ADMIN,
            active=True,
            password=hash_password("123456"),
            created_at=now,
        ),
        User(
            id="2",
            name="Gerente Câmara",
            email="gerente@camara.gov.br",
            role=UserRole.CAMARA_ADMIN,
            chamber_id="1",
            active=True,
            password=hash_password("123456"),
            created_at=now,
        ),
    ]


def _example_chambers() -> List[Chamber]:
    """Câmara de exemplo gravada no primeiro acesso"""
    return [
        Chamber(
            id="1",
            name="Câmara Municipal de Exemplo",
            cnpj="12.345.678/0001-90",
            address="Rua das Flores, 123",
            city="Cidade Exemplo",
            state="EX",
            zip_code="12345-678",
            phone="(11) 1234-5678",
            email="contato@camaraexemplo.gov.br",
            created_at=datetime(2023, 1, 1, tzinfo=timezone.utc),
            members=[
                CouncilMember(
                    id="1",
                    name="João da Silva",
                    position="Vereador",
                    email="joao@camaraexemplo.gov.br",
                    is_president=True,
                ),
                CouncilMember(
                    id="2",
                    name="Maria Oliveira",
                    position="Vereadora",
                    email="maria@camaraexemplo.gov.br",
                    is_president=False,
                ),
            ],
        )
    ]


def _record_id(record: Union[User, Any]) -> Optional[str]:
    """ID de um usuário ou de um registro ilegível, se houver"""
    if isinstance(record, User):
        return record.id
    if isinstance(record, dict) and "id" in record:
        return str(record["id"])
    return None


class UserStore:
    """CRUD de usuários sobre um único blob JSON no armazenamento local

    Toda operação de escrita serializa a coleção inteira e sobrescreve o
    blob. Não há proteção contra escritores concorrentes.

    Registros que não podem ser lidos ficam fora das listagens, mas são
    regravados sem alteração nas escritas seguintes.
    """

    # Campos controlados pelo próprio store
    MANAGED_FIELDS = frozenset({"id", "created_at", "updated_at"})

    def __init__(self, storage: LocalStorage, key: str = USERS_STORAGE_KEY):
        self.storage = storage
        self.key = key

    async def _ensure_seeded(self) -> None:
        if await self.storage.get_item(self.key) is None:
            await self._save(_example_users())
            logger.info("✅ Usuários de exemplo criados")

    async def _load(self) -> List[Union[User, Any]]:
        """Lê o blob registro a registro

        Returns:
            Usuários e, na posição original, os registros ilegíveis como
            vieram do armazenamento
        """
        await self._ensure_seeded()
        raw = await self.storage.get_item(self.key)
        if not raw:
            return []

        try:
            items = json.loads(raw)
        except ValueError as e:
            logger.warning(f"⚠️ Não foi possível ler {self.key}: {e}")
            return []

        if not isinstance(items, list):
            logger.warning(f"⚠️ {self.key} não contém uma lista de usuários")
            return []

        records = []
        for item in items:
            try:
                records.append(User.from_dict(item))
            except _PARSE_ERRORS as e:
                logger.warning(f"⚠️ Registro ilegível em {self.key} mantido sem alteração: {e}")
                records.append(item)
        return records

    async def _save(self, records: List[Union[User, Any]]) -> None:
        payload = json.dumps(
            [record.to_dict() if isinstance(record, User) else record for record in records],
            ensure_ascii=False
        )
        await self.storage.set_item(self.key, payload)

    @staticmethod
    def _new_id(records: List[Union[User, Any]]) -> str:
        taken = {_record_id(record) for record in records}
        candidate = int(time.time() * 1000)
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    async def list_users(self) -> List[User]:
        """Retorna todos os usuários na ordem em que foram gravados

        Returns:
            Lista de usuários legíveis; vazia se o blob não puder ser lido
        """
        return [record for record in await self._load() if isinstance(record, User)]

    async def get_user_by_id(self, user_id: str) -> Optional[User]:
        """Busca um usuário pelo ID

        Returns:
            Usuário ou None
        """
        users = await self.list_users()
        return next((user for user in users if user.id == user_id), None)

    async def add_user(
        self,
        name: str,
        email: str,
        role: UserRole = UserRole.ADMIN,
        active: bool = True,
        chamber_id: Optional[str] = None,
        password: Optional[str] = None,
    ) -> User:
        """Cria um novo usuário

        Args:
            name: Nome de exibição
            email: Email
            role: Tipo do usuário
            active: Usuário ativo
            chamber_id: Câmara administrada (para camaraAdmin)
            password: Senha em texto puro; é gravado apenas o hash

        Returns:
            Usuário criado, com ID e data de criação
        """
        records = await self._load()

        user = User(
            id=self._new_id(records),
            name=name,
            email=email,
            role=UserRole(role),
            active=active,
            chamber_id=chamber_id or None,
            password=hash_password(password) if password else None,
            created_at=utc_now(),
        )
        records.append(user)
        await self._save(records)

        logger.info(f"Usuário #{user.id} ({user.email}) criado")
        return user

    async def update_user(self, user_id: str, **changes: Any) -> Optional[User]:
        """Atualiza parcialmente um usuário

        Args:
            user_id: ID do usuário
            **changes: Campos a alterar (name, email, role, active,
                chamber_id, password). A senha vem em texto puro; em
                branco ou None mantém a atual.

        Returns:
            Usuário atualizado ou None se o ID não existir

        Raises:
            ValueError: Se algum campo for desconhecido ou controlado pelo store
        """
        allowed = {f.name for f in fields(User)} - self.MANAGED_FIELDS
        invalid = set(changes) - allowed
        if invalid:
            raise ValueError(f"Campos não podem ser alterados: {', '.join(sorted(invalid))}")

        records = await self._load()
        index = next(
            (i for i, record in enumerate(records) if isinstance(record, User) and record.id == user_id),
            None
        )
        if index is None:
            return None

        if "role" in changes:
            changes["role"] = UserRole(changes["role"])
        if "chamber_id" in changes:
            changes["chamber_id"] = changes["chamber_id"] or None
        if "password" in changes:
            if changes["password"]:
                changes["password"] = hash_password(changes["password"])
            else:
                del changes["password"]

        updated = replace(records[index], **changes, updated_at=utc_now())
        records[index] = updated
        await self._save(records)

        logger.info(f"Usuário #{user_id} atualizado: {', '.join(sorted(changes)) or 'sem alterações'}")
        return updated

    async def delete_user(self, user_id: str) -> bool:
        """Remove um usuário

        Returns:
            True se o usuário foi removido, False se não foi encontrado
        """
        records = await self._load()
        remaining = [
            record for record in records
            if not (isinstance(record, User) and record.id == user_id)
        ]

        if len(remaining) == len(records):
            return False

        await self._save(remaining)
        logger.info(f"Usuário #{user_id} removido")
        return True


class ChamberStore:
    """Leitura das câmaras cadastradas (fornece as opções do seletor)"""

    def __init__(self, storage: LocalStorage, key: str = CHAMBERS_STORAGE_KEY):
        self.storage = storage
        self.key = key

    async def list_chambers(self) -> List[Chamber]:
        if await self.storage.get_item(self.key) is None:
            payload = json.dumps([c.to_dict() for c in _example_chambers()], ensure_ascii=False)
            await self.storage.set_item(self.key, payload)
            logger.info("✅ Câmara de exemplo criada")

        raw = await self.storage.get_item(self.key)
        if not raw:
            return []

        try:
            items = json.loads(raw)
        except ValueError as e:
            logger.warning(f"⚠️ Não foi possível ler {self.key}: {e}")
            return []

        if not isinstance(items, list):
            logger.warning(f"⚠️ {self.key} não contém uma lista de câmaras")
            return []

        chambers = []
        for item in items:
            try:
                chambers.append(Chamber.from_dict(item))
            except _PARSE_ERRORS as e:
                logger.warning(f"⚠️ Câmara ilegível em {self.key} ignorada: {e}")
        return chambers

    async def get_chamber_by_id(self, chamber_id: str) -> Optional[Chamber]:
        chambers = await self.list_chambers()
        return next((chamber for chamber in chambers if chamber.id == chamber_id), None)

    async def list_options(self) -> List[ChamberOption]:
        """Pares id/nome para o seletor de câmaras do formulário de usuário"""
        return [ChamberOption(id=chamber.id, name=chamber.name) for chamber in await self.list_chambers()]
