from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utc_now() -> datetime:
    """Horário atual em UTC, truncado em milissegundos"""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def format_timestamp(value: datetime) -> str:
    """Serializa a data no formato ISO usado no armazenamento: 2024-01-31T12:00:00.000Z"""
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_timestamp(value: str) -> datetime:
    """Lê uma data ISO do armazenamento (aceita o sufixo Z)

    Raises:
        ValueError: Se o valor não for uma data ISO em texto
    """
    if not isinstance(value, str):
        raise ValueError(f"Data inválida: {value!r}")
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class UserRole(str, Enum):
    """Tipos de usuário do painel administrativo"""
    ADMIN = "admin"                # Administrador global
    CAMARA_ADMIN = "camaraAdmin"   # Administrador de uma câmara

    @property
    def label(self) -> str:
        return "Administrador" if self is UserRole.ADMIN else "Admin Câmara"


class StorageItem(Base):
    """Entrada do armazenamento chave/valor

    Attributes:
        key: Chave (ex.: @EPlenarius:usuarios)
        value: Conteúdo serializado em JSON
        updated_at: Data da última gravação
    """
    __tablename__ = "local_storage"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<StorageItem(key={self.key}, size={len(self.value or '')})>"


@dataclass
class User:
    """Usuário do painel administrativo

    Attributes:
        id: Identificador gerado a partir do horário de criação
        name: Nome de exibição
        email: Email (único entre os usuários)
        role: Tipo do usuário (admin/camaraAdmin)
        active: Usuário ativo
        chamber_id: Câmara administrada (obrigatória para camaraAdmin)
        password: Hash da senha
        created_at: Data de criação
        updated_at: Data da última atualização
    """
    id: str
    name: str
    email: str
    role: UserRole
    active: bool
    created_at: datetime
    chamber_id: Optional[str] = None
    password: Optional[str] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "nome": self.name,
            "email": self.email,
            "tipo": self.role.value,
            "ativo": self.active,
            "dataCriacao": format_timestamp(self.created_at),
        }
        if self.chamber_id:
            data["camaraId"] = self.chamber_id
        if self.password is not None:
            data["senha"] = self.password
        if self.updated_at is not None:
            data["dataAtualizacao"] = format_timestamp(self.updated_at)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        updated_at = data.get("dataAtualizacao")
        return cls(
            id=str(data["id"]),
            name=data["nome"],
            email=data["email"],
            role=UserRole(data["tipo"]),
            active=bool(data.get("ativo", True)),
            created_at=parse_timestamp(data["dataCriacao"]),
            chamber_id=data.get("camaraId") or None,
            password=data.get("senha"),
            updated_at=parse_timestamp(updated_at) if updated_at else None,
        )

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, role={self.role.value})>"


@dataclass
class CouncilMember:
    """Vereador de uma câmara"""
    id: str
    name: str
    position: str
    email: str
    is_president: bool = False
    photo: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "nome": self.name,
            "cargo": self.position,
            "email": self.email,
            "isPresidente": self.is_president,
        }
        if self.photo:
            data["foto"] = self.photo
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CouncilMember":
        return cls(
            id=str(data["id"]),
            name=data["nome"],
            position=data.get("cargo", ""),
            email=data.get("email", ""),
            is_president=bool(data.get("isPresidente", False)),
            photo=data.get("foto"),
        )


@dataclass
class Chamber:
    """Câmara municipal

    Attributes:
        id: Identificador da câmara
        name: Nome oficial
        cnpj, address, city, state, zip_code, phone, email: Dados cadastrais
        created_at: Data de cadastro
        members: Vereadores da câmara
        internal_rules: Regimento interno (opcional)
        image: Brasão/imagem em base64 (opcional)
        updated_at: Data da última atualização
    """
    id: str
    name: str
    cnpj: str
    address: str
    city: str
    state: str
    zip_code: str
    phone: str
    email: str
    created_at: datetime
    members: List[CouncilMember] = field(default_factory=list)
    internal_rules: Optional[str] = None
    image: Optional[str] = None
    updated_at: Optional[datetime] = None

    @property
    def president(self) -> Optional[CouncilMember]:
        return next((member for member in self.members if member.is_president), None)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "nome": self.name,
            "cnpj": self.cnpj,
            "endereco": self.address,
            "cidade": self.city,
            "estado": self.state,
            "cep": self.zip_code,
            "telefone": self.phone,
            "email": self.email,
            "dataCriacao": format_timestamp(self.created_at),
            "vereadores": [member.to_dict() for member in self.members],
        }
        if self.internal_rules:
            data["regimentoInterno"] = self.internal_rules
        if self.image:
            data["imagem"] = self.image
        if self.updated_at is not None:
            data["dataAtualizacao"] = format_timestamp(self.updated_at)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Chamber":
        updated_at = data.get("dataAtualizacao")
        return cls(
            id=str(data["id"]),
            name=data["nome"],
            cnpj=data.get("cnpj", ""),
            address=data.get("endereco", ""),
            city=data.get("cidade", ""),
            state=data.get("estado", ""),
            zip_code=data.get("cep", ""),
            phone=data.get("telefone", ""),
            email=data.get("email", ""),
            created_at=parse_timestamp(data["dataCriacao"]),
            members=[CouncilMember.from_dict(item) for item in data.get("vereadores", [])],
            internal_rules=data.get("regimentoInterno"),
            image=data.get("imagem"),
            updated_at=parse_timestamp(updated_at) if updated_at else None,
        )

    def __repr__(self):
        return f"<Chamber(id={self.id}, name={self.name})>"


@dataclass(frozen=True)
class ChamberOption:
    """Par id/nome para o seletor de câmaras"""
    id: str
    name: str


__all__ = [
    "Base",
    "StorageItem",
    "UserRole",
    "User",
    "Chamber",
    "CouncilMember",
    "ChamberOption",
    "utc_now",
    "format_timestamp",
    "parse_timestamp",
]
