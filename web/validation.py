"""Validação do formulário de usuário"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional
from database.models import User, UserRole

EMAIL_TAKEN_ERROR = "Este email já está sendo usado por outro usuário."
REQUIRED_FIELDS_ERROR = "Nome e email são campos obrigatórios."
PASSWORD_REQUIRED_ERROR = "Senha é obrigatória para novos usuários."
CHAMBER_REQUIRED_ERROR = "Selecione uma câmara para o administrador de câmara."
INVALID_ROLE_ERROR = "Tipo de usuário inválido."


def is_email_taken(users: Iterable[User], email: str, excluding_id: Optional[str] = None) -> bool:
    """Verifica se o email já pertence a outro usuário

    Args:
        users: Usuários gravados
        email: Email digitado
        excluding_id: ID do usuário em edição (não conta como colisão)
    """
    if not email:
        return False
    return any(user.email == email and user.id != excluding_id for user in users)


@dataclass
class UserFormData:
    """Valores do formulário de usuário, como foram digitados"""

    user_id: str = ""
    name: str = ""
    email: str = ""
    role: str = UserRole.ADMIN.value
    chamber_id: str = ""
    active: bool = True
    password: str = ""

    @property
    def is_new(self) -> bool:
        return not self.user_id

    @classmethod
    def from_user(cls, user: User) -> "UserFormData":
        """Preenche o formulário a partir de um usuário (a senha nunca é exibida)"""
        return cls(
            user_id=user.id,
            name=user.name,
            email=user.email,
            role=user.role.value,
            chamber_id=user.chamber_id or "",
            active=user.active,
        )

    def to_fields(self) -> Dict[str, Any]:
        """Campos para UserStore.add_user / update_user

        Senha em branco significa "manter a atual" e não é enviada.
        Administradores globais não ficam vinculados a uma câmara.
        """
        role = UserRole(self.role)
        fields: Dict[str, Any] = {
            "name": self.name,
            "email": self.email,
            "role": role,
            "active": self.active,
            "chamber_id": self.chamber_id if role is UserRole.CAMARA_ADMIN else None,
        }
        if self.password:
            fields["password"] = self.password
        return fields


def validate_user_form(form: UserFormData, users: Iterable[User]) -> Optional[str]:
    """Valida o formulário; a primeira regra que falhar vence

    Returns:
        Mensagem de erro ou None se o formulário for válido
    """
    if is_email_taken(users, form.email, form.user_id or None):
        return EMAIL_TAKEN_ERROR

    if not form.name or not form.email:
        return REQUIRED_FIELDS_ERROR

    if form.is_new and not form.password:
        return PASSWORD_REQUIRED_ERROR

    if form.role == UserRole.CAMARA_ADMIN.value and not form.chamber_id:
        return CHAMBER_REQUIRED_ERROR

    if form.role not in {role.value for role in UserRole}:
        return INVALID_ROLE_ERROR

    return None
