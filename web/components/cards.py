"""Cards, badges e mensagens de feedback"""

from fasthtml.common import *
from database.models import UserRole

FLASH_MESSAGE_ID = "flash-message"
FLASH_CLEAR_URL = "/admin/usuarios/mensagem/limpar"


def role_badge(role: UserRole) -> Span:
    """Badge do tipo de usuário"""
    # Converte string em enum se necessário
    role = role if isinstance(role, UserRole) else UserRole(role)
    badge_class = "badge-info" if role is UserRole.ADMIN else "badge-secondary"
    return Span(role.label, cls=f"badge {badge_class} badge-outline")


def active_badge(active: bool) -> Span:
    """Badge Ativo/Inativo"""
    if active:
        return Span("Ativo", cls="badge badge-success badge-outline")
    return Span("Inativo", cls="badge badge-error badge-outline")


def alert(text: str, kind: str = "success") -> Div:
    """Alerta inline (kind: success ou error)"""
    alert_class = "alert-success" if kind == "success" else "alert-error"
    return Div(Span(text), role="alert", cls=f"alert {alert_class} mb-4")


def flash_message(text: str = None, kind: str = "success", timeout: int = 5, oob: bool = False) -> Div:
    """Mensagem de feedback da lista de usuários

    Com texto, o elemento se remove sozinho após `timeout` segundos. Uma
    nova mensagem substitui o elemento inteiro e com ele o timer anterior.
    Sem texto, retorna apenas o espaço reservado vazio.
    """
    attrs = {"hx_swap_oob": "true"} if oob else {}

    if not text:
        return Div(id=FLASH_MESSAGE_ID, **attrs)

    return Div(
        alert(text, kind),
        id=FLASH_MESSAGE_ID,
        hx_get=FLASH_CLEAR_URL,
        hx_trigger=f"load delay:{timeout}s",
        hx_swap="outerHTML",
        **attrs
    )


def card(title: str, *content) -> Div:
    """Card com título"""
    return Div(
        Div(
            H2(title, cls="card-title"),
            *content,
            cls="card-body"
        ),
        cls="card bg-base-100 shadow-xl"
    )
