"""Tabelas"""

from typing import List
from fasthtml.common import *
from database.models import User
from .cards import role_badge, active_badge
from .modals import MODAL_CONTAINER_ID

USERS_TABLE_ID = "users-table-container"


def user_row(user: User) -> Tr:
    """Linha da tabela de usuários"""
    target = f"#{MODAL_CONTAINER_ID}"
    return Tr(
        Td(Div(user.name, cls="font-medium")),
        Td(user.email, cls="text-base-content/70"),
        Td(role_badge(user.role)),
        Td(active_badge(user.active)),
        Td(
            Button(
                "Editar",
                type="button",
                cls="btn btn-ghost btn-xs text-primary",
                hx_get=f"/admin/usuarios/{user.id}/editar",
                hx_target=target,
            ),
            Button(
                "Excluir",
                type="button",
                cls="btn btn-ghost btn-xs text-error",
                hx_get=f"/admin/usuarios/{user.id}/excluir",
                hx_target=target,
            ),
            cls="whitespace-nowrap"
        ),
        id=f"user-row-{user.id}",
        cls="hover"
    )


def user_table(users: List[User], oob: bool = False) -> Div:
    """Tabela de usuários

    Args:
        users: Usuários a exibir
        oob: Renderizar como troca out-of-band do htmx (recarga da lista)
    """
    attrs = {"hx_swap_oob": "true"} if oob else {}

    if not users:
        return Div(
            P("Nenhum usuário cadastrado", cls="text-center py-8 text-base-content/60"),
            id=USERS_TABLE_ID,
            **attrs
        )

    return Div(
        Div(
            Table(
                Thead(
                    Tr(
                        Th("Nome"),
                        Th("Email"),
                        Th("Tipo"),
                        Th("Status"),
                        Th("Ações")
                    )
                ),
                Tbody(
                    *[user_row(user) for user in users]
                ),
                cls="table w-full"
            ),
            cls="overflow-x-auto"
        ),
        id=USERS_TABLE_ID,
        **attrs
    )
