"""Layouts - navbar, page_layout, camara_layout"""

from typing import Any, List
from fasthtml.common import *
from database.models import Chamber, ChamberOption
from .cards import flash_message
from .modals import modal_container
from .sidebar import SidebarState, camara_sidebar


def _head(title: str) -> Head:
    return Head(
        Meta(charset="utf-8"),
        Meta(name="viewport", content="width=device-width, initial-scale=1"),
        Title(f"{title} - E-Plenarius"),
        Script(src="https://cdn.tailwindcss.com"),
        Link(href="https://cdn.jsdelivr.net/npm/daisyui@4/dist/full.min.css", rel="stylesheet", type_="text/css"),
        Script(src="https://unpkg.com/htmx.org@1.9.10"),
    )


def navbar(chambers: List[ChamberOption], active: str = "usuarios") -> Div:
    """Barra de navegação do painel administrativo"""
    menu_items = [
        A("Usuários", href="/admin/usuarios", cls=f"btn btn-ghost{' btn-active' if active == 'usuarios' else ''}")
    ]

    # Atalhos para a área de cada câmara
    if chambers:
        menu_items.append(
            Div(
                Div("Câmaras", tabindex="0", role="button", cls="btn btn-ghost"),
                Ul(
                    *[Li(A(chamber.name, href=f"/camara/{chamber.id}/dashboard")) for chamber in chambers],
                    tabindex="0",
                    cls="menu menu-sm dropdown-content mt-3 z-[1] p-2 shadow bg-base-100 rounded-box w-64"
                ),
                cls="dropdown"
            )
        )

    return Div(
        Div(
            A("E-Plenarius", href="/", cls="btn btn-ghost text-xl font-bold"),
            cls="flex-none"
        ),
        Div(
            *menu_items,
            cls="flex-1 gap-2"
        ),
        cls="navbar bg-base-100 shadow-lg"
    )


def page_layout(
    title: str,
    content: Any,
    chambers: List[ChamberOption] = None,
    active: str = "usuarios",
    flash: Any = None,
) -> Html:
    """Layout comum das páginas do painel administrativo"""
    return Html(
        _head(title),
        Body(
            navbar(chambers or [], active),
            Main(
                flash if flash is not None else flash_message(),
                content,
                cls="container mx-auto px-4 py-8"
            ),
            modal_container(),
            data_theme="light"
        )
    )


def camara_layout(title: str, content: Any, chamber: Chamber, state: SidebarState = SidebarState()) -> Html:
    """Layout da área de uma câmara, com o menu lateral"""
    return Html(
        _head(title),
        Body(
            Div(
                camara_sidebar(chamber.id, state),
                Div(
                    Header(
                        Div(chamber.name, cls="text-lg font-semibold"),
                        Div(f"{chamber.city} - {chamber.state}", cls="text-sm text-base-content/60"),
                        cls="bg-base-100 shadow px-6 py-4"
                    ),
                    Main(content, cls="px-6 py-8"),
                    cls="flex-1 min-w-0"
                ),
                cls="flex min-h-screen bg-base-200"
            ),
            data_theme="light"
        )
    )
