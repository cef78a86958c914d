"""Menu lateral da área da câmara

O estado (menu expandido/recolhido e grupo aberto) não é persistido: ele
vai na URL de cada botão e um novo carregamento da página volta ao padrão.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional
from urllib.parse import urlencode
from fasthtml.common import *

SIDEBAR_ID = "camara-sidebar"


class MenuGroup(str, Enum):
    """Grupos recolhíveis do menu"""
    SESSOES = "sessoes"
    VEREADORES = "vereadores"
    PROJETOS = "projetos"


# Rótulo, ícone e rótulos dos links de cada grupo
_GROUPS = {
    MenuGroup.SESSOES: ("Sessões", "📅", "Listar Sessões", "Adicionar Sessão"),
    MenuGroup.VEREADORES: ("Vereadores", "👥", "Listar Vereadores", "Adicionar Vereador"),
    MenuGroup.PROJETOS: ("Projetos de Lei", "📜", "Listar Projetos", "Adicionar Projeto"),
}


@dataclass(frozen=True)
class SidebarState:
    """Estado visual do menu lateral"""

    expanded: bool = True
    open_group: Optional[MenuGroup] = None

    def toggle_group(self, group: MenuGroup) -> "SidebarState":
        """Abre o grupo fechando os demais; se já estiver aberto, fecha"""
        return replace(self, open_group=None if self.open_group == group else group)

    def toggle_expanded(self) -> "SidebarState":
        return replace(self, expanded=not self.expanded)

    @classmethod
    def from_query(cls, expandido: str = "1", aberto: str = "") -> "SidebarState":
        """Lê o estado dos parâmetros da URL; valores inválidos viram o padrão"""
        try:
            open_group = MenuGroup(aberto) if aberto else None
        except ValueError:
            open_group = None
        return cls(expanded=expandido != "0", open_group=open_group)

    def to_query(self) -> str:
        params = {"expandido": "1" if self.expanded else "0"}
        if self.open_group:
            params["aberto"] = self.open_group.value
        return urlencode(params)


def sidebar_url(camara_id: str, state: SidebarState) -> str:
    return f"/camara/{camara_id}/sidebar?{state.to_query()}"


def _link(label: str, href: str, icon: str, expanded: bool, active: bool = False) -> A:
    return A(
        Span(icon, cls="text-lg" if expanded else "text-lg mx-auto"),
        Span(label) if expanded else None,
        href=href,
        title=label,
        cls=f"flex items-center gap-3 p-2 rounded-md {'bg-primary-focus' if active else 'hover:bg-primary-focus'}"
    )


def _menu_group(camara_id: str, state: SidebarState, group: MenuGroup) -> Li:
    label, icon, list_label, add_label = _GROUPS[group]
    is_open = state.open_group == group
    base = f"/camara/{camara_id}/{group.value}"

    trigger = Button(
        Span(icon, cls="text-lg" if state.expanded else "text-lg mx-auto"),
        Span(label) if state.expanded else None,
        Span("▾", cls=f"ml-auto transition-transform{' rotate-180' if is_open else ''}") if state.expanded else None,
        type="button",
        title=label,
        hx_get=sidebar_url(camara_id, state.toggle_group(group)),
        hx_target=f"#{SIDEBAR_ID}",
        hx_swap="outerHTML",
        cls=f"flex items-center gap-3 w-full p-2 rounded-md text-left {'bg-primary-focus' if is_open else 'hover:bg-primary-focus'}"
    )

    links = (
        Li(A(list_label, href=base, cls="block p-2 rounded-md hover:bg-primary-focus")),
        Li(A(add_label, href=f"{base}/adicionar", cls="block p-2 rounded-md hover:bg-primary-focus")),
    )

    submenu = None
    if state.expanded:
        submenu = Ul(
            *links,
            cls=f"mt-1 ml-6 pl-2 border-l border-primary-content/30{'' if is_open else ' hidden'}"
        )
    elif is_open:
        # Menu recolhido: submenu flutuante ao lado do botão
        submenu = Div(
            Div(label, cls="px-2 pb-1 font-semibold border-b border-primary-content/30"),
            Ul(*links, cls="mt-1"),
            data_floating="true",
            cls="absolute left-full top-0 ml-2 w-48 p-2 rounded-md shadow-lg bg-primary text-primary-content z-30"
        )

    return Li(trigger, submenu, data_group=group.value, cls="relative mb-1")


def camara_sidebar(camara_id: str, state: SidebarState = SidebarState(), active: str = "dashboard") -> Aside:
    """Menu lateral da câmara

    Args:
        camara_id: ID da câmara (prefixo dos links)
        state: Estado visual do menu
        active: Link fixo destacado
    """
    expanded = state.expanded

    return Aside(
        Div(
            Button(
                "☰",
                type="button",
                title="Recolher menu" if expanded else "Expandir menu",
                hx_get=sidebar_url(camara_id, state.toggle_expanded()),
                hx_target=f"#{SIDEBAR_ID}",
                hx_swap="outerHTML",
                cls="btn btn-ghost btn-sm text-primary-content"
            ),
            cls="flex justify-end p-2"
        ),
        Nav(
            Ul(
                Li(_link("Dashboard", f"/camara/{camara_id}/dashboard", "🏠", expanded, active == "dashboard"), cls="mb-1"),
                *[_menu_group(camara_id, state, group) for group in MenuGroup],
                Li(_link("Configurações", f"/camara/{camara_id}/configuracoes", "⚙️", expanded, active == "configuracoes"), cls="mb-1"),
                Li(_link("Voltar para Admin", "/admin/usuarios", "↩️", expanded), cls="mt-6"),
                cls="px-2" if not expanded else "px-4"
            ),
        ),
        id=SIDEBAR_ID,
        data_expanded="true" if expanded else "false",
        cls=f"bg-primary text-primary-content min-h-screen flex-shrink-0 transition-all duration-300 shadow-lg {'w-64' if expanded else 'w-16'}"
    )
