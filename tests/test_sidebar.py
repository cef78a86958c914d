"""Testes do menu lateral da câmara."""

import pytest
from fasthtml.common import to_xml

from web.components import SidebarState, MenuGroup, camara_sidebar
from web.components.sidebar import sidebar_url


def test_default_state():
    state = SidebarState()

    assert state.expanded is True
    assert state.open_group is None


def test_opening_a_group_closes_the_others():
    state = SidebarState().toggle_group(MenuGroup.SESSOES).toggle_group(MenuGroup.PROJETOS)

    assert state.open_group is MenuGroup.PROJETOS


def test_toggling_open_group_closes_it():
    state = SidebarState(open_group=MenuGroup.VEREADORES).toggle_group(MenuGroup.VEREADORES)

    assert state.open_group is None


def test_toggle_expanded_keeps_open_group():
    state = SidebarState(open_group=MenuGroup.SESSOES).toggle_expanded()

    assert state.expanded is False
    assert state.open_group is MenuGroup.SESSOES


@pytest.mark.parametrize("expandido, aberto, expected", [
    ("1", "", SidebarState()),
    ("0", "sessoes", SidebarState(expanded=False, open_group=MenuGroup.SESSOES)),
    ("1", "inexistente", SidebarState()),
    ("qualquer", "projetos", SidebarState(open_group=MenuGroup.PROJETOS)),
])
def test_from_query(expandido, aberto, expected):
    assert SidebarState.from_query(expandido, aberto) == expected


def test_query_round_trip():
    state = SidebarState(expanded=False, open_group=MenuGroup.VEREADORES)

    assert state.to_query() == "expandido=0&aberto=vereadores"
    assert sidebar_url("1", state) == "/camara/1/sidebar?expandido=0&aberto=vereadores"


def test_expanded_sidebar_renders_labels_and_hides_closed_groups():
    html = to_xml(camara_sidebar("1", SidebarState(open_group=MenuGroup.SESSOES)))

    assert 'data-expanded="true"' in html
    assert "w-64" in html
    assert "Listar Sessões" in html
    assert "/camara/1/sessoes/adicionar" in html
    assert "/camara/1/vereadores" in html
    assert "Voltar para Admin" in html
    assert "data-floating" not in html


def test_collapsed_sidebar_shows_floating_panel_for_open_group():
    html = to_xml(camara_sidebar("1", SidebarState(expanded=False, open_group=MenuGroup.PROJETOS)))

    assert 'data-expanded="false"' in html
    assert "w-16" in html
    assert 'data-floating="true"' in html
    assert "Adicionar Projeto" in html
    assert "Listar Sessões" not in html


def test_collapsed_sidebar_without_open_group_has_no_submenus():
    html = to_xml(camara_sidebar("1", SidebarState(expanded=False)))

    assert "data-floating" not in html
    assert "Listar" not in html


def test_group_buttons_request_next_state():
    html = to_xml(camara_sidebar("1", SidebarState(open_group=MenuGroup.SESSOES)))

    # Sessões aberto: o botão dele fecha, os outros abrem o próprio grupo
    assert 'hx-get="/camara/1/sidebar?expandido=1"' in html
    assert "aberto=vereadores" in html
    assert "aberto=projetos" in html
