"""Testes das rotas da área da câmara."""

HTMX = {"HX-Request": "true"}


def test_dashboard_renders_chamber_and_sidebar(client):
    html = client.get("/camara/1/dashboard").text

    assert "Câmara Municipal de Exemplo" in html
    assert "12.345.678/0001-90" in html
    assert "João da Silva" in html
    assert 'id="camara-sidebar"' in html
    assert 'data-expanded="true"' in html


def test_dashboard_for_missing_chamber_redirects(client):
    response = client.get("/camara/999/dashboard", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/admin/usuarios"


def test_sidebar_fragment_collapsed_with_open_group(client):
    html = client.get("/camara/1/sidebar?expandido=0&aberto=vereadores", headers=HTMX).text

    assert 'data-expanded="false"' in html
    assert 'data-floating="true"' in html
    assert "Listar Vereadores" in html


def test_sidebar_fragment_ignores_invalid_group(client):
    html = client.get("/camara/1/sidebar?aberto=nada", headers=HTMX).text

    assert 'data-expanded="true"' in html
    assert "data-floating" not in html
