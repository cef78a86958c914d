"""Rotas da área de uma câmara"""

import logging
from fasthtml.common import *
from database import ChamberStore
from web.components import camara_layout, camara_sidebar, card, SidebarState

logger = logging.getLogger(__name__)


def setup_camara_routes(app, chambers: ChamberStore):
    """Configura as rotas da área da câmara

    Args:
        app: Aplicação FastHTML
        chambers: Store de câmaras
    """

    @app.get("/camara/{camara_id}/dashboard")
    async def camara_dashboard(camara_id: str):
        """Página inicial da câmara com o menu lateral"""
        try:
            chamber = await chambers.get_chamber_by_id(camara_id)
        except Exception as e:
            logger.error(f"Erro ao carregar câmara #{camara_id}: {e}")
            chamber = None

        if not chamber:
            logger.warning(f"Câmara #{camara_id} não encontrada")
            return RedirectResponse('/admin/usuarios', status_code=303)

        president = chamber.president

        content = Div(
            H1("Dashboard", cls="text-3xl font-bold mb-6"),
            Div(
                card(
                    "Dados da Câmara",
                    P(Strong("CNPJ: "), chamber.cnpj),
                    P(Strong("Endereço: "), f"{chamber.address}, {chamber.city} - {chamber.state}, {chamber.zip_code}"),
                    P(Strong("Telefone: "), chamber.phone),
                    P(Strong("Email: "), chamber.email),
                ),
                card(
                    f"Vereadores ({len(chamber.members)})",
                    P(Strong("Presidente: "), president.name if president else "-"),
                    Ul(
                        *[Li(f"{member.name} - {member.position}") for member in chamber.members],
                        cls="list-disc ml-6"
                    ),
                ),
                cls="grid gap-6 md:grid-cols-2"
            )
        )

        return camara_layout("Dashboard", content, chamber)

    @app.get("/camara/{camara_id}/sidebar")
    def camara_sidebar_fragment(camara_id: str, expandido: str = "1", aberto: str = ""):
        """Renderiza o menu lateral no estado pedido"""
        return camara_sidebar(camara_id, SidebarState.from_query(expandido, aberto))
