"""Aplicação web FastHTML do painel administrativo E-Plenarius"""

import logging
from contextlib import asynccontextmanager
from fasthtml.common import *
from database import (
    LocalStorage, DatabaseStorage, UserStore, ChamberStore,
    init_database, init_db, close_database, get_session
)
from web.config import WebConfig
from web.routes import setup_user_routes, setup_camara_routes

logger = logging.getLogger(__name__)


def create_app(config: WebConfig, storage: LocalStorage = None) -> FastHTML:
    """Cria a aplicação FastHTML

    Args:
        config: Configuração da aplicação web
        storage: Armazenamento local; se omitido, usa o banco de config.database_url
    """
    lifespan = None

    if storage is None:
        init_database(config.database_url)
        storage = DatabaseStorage(get_session)

        @asynccontextmanager
        async def lifespan(app):
            await init_db()
            yield
            await close_database()

    app = FastHTML(
        secret_key=config.secret_key,
        hdrs=(
            # DaisyUI para os estilos
            Script(src="https://cdn.tailwindcss.com"),
            Link(rel="stylesheet", href="https://cdn.jsdelivr.net/npm/daisyui@4/dist/full.min.css"),
        ),
        lifespan=lifespan,
    )

    users = UserStore(storage)
    chambers = ChamberStore(storage)

    # Registra as rotas
    setup_user_routes(app, config, users, chambers)
    setup_camara_routes(app, chambers)

    @app.get("/")
    def index():
        """Página inicial - redireciona para a lista de usuários"""
        return RedirectResponse('/admin/usuarios', status_code=303)

    @app.get("/health")
    def health():
        """Health check"""
        return {"status": "ok", "service": "E-Plenarius Admin"}

    return app


def serve(config: WebConfig = None):
    """Inicia o servidor web"""
    config = config or WebConfig.from_env()
    app = create_app(config)

    logger.info(f"🚀 Iniciando a aplicação web em http://{config.host}:{config.port}")

    import uvicorn
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level="info",
        timeout_keep_alive=5,
    )


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    serve()
