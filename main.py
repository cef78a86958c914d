"""Arquivo principal de execução do painel E-Plenarius."""

import os
import asyncio
import logging
import argparse

from web.config import WebConfig
from database import init_database, reset_db, close_database

# Configuração de logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def warn_reset_db():
    """Explica como confirmar a recriação do banco."""
    logger.warning("⚠️  ATENÇÃO: Isso apaga todos os dados do banco!")
    logger.warning("Para confirmar use: --reset-db --confirm")
    logger.info("Operação cancelada")


async def reset_db_confirmed(config: WebConfig):
    """Remove e recria todas as tabelas (confirmado)."""
    init_database(config.database_url)
    try:
        await reset_db()
    finally:
        await close_database()

    logger.info("🎉 Banco de dados recriado!")
    logger.info("💡 Usuários e câmara de exemplo serão criados no primeiro acesso")

    # Lembrete para remover RESET_DB do .env
    if os.getenv("RESET_DB"):
        logger.warning("⚠️  IMPORTANTE: Remova RESET_DB=true do arquivo .env!")
        logger.warning("⚠️  Senão o banco será recriado a cada reinício do container!")


def main(reset_database: bool = False, confirm_reset: bool = False, continue_after_reset: bool = False):
    """Função principal de execução.

    Args:
        reset_database: Recriar o banco
        confirm_reset: Confirmação da recriação
        continue_after_reset: Iniciar o servidor depois de recriar (para Docker)
    """
    # Carrega a configuração
    try:
        config = WebConfig.from_env()
        logger.info("✅ Configuração carregada")
    except ValueError as e:
        logger.error(f"❌ Erro de configuração: {e}")
        return

    # Recriação do banco
    if reset_database:
        if confirm_reset:
            asyncio.run(reset_db_confirmed(config))
        else:
            warn_reset_db()

        # Via CLI termina aqui, via env continua
        if not continue_after_reset:
            return

    from web.app import serve
    serve(config)


if __name__ == "__main__":
    # Argumentos de linha de comando
    parser = argparse.ArgumentParser(
        description="E-Plenarius - painel administrativo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exemplos de uso:
  python main.py                      # Inicia o servidor web
  python main.py --reset-db           # Mostra o aviso de recriação do banco
  python main.py --reset-db --confirm # Recria o banco de dados

  # Para Docker: defina RESET_DB=true no .env para recriar ao iniciar
        """,
    )
    parser.add_argument(
        "--reset-db",
        action="store_true",
        help="Remover e recriar todas as tabelas do banco (exige --confirm)",
    )
    parser.add_argument(
        "--confirm",
        action="store_true",
        help="Confirmação de operações perigosas (ex.: recriar o banco)",
    )

    args = parser.parse_args()

    # Variável de ambiente RESET_DB para Docker
    reset_db_env = os.getenv("RESET_DB", "").lower() in ("true", "1", "yes")

    # Com RESET_DB=true no ambiente, confirma automaticamente e continua
    if reset_db_env:
        logger.warning("🔥 RESET_DB=true encontrado nas variáveis de ambiente")
        logger.warning("🔥 O banco de dados será recriado ao iniciar!")
        reset_database = True
        confirm_reset = True
        continue_after_reset = True
    else:
        reset_database = args.reset_db
        confirm_reset = args.confirm
        continue_after_reset = False

    try:
        main(
            reset_database=reset_database,
            confirm_reset=confirm_reset,
            continue_after_reset=continue_after_reset
        )
    except KeyboardInterrupt:
        logger.info("⚠️ Servidor interrompido pelo usuário")
