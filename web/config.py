"""Configuração da aplicação web"""

import os
import logging
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


@dataclass
class WebConfig:
    """Configuração da aplicação web"""

    # Chave secreta para as sessões
    secret_key: str

    # URL do banco de dados (armazenamento local persistido)
    database_url: str

    # Porta da aplicação web
    port: int = 8000

    # Host da aplicação web
    host: str = "0.0.0.0"

    # Segundos até a mensagem de feedback sumir da lista
    message_timeout: int = 5

    # Segundos entre o sucesso do formulário e o fechamento do modal
    close_delay: int = 2

    @classmethod
    def from_env(cls) -> "WebConfig":
        """Carrega a configuração das variáveis de ambiente

        Returns:
            WebConfig com os dados carregados

        Raises:
            ValueError: Se faltar alguma variável obrigatória ou algum número for inválido
        """
        database_url = os.getenv("DATABASE_URL")
        if not database_url:
            raise ValueError(
                "DATABASE_URL não encontrado no arquivo .env\n"
                "Exemplo: DATABASE_URL=sqlite+aiosqlite:///./eplenarius.db"
            )

        # Gera a secret_key ou usa a do .env
        secret_key = os.getenv("WEB_SECRET_KEY")
        if not secret_key:
            # Se não estiver definida - gera uma aleatória (para dev)
            import secrets
            secret_key = secrets.token_hex(32)
            logger.warning(f"⚠️  WEB_SECRET_KEY não definida no .env, usando uma aleatória: {secret_key[:16]}...")

        try:
            port = int(os.getenv("WEB_PORT", "8000"))
            message_timeout = int(os.getenv("MESSAGE_TIMEOUT", "5"))
            close_delay = int(os.getenv("CLOSE_DELAY", "2"))
        except ValueError as e:
            raise ValueError(f"Valor numérico inválido no .env: {e}") from e

        host = os.getenv("WEB_HOST", "0.0.0.0")

        return cls(
            secret_key=secret_key,
            database_url=database_url,
            port=port,
            host=host,
            message_timeout=message_timeout,
            close_delay=close_delay,
        )
