"""Hash de senhas dos usuários"""

import logging
from passlib.context import CryptContext

logger = logging.getLogger(__name__)

# pbkdf2_sha256 não depende de backend nativo (bcrypt etc.)
_pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Gera o hash de uma senha em texto puro

    Args:
        password: Senha digitada no formulário

    Returns:
        Hash no formato $pbkdf2-sha256$...
    """
    return _pwd_context.hash(password)


def verify_password(password: str, hashed: str | None) -> bool:
    """Confere uma senha com o hash armazenado

    Hashes ausentes ou em formato desconhecido nunca conferem.
    """
    if not hashed:
        return False
    try:
        return _pwd_context.verify(password, hashed)
    except ValueError:
        logger.warning("Hash de senha em formato desconhecido, ignorando")
        return False
