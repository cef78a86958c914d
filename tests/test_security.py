"""Testes do hash de senhas."""

from database import hash_password, verify_password


def test_hash_is_not_plaintext():
    hashed = hash_password("123456")

    assert hashed != "123456"
    assert hashed.startswith("$pbkdf2-sha256$")


def test_verify_password():
    hashed = hash_password("segredo")

    assert verify_password("segredo", hashed) is True
    assert verify_password("errado", hashed) is False


def test_missing_hash_never_matches():
    assert verify_password("123456", None) is False
    assert verify_password("123456", "") is False


def test_unknown_hash_format_never_matches():
    assert verify_password("123456", "123456") is False
