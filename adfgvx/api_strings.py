"""String-level cipher wrappers."""

from .main import adfgvx


def encrypt(plaintext: str, key: str):
    return adfgvx.encrypt(plaintext, key)


def decrypt(ciphertext: str, key: str):
    return adfgvx.decrypt(ciphertext, key)


def try_encrypt(plaintext: str, key: str):
    return adfgvx.try_encrypt(plaintext, key)


def try_decrypt(ciphertext: str, key: str):
    return adfgvx.try_decrypt(ciphertext, key)


def validate_key(key: str):
    return adfgvx.validate_key(key)


def check_key(key: str):
    return adfgvx.check_key(key)


def key_schedule(key: str):
    return adfgvx.key_schedule(key)


def clean_text(raw: str):
    return adfgvx.clean_text(raw)


def clean_cipher_text(raw: str):
    return adfgvx.clean_cipher_text(raw)


__all__ = [
    "check_key",
    "clean_cipher_text",
    "clean_text",
    "decrypt",
    "encrypt",
    "key_schedule",
    "try_decrypt",
    "try_encrypt",
    "validate_key",
]
