"""File-oriented convenience wrappers."""

from .main import adfgvx


def encryptfile(file: str, key: str, output_dir: str):
    return adfgvx._surface_warnings(adfgvx.encrypt_file, file, key, output_dir)


def decryptfile(file: str, key: str, output_dir: str):
    return adfgvx._surface_warnings(adfgvx.decrypt_file, file, key, output_dir)


def handlefiles(
    files,
    key: str,
    output_dir: str,
    decrypt: bool = False,
    silent: bool = False,
    *,
    workers: int | None = None,
):
    return adfgvx._surface_warnings(
        adfgvx.cipher_files,
        files,
        key,
        output_dir,
        decrypt=decrypt,
        silent=silent,
        workers=workers,
    )


__all__ = [
    "decryptfile",
    "encryptfile",
    "handlefiles",
]
