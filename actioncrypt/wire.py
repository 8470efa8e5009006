# --------------------------------------------------------------
# File: wire.py
# Description: Empaquetado Base64 del formato nonce ‖ tag ‖ ciphertext.
# --------------------------------------------------------------
"""Serialización del paquete cifrado para almacenamiento y transporte.

El orden de los campos y sus desplazamientos forman parte del contrato con
otras implementaciones: nonce en ``[0:12]``, tag en ``[12:28]`` y ciphertext
desde el byte 28 hasta el final.
"""

import base64
import binascii

from pydantic import ValidationError

from actioncrypt.errors import FormatError, NullInputError
from actioncrypt.models import HEADER_SIZE, NONCE_SIZE, EncryptedPackage


def pack_package(package: EncryptedPackage) -> str:
    """Renderiza un paquete cifrado como texto Base64 estándar con relleno.

    Args:
        package (EncryptedPackage): Nonce, tag y ciphertext a concatenar.

    Returns:
        str: Base64 de ``nonce ‖ tag ‖ ciphertext``.

    """

    return base64.b64encode(package.to_bytes()).decode("ascii")


def unpack_package(text: str) -> EncryptedPackage:
    """Decodifica texto Base64 y separa sus tres campos.

    Args:
        text (str): Paquete producido por :func:`pack_package`.

    Returns:
        EncryptedPackage: Campos del paquete en bruto.

    Raises:
        NullInputError: Si ``text`` es ``None``.
        FormatError: Si el Base64 es inválido o el paquete mide menos de 28 bytes.

    """

    if text is None:
        raise NullInputError("El paquete cifrado es obligatorio")
    try:
        raw = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise FormatError("El paquete cifrado no es Base64 válido") from exc

    if len(raw) < HEADER_SIZE:
        raise FormatError(
            f"El paquete cifrado mide {len(raw)} bytes; mínimo {HEADER_SIZE}"
        )

    try:
        return EncryptedPackage(
            nonce=raw[:NONCE_SIZE],
            tag=raw[NONCE_SIZE:HEADER_SIZE],
            ciphertext=raw[HEADER_SIZE:],
        )
    except ValidationError as exc:
        raise FormatError("El paquete cifrado tiene una estructura inválida") from exc
