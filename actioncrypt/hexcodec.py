# --------------------------------------------------------------
# File: hexcodec.py
# Description: Conversión entre texto hexadecimal y bytes de clave.
# --------------------------------------------------------------
"""Codificación hexadecimal estricta para el material de clave."""

import re

from actioncrypt.errors import FormatError, NullInputError

# bytes.fromhex tolera espacios; aquí solo se aceptan dígitos hexadecimales.
_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def hex_to_bytes(hex_text: str) -> bytes:
    """Convierte una cadena hexadecimal en bytes sin distinguir mayúsculas.

    Args:
        hex_text (str): Texto con pares de dígitos hexadecimales.

    Returns:
        bytes: Secuencia de bytes equivalente (longitud ``len(hex_text) // 2``).

    Raises:
        NullInputError: Si ``hex_text`` es ``None``.
        FormatError: Si la longitud es impar o aparece un carácter no hexadecimal.

    """

    if hex_text is None:
        raise NullInputError("hex_text es obligatorio")
    if len(hex_text) % 2:
        raise FormatError("La cadena hexadecimal tiene longitud impar")
    if not _HEX_RE.fullmatch(hex_text):
        raise FormatError("La cadena hexadecimal contiene caracteres no válidos")
    return bytes.fromhex(hex_text)


def bytes_to_hex(data: bytes) -> str:
    """Representa bytes como hexadecimal en minúsculas."""

    return data.hex()
