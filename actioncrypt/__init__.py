# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del cifrado de acciones AES-256-GCM.
# --------------------------------------------------------------
"""Inicializa el paquete `actioncrypt` y reexporta su API pública."""

from actioncrypt.action import ac_dec, ac_enc, decrypt_connection_string
from actioncrypt.crypto_sym import decrypt, encrypt
from actioncrypt.errors import (
    ActionCryptoError,
    AuthenticationError,
    CryptoError,
    FormatError,
    NullInputError,
)

__all__ = [
    "ActionCryptoError",
    "AuthenticationError",
    "CryptoError",
    "FormatError",
    "NullInputError",
    "ac_dec",
    "ac_enc",
    "decrypt",
    "decrypt_connection_string",
    "encrypt",
]
