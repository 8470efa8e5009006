# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del subsistema de cifrado.
# --------------------------------------------------------------
"""Excepciones lanzadas por las primitivas y la fachada de cifrado."""


class ActionCryptoError(Exception):
    """Base común de todos los errores de `actioncrypt`."""


class FormatError(ActionCryptoError, ValueError):
    """Hex mal formado, Base64 inválido o paquete demasiado corto."""


class CryptoError(ActionCryptoError, ValueError):
    """Clave o nonce con longitud distinta de la exigida por AES-256-GCM."""


class AuthenticationError(ActionCryptoError):
    """La etiqueta GCM no verifica: datos alterados, clave o nonce incorrectos."""


class NullInputError(ActionCryptoError, TypeError):
    """Falta un argumento obligatorio de la API de bajo nivel."""
