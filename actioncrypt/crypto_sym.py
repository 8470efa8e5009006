# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-256-GCM para cifrado y descifrado de cadenas.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico sobre el formato `nonce ‖ tag ‖ ciphertext`.

El nonce lo aporta quien llama, así que el resultado es determinista: los
mismos claro, clave y nonce producen siempre el mismo paquete. Reutilizar un
nonce con la misma clave para mensajes distintos debilita la confidencialidad
y la integridad que ofrece GCM.
"""

import logging
from typing import Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from actioncrypt.errors import AuthenticationError, CryptoError, FormatError, NullInputError
from actioncrypt.hexcodec import hex_to_bytes
from actioncrypt.models import KEY_SIZE, NONCE_SIZE, TAG_SIZE, EncryptedPackage
from actioncrypt.wire import pack_package, unpack_package

logger = logging.getLogger(__name__)


def _require(**values: object) -> None:
    """Lanza NullInputError con el nombre del primer argumento ausente."""

    for name, value in values.items():
        if value is None:
            raise NullInputError(f"{name} es obligatorio")


def _key_and_nonce(key_hex: str, nonce_str: str) -> Tuple[bytes, bytes]:
    """Valida y convierte la clave hexadecimal y el nonce textual.

    Args:
        key_hex (str): Clave AES-256 en hexadecimal.
        nonce_str (str): Nonce cuya codificación UTF-8 debe ocupar 12 bytes.

    Returns:
        Tuple[bytes, bytes]: Clave de 32 bytes y nonce de 12 bytes.

    """

    key = hex_to_bytes(key_hex)
    if len(key) != KEY_SIZE:
        raise CryptoError(f"La clave debe tener {KEY_SIZE} bytes, recibidos {len(key)}")
    nonce = nonce_str.encode("utf-8")
    if len(nonce) != NONCE_SIZE:
        raise CryptoError(f"El nonce debe tener {NONCE_SIZE} bytes, recibidos {len(nonce)}")
    return key, nonce


def encrypt(plaintext: str, key_hex: str, nonce_str: str) -> str:
    """Cifra texto con AES-256-GCM y devuelve el paquete en Base64.

    Args:
        plaintext (str): Texto en claro; se codifica en UTF-8.
        key_hex (str): Clave de 64 caracteres hexadecimales.
        nonce_str (str): Nonce de 12 bytes en UTF-8.

    Returns:
        str: Base64 de ``nonce(12) ‖ tag(16) ‖ ciphertext(N)``.

    Raises:
        NullInputError: Si falta algún argumento.
        FormatError: Si la clave no es hexadecimal válido.
        CryptoError: Si la clave o el nonce no tienen la longitud exigida.

    """

    _require(plaintext=plaintext, key_hex=key_hex, nonce_str=nonce_str)
    key, nonce = _key_and_nonce(key_hex, nonce_str)
    data = plaintext.encode("utf-8")

    ct_full = AESGCM(key).encrypt(nonce, data, None)
    package = EncryptedPackage(
        nonce=nonce, tag=ct_full[-TAG_SIZE:], ciphertext=ct_full[:-TAG_SIZE]
    )
    logger.debug("AES-GCM encrypt: %d bytes de claro", len(data))
    return pack_package(package)


def decrypt(package_b64: str, key_hex: str, nonce_str: str) -> str:
    """Verifica y descifra un paquete Base64 producido por :func:`encrypt`.

    El nonce que se usa es el incrustado en el paquete; ``nonce_str`` solo se
    valida en longitud para mantener la misma firma que :func:`encrypt`.

    Args:
        package_b64 (str): Paquete cifrado en Base64.
        key_hex (str): Clave de 64 caracteres hexadecimales.
        nonce_str (str): Nonce de 12 bytes en UTF-8.

    Returns:
        str: Texto original decodificado como UTF-8.

    Raises:
        NullInputError: Si falta algún argumento.
        FormatError: Base64 inválido, paquete corto o claro que no es UTF-8.
        CryptoError: Si la clave o el nonce no tienen la longitud exigida.
        AuthenticationError: Si la etiqueta no verifica; nunca se devuelve claro.

    """

    _require(package_b64=package_b64, key_hex=key_hex, nonce_str=nonce_str)
    key, _ = _key_and_nonce(key_hex, nonce_str)
    package = unpack_package(package_b64)

    try:
        data = AESGCM(key).decrypt(package.nonce, package.ciphertext + package.tag, None)
    except InvalidTag as exc:
        logger.debug("AES-GCM decrypt: etiqueta rechazada")
        raise AuthenticationError("No se ha podido autenticar el paquete cifrado") from exc

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FormatError("El claro descifrado no es UTF-8 válido") from exc
