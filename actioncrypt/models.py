# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

from typing import Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator

KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16
HEADER_SIZE = NONCE_SIZE + TAG_SIZE

ACTION_KEY_SETTING = "ENCRYPTION_ACTION_KEY"
ACTION_IV_SETTING = "ENCRYPTION_ACTION_IV"


class EncryptedPackage(BaseModel):
    """Representa el paquete `nonce ‖ tag ‖ ciphertext` de una operación AES-GCM.

    Attributes:
        nonce (bytes): Vector de inicialización de 96 bits.
        tag (bytes): Etiqueta de autenticación de 128 bits.
        ciphertext (bytes): Datos cifrados sin etiqueta; misma longitud que el claro.

    """

    model_config = ConfigDict(frozen=True)

    nonce: bytes
    tag: bytes
    ciphertext: bytes

    @field_validator("nonce")
    @classmethod
    def check_nonce(cls, value: bytes) -> bytes:
        if len(value) != NONCE_SIZE:
            raise ValueError(f"nonce debe tener {NONCE_SIZE} bytes")
        return value

    @field_validator("tag")
    @classmethod
    def check_tag(cls, value: bytes) -> bytes:
        if len(value) != TAG_SIZE:
            raise ValueError(f"tag debe tener {TAG_SIZE} bytes")
        return value

    def to_bytes(self) -> bytes:
        """Concatena los tres campos en el orden del formato de transporte."""

        return self.nonce + self.tag + self.ciphertext


class ActionKeyState(BaseModel):
    """Par clave/nonce de la fachada de acciones, inmutable tras su creación.

    Attributes:
        key (str): Clave AES-256 en hexadecimal (64 caracteres).
        nonce (str): Nonce cuya codificación UTF-8 ocupa 12 bytes.

    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(default="", repr=False)
    nonce: str = Field(default="", repr=False)

    @classmethod
    def from_settings(cls, getter: Callable[[str], str]) -> "ActionKeyState":
        """Construye el estado leyendo los dos valores del colaborador de configuración.

        Args:
            getter (Callable[[str], str]): Búsqueda por nombre que devuelve ``""``
                cuando el valor no existe.

        Returns:
            ActionKeyState: Estado con cadenas vacías para los valores ausentes.

        """

        return cls(
            key=getter(ACTION_KEY_SETTING) or "",
            nonce=getter(ACTION_IV_SETTING) or "",
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.key) and bool(self.nonce)
