# --------------------------------------------------------------
# File: action.py
# Description: Fachada de cifrado de acciones con clave y nonce de proceso.
# --------------------------------------------------------------
"""Cifrado de cadenas de la aplicación con un par clave/nonce fijo.

El par se lee una única vez del colaborador de configuración, la primera vez
que se usa :func:`ac_enc`, :func:`ac_dec` o :func:`get_action_cipher`, y queda
inmutable durante toda la vida del proceso aunque la configuración cambie.

Aviso: todas las llamadas reutilizan el mismo nonce con la misma clave. El
cifrado es determinista y dos claros distintos cifrados así filtran su XOR y
permiten falsificar etiquetas GCM. Solo es adecuado para valores de
configuración de bajo riesgo, como la cadena de conexión.
"""

import logging
import threading
from typing import Optional

from actioncrypt import config
from actioncrypt.crypto_sym import decrypt, encrypt
from actioncrypt.models import ActionKeyState

logger = logging.getLogger(__name__)


def _is_blank(data: Optional[str]) -> bool:
    return data is None or not data.strip()


class ActionCipher:
    """Cifra y descifra con un :class:`ActionKeyState` fijo.

    Args:
        state (ActionKeyState): Par clave/nonce que se usará en todas las llamadas.

    """

    __slots__ = ("_state",)

    def __init__(self, state: ActionKeyState) -> None:
        self._state = state

    @property
    def state(self) -> ActionKeyState:
        return self._state

    def encrypt(self, data: Optional[str]) -> str:
        """Cifra `data`; las entradas nulas, vacías o en blanco devuelven ""."""

        if _is_blank(data):
            return ""
        return encrypt(data, self._state.key, self._state.nonce)

    def decrypt(self, data: Optional[str]) -> str:
        """Descifra `data`; las entradas nulas, vacías o en blanco devuelven ""."""

        if _is_blank(data):
            return ""
        return decrypt(data, self._state.key, self._state.nonce)


_init_lock = threading.Lock()
_action_cipher: Optional[ActionCipher] = None


def get_action_cipher() -> ActionCipher:
    """Devuelve la instancia de proceso, creándola una sola vez bajo bloqueo.

    Returns:
        ActionCipher: Cifrador con el par leído de ``ENCRYPTION_ACTION_KEY`` y
        ``ENCRYPTION_ACTION_IV``; vacíos si no están configurados.

    """

    global _action_cipher
    cipher = _action_cipher
    if cipher is not None:
        return cipher
    with _init_lock:
        if _action_cipher is None:
            state = ActionKeyState.from_settings(config.get_setting)
            if state.is_configured:
                logger.info("Clave de acciones cargada desde la configuración")
            else:
                logger.warning(
                    "Clave o nonce de acciones sin configurar; el cifrado fallará"
                )
            _action_cipher = ActionCipher(state)
        return _action_cipher


def ac_enc(data: Optional[str]) -> str:
    """Cifra `data` con el par de proceso.

    Args:
        data (Optional[str]): Texto en claro.

    Returns:
        str: Paquete Base64, o "" si `data` es nula, vacía o solo espacios.

    """

    return get_action_cipher().encrypt(data)


def ac_dec(data: Optional[str]) -> str:
    """Descifra `data` con el par de proceso; simétrica a :func:`ac_enc`."""

    return get_action_cipher().decrypt(data)


def decrypt_connection_string(name: str = config.DEFAULT_CONNECTION) -> str:
    """Lee la cadena de conexión cifrada `name` y la devuelve en claro.

    Args:
        name (str): Nombre del valor de configuración con la cadena cifrada.

    Returns:
        str: Cadena de conexión descifrada, o "" si no está configurada.

    """

    return ac_dec(config.get_connection(name))
