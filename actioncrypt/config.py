"""Colaborador de configuración: valores de la app leídos del entorno y `.env`."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_CONNECTION = "CONNECTION_STRING"


def get_setting(key_name: str) -> str:
    """Devuelve el valor de configuración `key_name` o "" si no existe."""

    if not key_name:
        return ""
    try:
        return os.getenv(key_name) or ""
    except (TypeError, ValueError) as exc:
        # Contrato del colaborador: cualquier fallo de búsqueda equivale a "".
        logger.warning("No se pudo leer la configuración %s: %s", key_name, exc)
        return ""


def get_connection(key_name: str = DEFAULT_CONNECTION) -> str:
    """Devuelve la cadena de conexión `key_name` (normalmente cifrada) o ""."""

    return get_setting(key_name)
