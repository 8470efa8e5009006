# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar la configuración y recargar módulos.
# --------------------------------------------------------------

import importlib
from typing import Iterator

import pytest

FIXED_KEY = "0123456789abcdef" * 4
FIXED_IV = "TestIV123456"


@pytest.fixture(autouse=True)
def _isolate_action_state(monkeypatch) -> Iterator[None]:
    """Limpia la configuración de acciones y recarga actioncrypt.action.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.delenv("ENCRYPTION_ACTION_KEY", raising=False)
    monkeypatch.delenv("ENCRYPTION_ACTION_IV", raising=False)
    monkeypatch.delenv("CONNECTION_STRING", raising=False)

    import actioncrypt.action as action_module

    importlib.reload(action_module)

    yield


@pytest.fixture
def action_env(monkeypatch) -> None:
    """Configura el par clave/nonce fijo para la fachada de acciones.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.
    """
    monkeypatch.setenv("ENCRYPTION_ACTION_KEY", FIXED_KEY)
    monkeypatch.setenv("ENCRYPTION_ACTION_IV", FIXED_IV)
