"""Test configuration and fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from zenaton import client as client_module
from zenaton import config as config_module
from zenaton import credentials as credentials_module
from zenaton.client import Client
from zenaton.config import ClientConfig
from zenaton.core import registry as registry_module
from zenaton.credentials import Credentials
from zenaton.services import http as http_module
from zenaton.services import serializer as serializer_module

FAKE_APP_ID = "JZMHGKYEBX"
FAKE_API_TOKEN = "N1HGV83asfRuH8RXAvFXr3CrDBzljPSuqdllCTxVkOkU014g1bIH7OOCfn7O"
FAKE_APP_ENV = "prod"

FAKE_ENCODED_DATA = "[ENCODED DATA]"
FAKE_APP_VERSION = "0.0.0"

ZENATON_ENV_VARS = [
    "ZENATON_WORKER_URL",
    "ZENATON_WORKER_PORT",
    "ZENATON_API_URL",
    "ZENATON_APP_ID",
    "ZENATON_API_TOKEN",
    "ZENATON_APP_ENV",
    "ZENATON_HTTP_TIMEOUT",
    "ZENATON_STRICT_CREDENTIALS",
    "ZENATON_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def isolated_globals(monkeypatch):
    """Start every test with fresh process-wide state and a clean environment."""
    for key in ZENATON_ENV_VARS:
        monkeypatch.delenv(key, raising=False)

    monkeypatch.setattr(registry_module, "_task_registry", None)
    monkeypatch.setattr(registry_module, "_workflow_registry", None)
    monkeypatch.setattr(credentials_module, "_credentials", Credentials())
    monkeypatch.setattr(config_module, "_config", None)
    monkeypatch.setattr(client_module, "_client", None)
    monkeypatch.setattr(http_module, "_http", None)
    monkeypatch.setattr(serializer_module, "_serializer", None)
    monkeypatch.setattr(client_module, "INITIAL_LIB_VERSION", FAKE_APP_VERSION)


@pytest.fixture
def credentials() -> Credentials:
    """Provide initialized credentials."""
    return Credentials(app_id=FAKE_APP_ID, api_token=FAKE_API_TOKEN, app_env=FAKE_APP_ENV)


@pytest.fixture
def fake_http() -> MagicMock:
    """Provide a transport whose verbs resolve immediately."""
    http = MagicMock()
    http.get = AsyncMock(return_value={"data": {"properties": "FAKE PROPERTIES"}})
    http.post = AsyncMock(return_value=None)
    http.put = AsyncMock(return_value=None)
    return http


@pytest.fixture
def fake_serializer() -> MagicMock:
    """Provide a serializer with a fixed encoding."""
    serializer = MagicMock()
    serializer.encode.return_value = FAKE_ENCODED_DATA
    return serializer


@pytest.fixture
def client(credentials, fake_http, fake_serializer) -> Client:
    """Provide a client wired to fake collaborators."""
    return Client(
        credentials=credentials,
        config=ClientConfig(),
        http=fake_http,
        serializer=fake_serializer,
    )
