import pytest
from fastapi.testclient import TestClient

from greeter.config import load_settings
from greeter.main import create_app

SETTINGS_ENV = ("PORT", "HOST", "GREETING", "LOG_LEVEL", "HEALTHCHECK_URL", "HEALTHCHECK_TIMEOUT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fixed_hostname(monkeypatch):
    monkeypatch.setattr("greeter.context.socket.gethostname", lambda: "test-host")
    return "test-host"


@pytest.fixture
def client(fixed_hostname):
    with TestClient(create_app(load_settings())) as c:
        yield c
