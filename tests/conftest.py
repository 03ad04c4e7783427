import pytest
from fastapi.testclient import TestClient

from jrtech.core.config import get_settings
from jrtech.main import app as backend_app
from jrtech.web.app import app as web_app


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def backend_client():
    return TestClient(backend_app)


@pytest.fixture
def web_client():
    return TestClient(web_app)
