# tests/conftest.py
import os

# The scheduler must not start while the app is under test
os.environ["SYNC_SCHEDULE_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient

from cpqsync.core.config import Settings, clear_settings_cache
from cpqsync.dependencies import get_sync_service
from cpqsync.main import app
from cpqsync.services.sync_service import CatalogSyncService
from tests.mocks import MockAuthManager, MockShopifyClient, MockXaitClient


@pytest.fixture(scope="session")
def settings():
    """Provide test settings"""
    return Settings(
        SHOPIFY_STORE_URL="https://test-store.myshopify.com",
        SHOPIFY_ADMIN_TOKEN="shpat_test",
        XAIT_API_URL="https://xait.test/api",
        XAIT_USERNAME="sync-user",
        XAIT_PASSWORD="secret",
        XAIT_PART_LIST_VIEW_ID="view-42",
        SYNC_SCHEDULE_ENABLED=False,
    )


@pytest.fixture(autouse=True)
def fresh_settings_cache():
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_httpx(mocker):
    """
    Patch httpx.AsyncClient and hand back the object yielded by its
    ``async with`` block; set ``.request`` / ``.post`` return values on it.
    """
    mock_client_cls = mocker.patch("httpx.AsyncClient")
    http = mocker.AsyncMock()
    mock_client_cls.return_value.__aenter__.return_value = http
    mock_client_cls.return_value.__aexit__.return_value = False
    return http


@pytest.fixture
def make_response(mocker):
    def _make(status_code=200, json_data=None, text=""):
        response = mocker.MagicMock()
        response.status_code = status_code
        if json_data is None:
            response.json.side_effect = ValueError("No JSON")
            response.content = text.encode()
        else:
            response.json.return_value = json_data
            response.content = b"{}"
        response.text = text
        return response
    return _make


@pytest.fixture
def sample_products():
    """Provide sample Shopify products for tests"""
    return [
        {
            "id": 1,
            "title": "Bench",
            "body_html": "<p>Adjustable bench</p>",
            "variants": [{"id": 10, "sku": "BP-100"}],
        },
        {
            "id": 2,
            "title": "Rack",
            "body_html": None,
            "variants": [
                {"id": 20, "sku": "RK-200"},
                {"id": 21, "sku": ""},
            ],
        },
    ]


@pytest.fixture
def make_service():
    def _make(products=None, existing=None, failing_writes=(), auth=None, shopify=None, xait=None,
              update_existing=False):
        return CatalogSyncService(
            shopify_client=shopify or MockShopifyClient(products),
            xait_client=xait or MockXaitClient(existing=existing, failing_writes=failing_writes),
            auth_manager=auth or MockAuthManager(),
            update_existing=update_existing,
        )
    return _make


@pytest.fixture
def test_client():
    """Provide a test client; routes get the overridden sync service"""
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def override_service():
    def _override(service):
        app.dependency_overrides[get_sync_service] = lambda: service
        return service
    return _override
