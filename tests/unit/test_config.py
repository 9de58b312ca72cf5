from cpqsync.core.config import Settings, get_settings, clear_settings_cache
from cpqsync.services.xait.client import XaitClient


def test_defaults(monkeypatch):
    for name in ("SYNC_SCHEDULE_ENABLED", "XAIT_PART_LIST_VIEW_ID", "PORT", "SHOPIFY_API_VERSION"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.SHOPIFY_API_VERSION == "2024-07"
    assert settings.SHOPIFY_PRODUCT_LIMIT == 250
    assert settings.SYNC_SCHEDULE == "*/5 * * * *"
    assert settings.SYNC_SCHEDULE_ENABLED is True
    assert settings.XAIT_PART_LIST_VIEW_ID is None
    assert settings.XAIT_UPDATE_EXISTING is False
    assert settings.PORT == 3000


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("XAIT_PART_LIST_VIEW_ID", "view-7")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("XAIT_UPDATE_EXISTING", "true")
    clear_settings_cache()

    settings = get_settings()

    assert settings.XAIT_PART_LIST_VIEW_ID == "view-7"
    assert settings.PORT == 8080
    assert settings.XAIT_UPDATE_EXISTING is True
    assert get_settings() is settings


def test_clients_read_settings(mocker, settings):
    mocker.patch("cpqsync.services.xait.client.get_settings", return_value=settings)

    client = XaitClient()

    assert client.api_url == "https://xait.test/api"
    assert client.list_view_id == "view-42"
    assert client.timeout == 30.0
