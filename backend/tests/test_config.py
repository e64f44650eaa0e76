"""Settings — environment-driven configuration."""

import pytest

from product_api.config import Settings, normalize_database_url
from product_api.core.messages import Locale


@pytest.mark.parametrize("url", [
    "postgres://u:p@db:5432/products",
    "postgresql://u:p@db:5432/products",
])
def test_plain_postgres_urls_use_asyncpg(url):
    assert normalize_database_url(url) == "postgresql+asyncpg://u:p@db:5432/products"


def test_other_urls_untouched():
    url = "sqlite+aiosqlite:///:memory:"
    assert normalize_database_url(url) == url


def test_settings_normalize_database_url():
    settings = Settings(database_url="postgres://u:p@db/products")
    assert settings.database_url.startswith("postgresql+asyncpg://")


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("FRONTEND_URL", "https://shop.example")
    monkeypatch.setenv("MESSAGE_LOCALE", "es")
    settings = Settings()
    assert settings.frontend_url == "https://shop.example"
    assert settings.message_locale is Locale.ES
