import pytest

from konektz.config.settings import (
    ConfigurationError,
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    _async_database_url,
    get_config,
)
from konektz.fastapi_app import create_fastapi_app
from conftest import make_config


def test_get_config():
    assert get_config("production") is ProductionConfig
    assert get_config("testing") is TestingConfig
    assert get_config("unknown") is DevelopmentConfig
    assert ProductionConfig.is_production()
    assert not DevelopmentConfig.is_production()
    assert DevelopmentConfig.DEBUG and not ProductionConfig.DEBUG


def test_validate_lists_every_missing_variable():
    config = make_config("", JWT_SECRET="")
    with pytest.raises(ConfigurationError) as exc_info:
        config.validate()
    assert exc_info.value.missing == ["JWT_SECRET", "DATABASE_URL"]


def test_app_refuses_to_start_without_secret(database_url):
    with pytest.raises(ConfigurationError):
        create_fastapi_app(make_config(database_url, JWT_SECRET=""))


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgres://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
        ("postgresql://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
        ("postgresql+asyncpg://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
        ("sqlite+aiosqlite:///x.db", "sqlite+aiosqlite:///x.db"),
    ],
)
def test_database_url_uses_async_driver(url, expected):
    assert _async_database_url(url) == expected
