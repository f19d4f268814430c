import pytest
from pydantic import ValidationError

from ecommerce.config.settings import Settings

REQUIRED = dict(DB_USERNAME="sa", DB_PASSWORD="pw", DB_HOST="db", DB_NAME="shop")


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **{**REQUIRED, **overrides})


def test_database_url_defaults_to_mssql():
    assert make_settings().DATABASE_URL == "mssql+aioodbc://sa:pw@db:1433/shop"


def test_database_url_with_query():
    settings = make_settings(DB_QUERY="?driver=ODBC+Driver+18+for+SQL+Server")
    assert settings.DATABASE_URL.endswith("/shop?driver=ODBC+Driver+18+for+SQL+Server")


def test_postgres_driver():
    settings = make_settings(DB_DRIVER="postgresql+psycopg", DB_PORT=5432, DB_PROCEDURE_STYLE="POSTGRES")
    assert settings.DATABASE_URL.startswith("postgresql+psycopg://")
    assert settings.DB_PROCEDURE_STYLE == "postgres"


def test_log_settings_are_normalized():
    settings = make_settings(LOG_LEVEL=" debug ", LOG_FORMAT="TEXT")
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "text"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("DB_HOST", "from-env")
    monkeypatch.setenv("MAX_PAGE_SIZE", "50")
    settings = Settings(_env_file=None, DB_USERNAME="sa", DB_PASSWORD="pw", DB_NAME="shop")
    assert settings.DB_HOST == "from-env"
    assert settings.MAX_PAGE_SIZE == 50


def test_missing_database_settings(monkeypatch):
    for key in REQUIRED:
        monkeypatch.delenv(key, raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_unknown_procedure_style():
    with pytest.raises(ValidationError):
        make_settings(DB_PROCEDURE_STYLE="oracle")


@pytest.mark.parametrize("default, maximum", [(0, 100), (20, 10)])
def test_default_page_size_within_bounds(default, maximum):
    with pytest.raises(ValidationError):
        make_settings(DEFAULT_PAGE_SIZE=default, MAX_PAGE_SIZE=maximum)
