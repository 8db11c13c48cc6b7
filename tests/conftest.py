import pytest

from orderdesk.app import create_app
from orderdesk.common import database
from orderdesk.common.config import settings


@pytest.fixture()
def db_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'orderdesk.sqlite'}"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, db_url):
    """Point every test at its own database and keep the brokers off."""
    monkeypatch.setattr(settings, "DB_URL", db_url)
    monkeypatch.setattr(settings, "SEED_CATALOG", False)
    monkeypatch.setattr(settings, "KAFKA_ENABLED", False)
    monkeypatch.setattr(settings, "REDIS_ENABLED", False)


@pytest.fixture()
async def store(db_url):
    await database.init_db(db_url)
    yield database
    await database.close_db()


@pytest.fixture()
async def test_app():
    app = create_app()
    async with app.test_app() as running:
        yield running


@pytest.fixture()
def client(test_app):
    return test_app.test_client()
