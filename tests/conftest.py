"""
Shared fixtures for the test suite.
"""
import pytest

from pokecatch.PokeApp import create_app, EXTENSION_KEY
from pokecatch.config import Config
from pokecatch.repositories.memory_repo import InMemoryPokedexRepository
from pokecatch.services import PokedexService


class _TestConfig(Config):
    LOG_LEVEL = 'DEBUG'


@pytest.fixture
def service():
    """A fresh service over an empty in-memory repository."""
    return PokedexService(InMemoryPokedexRepository())


@pytest.fixture
def app(tmp_path):
    cfg = _TestConfig()
    cfg.STATIC_DIR = str(tmp_path)
    (tmp_path / 'index.html').write_text('<h1>pokecatch</h1>', encoding='utf-8')
    app = create_app(cfg)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_service(app):
    """The service instance wired into `app`."""
    return app.extensions[EXTENSION_KEY].service
