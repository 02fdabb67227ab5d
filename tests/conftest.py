from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from expense_log.core.config import Settings
from expense_log.db.dal import Database
from expense_log.db.schema import init_db
from expense_log.db.seed import seed_expenses
from expense_log.main import create_app

from expense_fixtures import make_expenses_array


@pytest.fixture
def settings(tmp_path):
    settings = Settings(data_dir=tmp_path, db_filename="test.sqlite3")
    settings.init_post_load()
    return settings


@pytest.fixture
def app(settings):
    return create_app(settings_override=settings)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def test_expenses(settings, app):
    expenses = make_expenses_array()
    seed_expenses(settings.db_path, expenses)
    return expenses


@pytest.fixture
def store(tmp_path):
    """A bare Database on an initialised file, without the HTTP app."""
    path = tmp_path / "store.sqlite3"
    init_db(path)
    return Database(path)
