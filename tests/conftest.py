"""Shared fixtures: an SQLite-backed repository wired into the API app."""
from __future__ import annotations

import pytest

from api.dependencies import get_repository
from api.main import app
from contact_book.config import Settings
from contact_book.db import ContactRepository, create_db_engine, create_tables


@pytest.fixture
def api_repo(tmp_path):
    """Point the API at a fresh SQLite file for the duration of a test."""
    settings = Settings(database_url=f"sqlite:///{tmp_path / 'contacts.db'}")
    engine = create_db_engine(settings)
    create_tables(engine)
    repository = ContactRepository(engine)
    app.dependency_overrides[get_repository] = lambda: repository
    yield repository
    app.dependency_overrides.pop(get_repository, None)
    engine.dispose()
