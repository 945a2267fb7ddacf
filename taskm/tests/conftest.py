from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from taskm.app import create_app
from taskm.application.services.password_hashing import WerkzeugPasswordHasher
from taskm.infrastructure.db import Database
from taskm.shared.config import AppConfig, DatabaseConfig
from taskm.tests.fakes import TEST_SECRET


@pytest.fixture()
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        SECRET_KEY=TEST_SECRET,
        APP_ENV="test",
        database=DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'taskm.db'}"),
    )


@pytest.fixture()
def database(config: AppConfig) -> Iterator[Database]:
    db = Database(config.database)
    yield db
    db.dispose()


@pytest.fixture()
def app(config: AppConfig, database: Database) -> Flask:
    # Cheap hash rounds; the scheme itself is exercised by test_password_hashing.
    return create_app(
        config,
        database=database,
        password_hasher=WerkzeugPasswordHasher(method="pbkdf2:sha256:1000"),
    )


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client
