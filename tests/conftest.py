"""Root conftest — shared test configuration."""

import os

# Cheap bcrypt and no global side effects for every app built in tests
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("METRICS_ENABLED", "false")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.pop("SESSION_SECRET_KEY", None)
os.environ.pop("OTLP_ENDPOINT", None)

from dataclasses import replace
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from main import create_app
from shared.config.database import build_engine, build_sessionmaker, create_tables
from shared.config.settings import Settings


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return replace(
        Settings.from_env(),
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'shop.db'}",
        metrics_enabled=False,
        rate_limit_enabled=False,
        otlp_endpoint=None,
        session_secret=None,
    )


@pytest.fixture()
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture()
def signed_client(settings):
    app = create_app(replace(settings, session_secret="test-secret"))
    with TestClient(app) as c:
        yield c


@pytest.fixture()
async def db(tmp_path: Path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}")
    await create_tables(engine)
    sessionmaker = build_sessionmaker(engine)
    async with sessionmaker() as session:
        yield session
    await engine.dispose()


def signup(client: TestClient, username: str, password: str):
    return client.post(
        "/signup", data={"username": username, "password": password}, follow_redirects=False
    )


def login(client: TestClient, username: str, password: str):
    return client.post(
        "/login", data={"username": username, "password": password}, follow_redirects=False
    )
