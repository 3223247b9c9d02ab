"""Shared fixtures: temporary SQLite storage and a mocked Gemini client."""
from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from udl_planner import workspace as workspace_module
from udl_planner.db import Base
from udl_planner.main import app
from udl_planner.routers.deps import get_client, get_optional_client
from udl_planner.storage import KeyValueStorage


@pytest.fixture
def anyio_backend():
	return "asyncio"


@pytest.fixture
def session_factory(tmp_path):
	engine = create_engine(f"sqlite:///{tmp_path / 'udl.db'}", connect_args={"check_same_thread": False}, future=True)
	Base.metadata.create_all(bind=engine)
	yield sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)
	engine.dispose()


@pytest.fixture
def storage(session_factory):
	storage = KeyValueStorage(session_factory)
	workspace_module.set_storage(storage)
	yield storage
	workspace_module.set_storage(None)


@pytest.fixture
def fake_client():
	client = AsyncMock()
	client.generate = AsyncMock()
	client.predict_image = AsyncMock()
	return client


@pytest.fixture
def api(storage, fake_client):
	async def _client():
		yield fake_client

	app.dependency_overrides[get_client] = _client
	app.dependency_overrides[get_optional_client] = _client
	try:
		yield TestClient(app)
	finally:
		app.dependency_overrides.clear()
