# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Any, Dict

import mongomock
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.infra.db import ensure_indexes, get_db
from app.main import create_app


@pytest.fixture()
def mongo_db():
    client = mongomock.MongoClient()
    db = client["blog_app_test"]
    ensure_indexes(db)
    yield db
    client.close()


@pytest.fixture()
def app(mongo_db) -> FastAPI:
    application = create_app()
    application.dependency_overrides[get_db] = lambda: mongo_db
    return application


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    # 不进 with：不跑 lifespan，不去连真库
    return TestClient(app)


@pytest.fixture()
def make_user(client: TestClient):
    def _make(**fields: Any) -> Dict[str, Any]:
        payload = {"name": "Ann", **fields}
        resp = client.post("/api/users", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make
