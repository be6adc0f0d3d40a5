# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import AutoReconnect, ServerSelectionTimeoutError

from app.api.deps import get_user_usecase
from app.common.errors import UpstreamError
from app.infra.config import settings
from app.infra.db import get_db


@pytest.fixture()
def broken_db():
    db = MagicMock()
    collection = db.__getitem__.return_value
    collection.find.side_effect = ServerSelectionTimeoutError("no servers available")
    collection.find_one.side_effect = AutoReconnect("connection reset")
    collection.insert_one.side_effect = AutoReconnect("connection reset")
    collection.find_one_and_update.side_effect = AutoReconnect("connection reset")
    collection.delete_one.side_effect = ServerSelectionTimeoutError("no servers available")
    return db


@pytest.fixture()
def broken_client(app, broken_db):
    app.dependency_overrides[get_db] = lambda: broken_db
    return TestClient(app)


def test_database_failure_is_500_json(broken_client):
    resp = broken_client.get("/api/users")
    assert resp.status_code == 500
    assert resp.json()["error"] == "Database error"

    resp = broken_client.post("/api/users", json={"name": "Ann"})
    assert resp.status_code == 500
    assert resp.json()["error"] == "Database error"

    resp = broken_client.get("/api/posts/64b7f0c2a1b2c3d4e5f60718")
    assert resp.status_code == 500


@pytest.mark.parametrize("resource", ["users", "posts"])
def test_update_and_delete_database_failure_is_500_json(broken_client, resource):
    item_id = "64b7f0c2a1b2c3d4e5f60718"
    field = "name" if resource == "users" else "title"

    resp = broken_client.put(f"/api/{resource}/{item_id}", json={field: "Edited"})
    assert resp.status_code == 500
    assert resp.json()["error"] == "Database error"

    resp = broken_client.delete(f"/api/{resource}/{item_id}")
    assert resp.status_code == 500
    assert resp.json()["error"] == "Database error"


def test_database_failure_hides_detail_in_prod(broken_client, monkeypatch):
    monkeypatch.setattr(settings, "ENV", "prod")
    resp = broken_client.get("/api/users")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Database error"}


def test_validation_still_runs_before_database(broken_client):
    resp = broken_client.post("/api/users", json={})
    assert resp.status_code == 400


class _ExplodingUsecase:
    def list_users(self, db):
        raise RuntimeError("boom")


class _UpstreamUsecase:
    def list_users(self, db):
        raise UpstreamError(message="search backend down")


def test_unhandled_error_is_500_with_detail_outside_prod(app):
    app.dependency_overrides[get_user_usecase] = _ExplodingUsecase
    client = TestClient(app, raise_server_exceptions=False)

    resp = client.get("/api/users")
    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "Internal Server Error"
    assert "boom" in body["detail"]


def test_unhandled_error_has_no_detail_in_prod(app, monkeypatch):
    monkeypatch.setattr(settings, "ENV", "prod")
    app.dependency_overrides[get_user_usecase] = _ExplodingUsecase
    client = TestClient(app, raise_server_exceptions=False)

    resp = client.get("/api/users")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal Server Error"}


def test_app_error_carries_its_status(app):
    app.dependency_overrides[get_user_usecase] = _UpstreamUsecase
    client = TestClient(app)

    resp = client.get("/api/users")
    assert resp.status_code == 500
    assert resp.json() == {"error": "search backend down"}


def test_unhandled_error_response_carries_trace_id(app):
    app.dependency_overrides[get_user_usecase] = _ExplodingUsecase
    client = TestClient(app)

    resp = client.get("/api/users", headers={"X-Request-Id": "req-500"})
    assert resp.status_code == 500
    assert resp.headers["X-Trace-Id"] == "req-500"
    assert resp.json()["error"] == "Internal Server Error"
