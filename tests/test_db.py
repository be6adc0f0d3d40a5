# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from app.common.errors import UpstreamError
from app.infra.config import Settings
from app.infra.db import MongoConnector
from app.main import create_app


@pytest.fixture()
def cfg() -> Settings:
    return Settings(
        _env_file=None,
        MONGO_URI="mongodb://db.example:27017",
        MONGO_DB="blog_test",
        MONGO_TIMEOUT_MS=100,
    )


def test_connect_pings_and_creates_indexes(cfg):
    client = MagicMock()
    factory = MagicMock(return_value=client)
    connector = MongoConnector(cfg, client_factory=factory)

    db = connector.connect()

    factory.assert_called_once_with("mongodb://db.example:27017", serverSelectionTimeoutMS=100)
    client.admin.command.assert_called_once_with("ping")
    client.__getitem__.assert_called_once_with("blog_test")
    assert db is client.__getitem__.return_value
    assert db.__getitem__.return_value.create_index.called
    assert connector.is_connected
    assert connector.database is db

    # 重复 connect 不会再建连接
    assert connector.connect() is db
    factory.assert_called_once()


def test_connect_failure_fails_fast(cfg):
    client = MagicMock()
    client.admin.command.side_effect = ServerSelectionTimeoutError("no servers")
    connector = MongoConnector(cfg, client_factory=MagicMock(return_value=client))

    with pytest.raises(UpstreamError) as exc_info:
        connector.connect()

    assert exc_info.value.code == "DB_CONNECT_FAILED"
    client.close.assert_called_once()
    assert not connector.is_connected


def test_database_before_connect_raises(cfg):
    connector = MongoConnector(cfg, client_factory=MagicMock())
    with pytest.raises(UpstreamError):
        _ = connector.database


def test_close_is_idempotent(cfg):
    client = MagicMock()
    connector = MongoConnector(cfg, client_factory=MagicMock(return_value=client))
    connector.connect()

    connector.close()
    connector.close()

    client.close.assert_called_once()
    assert not connector.is_connected


def test_lifespan_connects_and_closes(cfg):
    client = MagicMock()
    connector = MongoConnector(cfg, client_factory=MagicMock(return_value=client))
    app = create_app(connector)

    with TestClient(app) as tc:
        assert connector.is_connected
        assert tc.get("/health").json() == {"status": "ok", "database": "up"}

    client.close.assert_called_once()
    assert not connector.is_connected


def test_lifespan_startup_fails_without_database(cfg):
    client = MagicMock()
    client.admin.command.side_effect = ServerSelectionTimeoutError("no servers")
    app = create_app(MongoConnector(cfg, client_factory=MagicMock(return_value=client)))

    with pytest.raises(UpstreamError):
        with TestClient(app):
            pass
