# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from fastapi import Request
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.common.errors import UpstreamError
from app.domain.models import POSTS, USERS
from app.infra.config import Settings, settings

logger = logging.getLogger(__name__)


def ensure_indexes(db: Database) -> None:
    """唯一性交给数据库保证：email 稀疏唯一，posts 按作者查"""
    db[USERS].create_index([("email", ASCENDING)], unique=True, sparse=True, name="uniq_email")
    db[POSTS].create_index([("author", ASCENDING)], name="idx_author")


class MongoConnector:
    """进程级唯一的 MongoDB 连接，启动时 connect()，退出时 close()"""

    def __init__(
        self,
        cfg: Optional[Settings] = None,
        client_factory: Callable[..., Any] = MongoClient,
    ) -> None:
        self._cfg = cfg or settings
        self._client_factory = client_factory
        self._client: Optional[Any] = None
        self._db: Optional[Database] = None

    @property
    def is_connected(self) -> bool:
        return self._db is not None

    @property
    def database(self) -> Database:
        if self._db is None:
            raise UpstreamError(code="DB_NOT_CONNECTED", message="database not connected")
        return self._db

    def connect(self) -> Database:
        if self._db is not None:
            return self._db

        client = self._client_factory(
            self._cfg.MONGO_URI,
            serverSelectionTimeoutMS=self._cfg.MONGO_TIMEOUT_MS,
        )
        try:
            # 探活失败直接启动失败，不带着坏连接对外服务
            client.admin.command("ping")
            db = client[self._cfg.MONGO_DB]
            ensure_indexes(db)
        except PyMongoError as e:
            client.close()
            logger.error("MongoDB connect failed: %s", e)
            raise UpstreamError(code="DB_CONNECT_FAILED", message="database connection failed", detail=str(e)) from e

        self._client = client
        self._db = db
        logger.info("MongoDB connected, db=%s", self._cfg.MONGO_DB)
        return db

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed")
        self._client = None
        self._db = None


def get_db(request: Request) -> Database:
    """FastAPI 依赖：从 app.state 取连接，测试里可以 override 成假库"""
    connector: MongoConnector = request.app.state.mongo
    return connector.database
