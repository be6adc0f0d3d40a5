# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import posts as posts_api, users as users_api
from app.common.errors import AppError
from app.common.exception_handlers import (
    app_error_handler,
    database_error_handler,
    http_error_handler,
    unhandled_error_handler,
    validation_error_handler,
)
from app.common.logging import setup_logging
from app.common.middlewares import RequestLogMiddleware, TraceIdMiddleware
from app.domain import schemas
from app.infra.config import settings
from app.infra.db import MongoConnector

setup_logging(settings.LOG_LEVEL)

WELCOME = "Welcome to the Express Server!"


def create_app(connector: Optional[MongoConnector] = None) -> FastAPI:
    mongo = connector or MongoConnector(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # 连不上库直接抛错，进程启动失败
        mongo.connect()
        try:
            yield
        finally:
            mongo.close()

    app = FastAPI(
        title="blog-app-backend",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.mongo = mongo

    # ---------- middlewares / handlers ----------

    # 后加的在外层：trace 最先注入，访问日志在它里面，日志里才带得上 trace_id
    app.add_middleware(RequestLogMiddleware)
    app.add_middleware(TraceIdMiddleware)

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(PyMongoError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    @app.get("/", response_model=schemas.WelcomeResponse)
    def welcome() -> dict:
        return {"welcome": WELCOME}

    @app.get("/health")
    def health_check(request: Request) -> dict:
        connected = request.app.state.mongo.is_connected
        return {"status": "ok", "database": "up" if connected else "down"}

    # 用户 / 文章
    app.include_router(users_api.router)
    app.include_router(posts_api.router)

    return app


app = create_app()
