# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.common.errors import AppError
from app.infra.config import settings

logger = logging.getLogger(__name__)


def _err_payload(message: str, detail: Any = None) -> Dict[str, Any]:
    data: Dict[str, Any] = {"error": message}
    if detail is not None:
        data["detail"] = jsonable_encoder(detail)
    return data


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:  # noqa: ARG001
    if exc.status_code >= 500:
        logger.error("%s: %s", exc.code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=_err_payload(exc.message, exc.detail),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:  # noqa: ARG001
    # 坏 JSON 和字段校验失败都算客户端错误
    return JSONResponse(
        status_code=400,
        content=_err_payload("Invalid request body", detail=exc.errors()),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # 路由没匹配上（含路径存在但方法没注册）一律 404
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content=_err_payload(f"Route not found: {request.method} {request.url.path}"),
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=_err_payload(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def database_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:  # noqa: ARG001
    logger.exception("Database error")
    return JSONResponse(
        status_code=500,
        content=_err_payload("Database error", None if settings.is_prod else str(exc)),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:  # noqa: ARG001
    logger.exception("Unhandled error")
    return JSONResponse(
        status_code=500,
        content=_err_payload("Internal Server Error", None if settings.is_prod else repr(exc)),
    )
