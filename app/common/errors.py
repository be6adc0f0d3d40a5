# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class AppError(Exception):
    """异常统一"""
    code: str
    message: str
    status_code: int = 400
    detail: Optional[Any] = None


class BadRequestError(AppError):
    def __init__(self, code: str = "BAD_REQUEST", message: str = "bad request", detail: Any = None) -> None:
        super().__init__(code=code, message=message, status_code=400, detail=detail)


class NotFoundError(AppError):
    def __init__(self, code: str = "NOT_FOUND", message: str = "not found", detail: Any = None) -> None:
        super().__init__(code=code, message=message, status_code=404, detail=detail)


class ConflictError(AppError):
    def __init__(self, code: str = "CONFLICT", message: str = "conflict", detail: Any = None) -> None:
        super().__init__(code=code, message=message, status_code=409, detail=detail)


class UpstreamError(AppError):
    """数据库等外部依赖不可用"""

    def __init__(self, code: str = "UPSTREAM_ERROR", message: str = "upstream unavailable", detail: Any = None) -> None:
        super().__init__(code=code, message=message, status_code=500, detail=detail)
