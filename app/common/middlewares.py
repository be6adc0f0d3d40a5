# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.common.exception_handlers import unhandled_error_handler
from app.common.trace import normalize_trace_id, set_trace_id

access_logger = logging.getLogger("blog.access")


class TraceIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        trace_id = normalize_trace_id(request.headers.get("X-Request-Id"))
        set_trace_id(trace_id)
        try:
            response: Response = await call_next(request)
        except Exception as exc:  # noqa: BLE001
            # 未处理异常在这里就转成 500，响应上也要带 trace_id
            response = await unhandled_error_handler(request, exc)
        response.headers["X-Trace-Id"] = trace_id
        return response


class RequestLogMiddleware(BaseHTTPMiddleware):
    """访问日志：METHOD path status 耗时"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        path = request.url.path
        try:
            response: Response = await call_next(request)
        except Exception:
            cost_ms = (time.perf_counter() - start) * 1000
            access_logger.info("%s %s 500 %.1f ms", request.method, path, cost_ms)
            raise
        cost_ms = (time.perf_counter() - start) * 1000
        access_logger.info("%s %s %d %.1f ms", request.method, path, response.status_code, cost_ms)
        return response
