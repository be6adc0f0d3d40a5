# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar
from typing import Optional


_trace_id_ctx: ContextVar[str] = ContextVar("trace_id", default="-")

# 外部传入的 X-Request-Id 只接受这种形状，否则重新生成
_TRACE_ID_RE = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def new_trace_id() -> str:
    return uuid.uuid4().hex


def normalize_trace_id(value: Optional[str]) -> str:
    if value and _TRACE_ID_RE.match(value):
        return value
    return new_trace_id()


def set_trace_id(trace_id: str) -> None:
    _trace_id_ctx.set(trace_id or "-")


def get_trace_id() -> str:
    return _trace_id_ctx.get() or "-"
