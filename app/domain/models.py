# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Any, Dict, Optional

from bson import ObjectId

# 集合名
USERS = "users"
POSTS = "posts"


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """字符串 -> ObjectId；非法 id 返回 None，调用方按“不存在”处理"""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def to_public(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Mongo 文档 -> 可 JSON 化的 dict（ObjectId 转字符串）"""
    out: Dict[str, Any] = {}
    for k, v in doc.items():
        out[k] = str(v) if isinstance(v, ObjectId) else v
    return out
