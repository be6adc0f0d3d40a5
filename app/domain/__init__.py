# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""
领域层：

- models: 集合名与 Mongo 文档转换（ObjectId <-> str）
- schemas: Pydantic 请求/响应模型（User / Post）
"""
from . import models, schemas  # noqa: F401

__all__ = ["models", "schemas"]
