# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

EMAIL_PATTERN = r"^[\w\.+-]+@[\w\.-]+\.\w+$"


class _Input(BaseModel):
    """请求体：未知字段直接拒绝"""

    model_config = ConfigDict(extra="forbid")


class _Output(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")


# ---------- users ----------

class UserCreate(_Input):
    name: str = Field(..., min_length=1, max_length=100)
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN, max_length=255)
    age: Optional[int] = Field(None, ge=0, le=150)
    bio: Optional[str] = Field(None, max_length=1000)


class UserUpdate(_Input):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN, max_length=255)
    age: Optional[int] = Field(None, ge=0, le=150)
    bio: Optional[str] = Field(None, max_length=1000)


class UserOut(_Output):
    name: str
    email: Optional[str] = None
    age: Optional[int] = None
    bio: Optional[str] = None


# ---------- posts ----------

class PostCreate(_Input):
    title: str = Field(..., min_length=1, max_length=200)
    content: str
    author: Optional[str] = Field(None, description="作者 User 的 _id")
    tags: Optional[List[str]] = None


class PostUpdate(_Input):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = None
    author: Optional[str] = None
    tags: Optional[List[str]] = None


class PostOut(_Output):
    title: str
    content: str
    author: Optional[str] = None
    tags: Optional[List[str]] = None


# ---------- common ----------

class MessageResponse(BaseModel):
    message: str


class WelcomeResponse(BaseModel):
    welcome: str
