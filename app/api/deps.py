# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from app.application.posts.usecase import PostUsecase
from app.application.users.usecase import UserUsecase
from app.infra.db import get_db  # noqa: F401

_user_uc_singleton = UserUsecase()
_post_uc_singleton = PostUsecase()


def get_user_usecase() -> UserUsecase:
    return _user_uc_singleton


def get_post_usecase() -> PostUsecase:
    return _post_uc_singleton
