# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from app.api.deps import get_db, get_post_usecase
from app.application.posts.usecase import PostUsecase
from app.domain import schemas


router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.post(
    "",
    response_model=schemas.PostOut,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_post(
    req: schemas.PostCreate,
    db: Database = Depends(get_db),
    uc: PostUsecase = Depends(get_post_usecase),
):
    return uc.create_post(db, req=req)


@router.get("", response_model=List[schemas.PostOut], response_model_exclude_none=True)
def list_posts(
    author: Optional[str] = None,
    db: Database = Depends(get_db),
    uc: PostUsecase = Depends(get_post_usecase),
):
    return uc.list_posts(db, author=author)


@router.get("/{post_id}", response_model=schemas.PostOut, response_model_exclude_none=True)
def get_post(
    post_id: str,
    db: Database = Depends(get_db),
    uc: PostUsecase = Depends(get_post_usecase),
):
    return uc.get_post(db, post_id=post_id)


@router.put("/{post_id}", response_model=schemas.PostOut, response_model_exclude_none=True)
@router.patch("/{post_id}", response_model=schemas.PostOut, response_model_exclude_none=True)
def update_post(
    post_id: str,
    req: schemas.PostUpdate,
    db: Database = Depends(get_db),
    uc: PostUsecase = Depends(get_post_usecase),
):
    return uc.update_post(db, post_id=post_id, req=req)


@router.delete("/{post_id}", response_model=schemas.MessageResponse)
def delete_post(
    post_id: str,
    db: Database = Depends(get_db),
    uc: PostUsecase = Depends(get_post_usecase),
):
    return uc.delete_post(db, post_id=post_id)
