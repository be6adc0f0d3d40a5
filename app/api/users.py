# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from app.api.deps import get_db, get_user_usecase
from app.application.users.usecase import UserUsecase
from app.domain import schemas


router = APIRouter(prefix="/api/users", tags=["users"])


@router.post(
    "",
    response_model=schemas.UserOut,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_user(
    req: schemas.UserCreate,
    db: Database = Depends(get_db),
    uc: UserUsecase = Depends(get_user_usecase),
):
    return uc.create_user(db, req=req)


@router.get("", response_model=List[schemas.UserOut], response_model_exclude_none=True)
def list_users(
    db: Database = Depends(get_db),
    uc: UserUsecase = Depends(get_user_usecase),
):
    return uc.list_users(db)


@router.get("/{user_id}", response_model=schemas.UserOut, response_model_exclude_none=True)
def get_user(
    user_id: str,
    db: Database = Depends(get_db),
    uc: UserUsecase = Depends(get_user_usecase),
):
    return uc.get_user(db, user_id=user_id)


@router.put("/{user_id}", response_model=schemas.UserOut, response_model_exclude_none=True)
@router.patch("/{user_id}", response_model=schemas.UserOut, response_model_exclude_none=True)
def update_user(
    user_id: str,
    req: schemas.UserUpdate,
    db: Database = Depends(get_db),
    uc: UserUsecase = Depends(get_user_usecase),
):
    return uc.update_user(db, user_id=user_id, req=req)


@router.delete("/{user_id}", response_model=schemas.MessageResponse)
def delete_user(
    user_id: str,
    db: Database = Depends(get_db),
    uc: UserUsecase = Depends(get_user_usecase),
):
    return uc.delete_user(db, user_id=user_id)
