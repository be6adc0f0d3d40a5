# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
from typing import List

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from app.common.errors import ConflictError, NotFoundError
from app.domain import schemas
from app.domain.models import USERS, parse_object_id, to_public

logger = logging.getLogger(__name__)


def _user_not_found() -> NotFoundError:
    return NotFoundError(code="USER_NOT_FOUND", message="User not found")


def _email_taken() -> ConflictError:
    return ConflictError(code="USER_EMAIL_TAKEN", message="Email already in use")


class UserUsecase:
    """用户 CRUD，所有读写直接落库"""

    def _require_id(self, user_id: str) -> ObjectId:
        oid = parse_object_id(user_id)
        if oid is None:
            raise _user_not_found()
        return oid

    def create_user(self, db: Database, *, req: schemas.UserCreate) -> schemas.UserOut:
        doc = req.model_dump(exclude_none=True)
        try:
            result = db[USERS].insert_one(doc)
        except DuplicateKeyError as e:
            raise _email_taken() from e
        doc["_id"] = result.inserted_id
        logger.info("user created: %s", result.inserted_id)
        return schemas.UserOut.model_validate(to_public(doc))

    def list_users(self, db: Database) -> List[schemas.UserOut]:
        return [schemas.UserOut.model_validate(to_public(d)) for d in db[USERS].find()]

    def get_user(self, db: Database, *, user_id: str) -> schemas.UserOut:
        doc = db[USERS].find_one({"_id": self._require_id(user_id)})
        if doc is None:
            raise _user_not_found()
        return schemas.UserOut.model_validate(to_public(doc))

    def update_user(self, db: Database, *, user_id: str, req: schemas.UserUpdate) -> schemas.UserOut:
        oid = self._require_id(user_id)
        # 只改提交了的字段；显式 null 忽略
        changes = req.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            return self.get_user(db, user_id=user_id)

        try:
            doc = db[USERS].find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise _email_taken() from e
        if doc is None:
            raise _user_not_found()
        return schemas.UserOut.model_validate(to_public(doc))

    def delete_user(self, db: Database, *, user_id: str) -> schemas.MessageResponse:
        result = db[USERS].delete_one({"_id": self._require_id(user_id)})
        if result.deleted_count == 0:
            raise _user_not_found()
        logger.info("user deleted: %s", user_id)
        return schemas.MessageResponse(message="User deleted")
