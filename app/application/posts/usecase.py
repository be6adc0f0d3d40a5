# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.database import Database

from app.common.errors import BadRequestError, NotFoundError
from app.domain import schemas
from app.domain.models import POSTS, USERS, parse_object_id, to_public

logger = logging.getLogger(__name__)


def _post_not_found() -> NotFoundError:
    return NotFoundError(code="POST_NOT_FOUND", message="Post not found")


class PostUsecase:
    """文章 CRUD；author 必须指向已存在的用户"""

    def _require_id(self, post_id: str) -> ObjectId:
        oid = parse_object_id(post_id)
        if oid is None:
            raise _post_not_found()
        return oid

    def _resolve_author(self, db: Database, author: str) -> ObjectId:
        oid = parse_object_id(author)
        if oid is None or db[USERS].find_one({"_id": oid}, {"_id": 1}) is None:
            raise BadRequestError(code="AUTHOR_NOT_FOUND", message="Author not found", detail={"author": author})
        return oid

    def _to_doc(self, db: Database, fields: Dict[str, Any]) -> Dict[str, Any]:
        if "author" in fields:
            fields["author"] = self._resolve_author(db, fields["author"])
        return fields

    def create_post(self, db: Database, *, req: schemas.PostCreate) -> schemas.PostOut:
        doc = self._to_doc(db, req.model_dump(exclude_none=True))
        result = db[POSTS].insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info("post created: %s", result.inserted_id)
        return schemas.PostOut.model_validate(to_public(doc))

    def list_posts(self, db: Database, *, author: Optional[str] = None) -> List[schemas.PostOut]:
        query: Dict[str, Any] = {}
        if author is not None:
            author_oid = parse_object_id(author)
            if author_oid is None:
                return []
            query["author"] = author_oid
        return [schemas.PostOut.model_validate(to_public(d)) for d in db[POSTS].find(query)]

    def get_post(self, db: Database, *, post_id: str) -> schemas.PostOut:
        doc = db[POSTS].find_one({"_id": self._require_id(post_id)})
        if doc is None:
            raise _post_not_found()
        return schemas.PostOut.model_validate(to_public(doc))

    def update_post(self, db: Database, *, post_id: str, req: schemas.PostUpdate) -> schemas.PostOut:
        oid = self._require_id(post_id)
        changes = req.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            return self.get_post(db, post_id=post_id)

        doc = db[POSTS].find_one_and_update(
            {"_id": oid},
            {"$set": self._to_doc(db, changes)},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            raise _post_not_found()
        return schemas.PostOut.model_validate(to_public(doc))

    def delete_post(self, db: Database, *, post_id: str) -> schemas.MessageResponse:
        result = db[POSTS].delete_one({"_id": self._require_id(post_id)})
        if result.deleted_count == 0:
            raise _post_not_found()
        logger.info("post deleted: %s", post_id)
        return schemas.MessageResponse(message="Post deleted")
