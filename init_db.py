# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from app.infra.config import settings
from app.infra.db import MongoConnector


def init_db() -> None:
    print(f"Creating indexes on {settings.MONGO_DB}...")
    connector = MongoConnector(settings)
    connector.connect()
    connector.close()
    print("Done.")


if __name__ == "__main__":
    init_db()
