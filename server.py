# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging

import uvicorn

from app.common.logging import setup_logging
from app.infra.config import settings

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging(settings.LOG_LEVEL)
    logger.info("Server running on port %s", settings.PORT)
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        access_log=False,
    )


if __name__ == "__main__":
    main()
