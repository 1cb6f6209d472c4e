#!/usr/bin/env python3
"""Run the collaboration API under uvicorn using the environment settings"""

import logging
import uvicorn

from app.config.settings import settings

logger = logging.getLogger("start_server")


def server_options() -> dict:
    """uvicorn keyword arguments derived from Settings"""
    return {
        "host": settings.HOST,
        "port": settings.PORT,
        "reload": settings.RELOAD,
        "log_level": settings.LOG_LEVEL.lower(),
    }


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    options = server_options()
    logger.info("Serving main:app on %s:%s (reload=%s)", options["host"], options["port"], options["reload"])
    uvicorn.run("main:app", **options)
