import logging
from typing import Iterable

import uvicorn
from fastapi import FastAPI

from .config import HOST, PORT, configure_logging

logger = logging.getLogger(__name__)


def serve(app: FastAPI, name: str, endpoints: Iterable[str] = ()) -> None:
    """Log the startup banner and block serving ``app`` on the fixed port."""
    configure_logging()
    logger.info("%s is running at http://localhost:%d", name, PORT)
    for line in endpoints:
        logger.info("  %s", line)
    # log_config=None leaves uvicorn's loggers on the rich handler above
    uvicorn.run(app, host=HOST, port=PORT, log_config=None)
