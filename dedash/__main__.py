"""
Run the DeDash web app.

Usage:
    python -m dedash
"""
from __future__ import annotations

import logging

import uvicorn

from .config import DEFAULT_APP_CONFIG, setup_logging

logger = logging.getLogger(__name__)


def run_server() -> None:
    setup_logging(DEFAULT_APP_CONFIG)
    logger.info("Starting DeDash on %s:%d", DEFAULT_APP_CONFIG.host, DEFAULT_APP_CONFIG.port)
    uvicorn.run(
        "dedash.app:app",
        host=DEFAULT_APP_CONFIG.host,
        port=DEFAULT_APP_CONFIG.port,
        log_level=DEFAULT_APP_CONFIG.log_level.lower(),
    )


if __name__ == "__main__":
    run_server()
