# nlpfeatures/utils/logging.py

import logging
import sys

from nlpfeatures.core.config import settings


def setup_logging(level: str | None = None):
    logger = logging.getLogger()
    logger.setLevel(level or settings.LOG_LEVEL)
    logger.handlers = []

    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    logger.info(f"Logging system initialized (env={settings.ENV})")
