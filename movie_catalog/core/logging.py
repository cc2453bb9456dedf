"""Application-wide logging configuration."""

from __future__ import annotations

import logging

from movie_catalog.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [{service}] %(name)s: %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger with a single stream handler.

    Calling it again replaces the previous handler instead of stacking one more.
    """
    level_name = (level or settings.log_level).upper()

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(LOG_FORMAT.format(service=settings.service_name))
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level_name, logging.INFO))


__all__ = ["setup_logging"]
