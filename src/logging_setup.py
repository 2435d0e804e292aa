from __future__ import annotations

import logging

LOGGER_NAME = "snippets"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the project logger."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


__all__ = ["LOGGER_NAME", "configure_logging"]
