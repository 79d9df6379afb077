"""Logging configuration helpers."""

import logging


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure application logging with a single stream handler."""
    logger = logging.getLogger("lifter_nutrition")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
