"""
Logging helpers.

The library itself only creates module loggers; scripts call
``setup_logging`` once to get console output.
"""

import logging

_CONFIGURED = False


def setup_logging(level: int = logging.INFO) -> None:
    """Attach a console handler to the ``polykit`` logger (idempotent)."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger("polykit")
    logger.setLevel(level)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)

    _CONFIGURED = True
