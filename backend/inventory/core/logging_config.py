"""
Logging configuration.

WHY: Modules log through ``logging.getLogger(__name__)``; this module
attaches a single console handler to the root logger so those records
are actually emitted when the app runs outside uvicorn's own config.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once.

    If the root logger already has handlers (pytest, uvicorn --log-config,
    repeated ``create_app`` calls) only the level is updated.

    Args:
        level: Logging level name, case insensitive
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
