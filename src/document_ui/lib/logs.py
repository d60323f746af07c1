"""
Logging utilities for the Document UI.

All application loggers are children of the "document_ui" logger, which
owns the only handler. Module loggers propagate to it, so the level set by
LOG_LEVEL applies everywhere and pytest's caplog sees every record.
"""

import logging
import os
from pathlib import Path

# Default log level from environment or INFO
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_ROOT = "document_ui"

# The supabase client logs every HTTP request through these at INFO.
_CHATTY_LIBRARIES = ("httpx", "httpcore", "hpack")


def _root() -> logging.Logger:
    root = logging.getLogger(_ROOT)
    if not root.handlers:
        level = getattr(logging, _LOG_LEVEL, logging.INFO)
        root.setLevel(level)
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
        if level > logging.DEBUG:
            for library in _CHATTY_LIBRARIES:
                logging.getLogger(library).setLevel(logging.WARNING)
    return root


def logger(name: str) -> logging.Logger:
    """
    Return the application logger for a module.

    Args:
        name: Logger name or __file__ path; paths are reduced to the
            module name.

    Returns:
        A child of the "document_ui" logger.
    """
    if "/" in name or "\\" in name:
        name = Path(name).stem
    return _root().getChild(name)
