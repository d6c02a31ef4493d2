# pourover_backend/app/utils/log.py
from __future__ import annotations

import logging

from pourover_backend.app.config import DEBUG_MODE

_FORMAT = "%(levelname)s:%(name)s: %(message)s"

def get_logger(name: str) -> logging.Logger:
    """
    Named logger with a stream handler attached once. Leaves loggers alone
    when the host (uvicorn, pytest) already configured the root logger.
    """
    log = logging.getLogger(name)
    if not log.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        log.addHandler(handler)
    log.setLevel(logging.DEBUG if DEBUG_MODE else logging.INFO)
    return log
