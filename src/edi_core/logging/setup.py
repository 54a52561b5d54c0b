"""
Loguru sink configuration; every record carries the id of the HTTP request
that produced it.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from loguru import logger

from edi_core.config.config import config

REQUEST_ID_DEFAULT = "-"
_request_id_var: ContextVar[str] = ContextVar("request_id", default=REQUEST_ID_DEFAULT)
_handler_id: Optional[int] = None

LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | request_id={extra[request_id]} | "
    "{name}:{function}:{line} - {message}"
)


def _patch_record(record):
    record["extra"]["request_id"] = _request_id_var.get()


def configure_logging(
    level: Optional[str] = None, sink=None, enqueue: bool = True
) -> int:
    """
    Install the service sink, replacing the one from a previous call.

    ``level`` defaults to ``config.log_level``, which already reflects ``.env``.
    Returns the loguru handler id.
    """
    global _handler_id

    if _handler_id is None:
        logger.remove()
        logger.configure(extra={"request_id": REQUEST_ID_DEFAULT}, patcher=_patch_record)
    else:
        logger.remove(_handler_id)

    _handler_id = logger.add(
        sink or sys.stdout,
        level=(level or config.log_level).upper(),
        format=LOG_FORMAT,
        enqueue=enqueue,
        backtrace=False,
        diagnose=False,
    )
    return _handler_id


@contextmanager
def request_context(request_id: Optional[str]) -> Iterator[None]:
    """Tag log records emitted inside the block with ``request_id``."""
    token = _request_id_var.set(request_id or REQUEST_ID_DEFAULT)
    try:
        yield
    finally:
        _request_id_var.reset(token)
