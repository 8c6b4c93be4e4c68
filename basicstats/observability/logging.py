"""Standard Python logging configuration shared by the CLI and the HTTP service."""
from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = '[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S %z'

# Servers that install their own handlers; their records are routed through ours
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

def setup_logging(level: int = logging.INFO, stream: TextIO | None = None) -> None:
    """Install a single bracketed-format handler on the root logger.

    Only the first call per process takes effect. The CLI passes stderr so
    stdout carries nothing but the report; the service logs to stdout.
    """
    if getattr(setup_logging, "_configured", False):  # type: ignore[attr-defined]
        return

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
        server_logger.setLevel(level)

    setup_logging._configured = True  # type: ignore[attr-defined]
