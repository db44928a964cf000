from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, TextIO

import structlog

_SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def setup_logging(
    *,
    level: str | None = None,
    log_file: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    JSON log lines on stderr (stdout is reserved for the CLI's table / --json
    output), plus a JSONL file when LOG_FILE / log_file is set.

    stdlib records (httpx etc.) go through the same JSON renderer.
    """
    lvl = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    level_no = getattr(logging, lvl, logging.INFO)
    file_path = log_file or os.getenv("LOG_FILE")

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if file_path:
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(file_path, encoding="utf-8"))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level_no)
    for h in handlers:
        h.setLevel(level_no)
        h.setFormatter(formatter)
        root.addHandler(h)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(**kwargs: Any):
    # Stays a lazy proxy: module-level loggers pick up setup_logging() on first use.
    return structlog.get_logger(**kwargs)
