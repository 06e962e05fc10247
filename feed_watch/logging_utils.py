from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from rich.logging import RichHandler

from .config import LoggingConfig


def setup_logging(cfg: LoggingConfig, log_dir: Path | None = None) -> logging.Logger:
    logger = logging.getLogger("feed_watch")
    logger.setLevel(_level_from_string(cfg.level))
    logger.handlers = []
    logger.propagate = False

    if cfg.console:
        console_handler = RichHandler(rich_tracebacks=True, show_time=False, show_level=True)
        console_handler.setLevel(_level_from_string(cfg.level))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console_handler)

    if cfg.file:
        directory = log_dir if log_dir is not None else Path(cfg.directory)
        directory.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(directory / cfg.filename, encoding="utf-8")
        file_handler.setLevel(_level_from_string(cfg.level))
        file_handler.setFormatter(_build_file_formatter(cfg.format))
        logger.addHandler(file_handler)

    return logger


def log_event(
    logger: logging.Logger | logging.LoggerAdapter | None, message: str, **fields: Any
) -> None:
    if logger is None:
        return
    logger.info(message, extra=fields)


class FeedLogAdapter(logging.LoggerAdapter):
    """Stamps every record with the feed being processed.

    Fields passed through `extra=` are merged over the adapter's own, so a
    call can still override `feed_url`.
    """

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs


def feed_logger(logger: logging.Logger, url: str) -> FeedLogAdapter:
    return FeedLogAdapter(logger, {"feed_url": url})


class JsonlFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(_extract_extras(record))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


# Attributes every LogRecord carries; anything else arrived through `extra=`
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


def _extract_extras(record: logging.LogRecord) -> dict[str, Any]:
    return {key: value for key, value in record.__dict__.items() if key not in _RESERVED}


def _build_file_formatter(fmt: str) -> logging.Formatter:
    if fmt == "jsonl":
        return JsonlFormatter()
    return logging.Formatter(
        "%(asctime)s %(levelname)s %(feed_url)s %(message)s", defaults={"feed_url": "-"}
    )


def _level_from_string(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)
