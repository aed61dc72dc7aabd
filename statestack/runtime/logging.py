"""Logging pipeline implementation."""

from __future__ import annotations

import logging
import queue
from dataclasses import dataclass
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from statestack.api.logging import LoggingConfig
from statestack.runtime.config import resolve_log_level_name
from statestack.runtime.json_codec import dumps_text

_PIPELINE: _InstalledPipeline | None = None
_STANDARD_RECORD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
    }
)


class JsonFormatter(logging.Formatter):
    """JSON formatter with extra-field preservation."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        extras = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_RECORD_FIELDS}
        if extras:
            payload["fields"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return dumps_text(payload, default=repr)


@dataclass(slots=True)
class _InstalledPipeline:
    """Handlers this module attached to the root logger and owns."""

    root_handler: logging.Handler
    owned: tuple[logging.Handler, ...]
    listener: QueueListener | None = None


def _build_handlers(config: LoggingConfig) -> tuple[logging.Handler, ...]:
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_resolve_formatter(config.console_format))
    if not config.file_path:
        return (console_handler,)
    file_path = Path(config.file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
    file_handler.setFormatter(_resolve_formatter(config.file_format))
    return (console_handler, file_handler)


def configure_logging(config: LoggingConfig) -> None:
    """Replace root handlers; file output is streamed through a queue listener."""
    global _PIPELINE

    shutdown_logging()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    handlers = _build_handlers(config)
    if len(handlers) == 1:
        _PIPELINE = _InstalledPipeline(root_handler=handlers[0], owned=handlers)
        root.addHandler(handlers[0])
        return

    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _PIPELINE = _InstalledPipeline(
        root_handler=QueueHandler(log_queue),
        owned=handlers,
        listener=listener,
    )
    root.addHandler(_PIPELINE.root_handler)
    listener.start()


def shutdown_logging() -> None:
    """Drain the listener, detach installed handlers from root and close them."""
    global _PIPELINE

    pipeline = _PIPELINE
    if pipeline is None:
        return
    _PIPELINE = None
    logging.getLogger().removeHandler(pipeline.root_handler)
    if pipeline.listener is not None:
        pipeline.listener.stop()
    for handler in pipeline.owned:
        handler.close()


def setup_logging() -> None:
    """Configure minimal logging if no handlers are present."""
    root = logging.getLogger()
    if root.handlers:
        return
    configure_logging(
        LoggingConfig(
            level_name=resolve_log_level_name(default="INFO"),
            console_format="text",
            file_path=None,
            file_format="json",
        )
    )


def get_logger(name: str) -> logging.Logger:
    """Return namespaced logger instance."""
    return logging.getLogger(name)


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
