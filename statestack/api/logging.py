"""Public logging API."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


def configure_logging(config: LoggingConfig) -> None:
    """Install console and optional file handlers on the root logger."""
    from statestack.runtime.logging import configure_logging as runtime_configure

    runtime_configure(config)


__all__ = ["LoggingConfig", "configure_logging"]
