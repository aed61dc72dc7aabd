"""State-stack runtime configuration sourced from environment."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True, slots=True)
class StateStackConfig:
    """Immutable runtime configuration."""

    trace_transitions: bool
    json_pretty: bool
    log_level: str


_CONFIG: ContextVar[StateStackConfig | None] = ContextVar("statestack_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("STATESTACK_LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_config(*, env: Mapping[str, str] | None = None) -> StateStackConfig:
    """Load immutable configuration from env vars or an explicit mapping."""
    return StateStackConfig(
        trace_transitions=_flag("STATESTACK_TRACE_TRANSITIONS", False, env=env),
        json_pretty=_flag("STATESTACK_JSON_PRETTY", False, env=env),
        log_level=resolve_log_level_name(env=env),
    )


def initialize_config(*, env: Mapping[str, str] | None = None) -> StateStackConfig:
    config = load_config(env=env)
    _CONFIG.set(config)
    return config


def set_config(config: StateStackConfig | None) -> StateStackConfig | None:
    _CONFIG.set(config)
    return config


def get_config() -> StateStackConfig:
    config = _CONFIG.get()
    if config is not None:
        return config
    return initialize_config()


__all__ = [
    "StateStackConfig",
    "get_config",
    "initialize_config",
    "load_config",
    "resolve_log_level_name",
    "set_config",
]
