"""JSON serialization for state stacks.

A stack serializes to a plain JSON array of its states, bottom first, with no
extra metadata. Loading rebuilds the stack from the same array.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, overload

from statestack.api.stack import StateStackPort
from statestack.runtime.config import get_config
from statestack.runtime.json_codec import dumps_bytes, loads
from statestack.runtime.state_stack import RuntimeStateStack


def stack_to_list[TState](stack: StateStackPort[TState]) -> list[TState]:
    """Return the bottom-first list form of a stack."""
    return list(stack.get_stack())


def stack_from_list[TState](states: Iterable[TState]) -> RuntimeStateStack[TState]:
    """Rebuild a stack from its bottom-first list form."""
    return RuntimeStateStack.from_states(states)


def dumps_stack(
    stack: StateStackPort[Any],
    *,
    pretty: bool | None = None,
    default: Callable[[Any], Any] | None = None,
) -> bytes:
    """Serialize a stack to JSON bytes.

    ``pretty`` falls back to ``STATESTACK_JSON_PRETTY``. ``default`` converts
    states the encoder does not handle natively.
    """
    if pretty is None:
        pretty = get_config().json_pretty
    return dumps_bytes(stack_to_list(stack), pretty=pretty, default=default)


def dumps_stack_text(
    stack: StateStackPort[Any],
    *,
    pretty: bool | None = None,
    default: Callable[[Any], Any] | None = None,
) -> str:
    return dumps_stack(stack, pretty=pretty, default=default).decode("utf-8")


type RawJson = bytes | bytearray | memoryview | str


@overload
def loads_stack(raw: RawJson, *, decode: None = None) -> RuntimeStateStack[Any]: ...


@overload
def loads_stack[TState](
    raw: RawJson, *, decode: Callable[[Any], TState]
) -> RuntimeStateStack[TState]: ...


def loads_stack[TState](
    raw: RawJson,
    *,
    decode: Callable[[Any], TState] | None = None,
) -> RuntimeStateStack[TState] | RuntimeStateStack[Any]:
    """Parse a JSON array into a stack, optionally decoding each element."""
    payload = loads(raw)
    if not isinstance(payload, list):
        raise TypeError(f"serialized state stack must be a JSON array, got {type(payload).__name__}")
    if decode is None:
        return stack_from_list(payload)
    return stack_from_list(decode(item) for item in payload)


__all__ = [
    "dumps_stack",
    "dumps_stack_text",
    "loads_stack",
    "stack_from_list",
    "stack_to_list",
]
