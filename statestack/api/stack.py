"""Public state-stack API contracts."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol, overload

from statestack.api.transitions import Transition, TransitionOutcome


class StateSlot[TState](Protocol):
    """Writable handle to one position in a state stack."""

    @property
    def index(self) -> int:
        """Return bottom-based position."""

    @property
    def value(self) -> TState:
        """Return state stored at this position."""

    def replace(self, state: TState) -> TState:
        """Store a new state and return the previous one."""


class StateSlots[TState](Protocol):
    """Fixed-length writable view over part of a state stack."""

    def __len__(self) -> int:
        """Return number of viewed states."""

    def __iter__(self) -> Iterator[TState]:
        """Iterate bottom-first."""

    @overload
    def __getitem__(self, index: int) -> TState: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[TState, ...]: ...

    def __getitem__(self, index: int | slice) -> TState | tuple[TState, ...]:
        """Return one state or a snapshot of a range."""

    def __setitem__(self, index: int, state: TState) -> None:
        """Replace one state without changing the length."""


class StateStackPort[TState](Protocol):
    """Public never-empty state stack contract."""

    def active(self) -> TState:
        """Return topmost state."""

    def set_active(self, state: TState) -> TState:
        """Replace topmost state and return the previous one."""

    def split_last(self) -> tuple[TState, tuple[TState, ...]]:
        """Return active state and bottom-first snapshot of the rest."""

    def split_last_mut(self) -> tuple[TState, StateSlots[TState]]:
        """Return active state and writable view of the rest."""

    def apply(self, transition: Transition[TState]) -> TransitionOutcome[TState]:
        """Apply one transition atomically."""

    def get_stack(self) -> tuple[TState, ...]:
        """Return bottom-first snapshot."""

    def get_stack_mut(self) -> StateSlots[TState]:
        """Return writable bottom-first view."""

    def raw_states(self) -> list[TState]:
        """Return the underlying list."""

    def iter(self) -> Iterator[TState]:
        """Iterate from topmost to bottommost."""

    def iter_mut(self) -> Iterator[StateSlot[TState]]:
        """Iterate writable slots from topmost to bottommost."""

    def consume(self) -> list[TState]:
        """Hand the underlying list back to the caller."""

    def __len__(self) -> int:
        """Return number of states, always >= 1."""


def create_state_stack[TState](initial: TState) -> StateStackPort[TState]:
    """Create default single-state stack implementation."""
    from statestack.runtime.state_stack import RuntimeStateStack

    return RuntimeStateStack(initial)


def create_state_stack_many[TState](states: Iterable[TState]) -> StateStackPort[TState]:
    """Create default stack from bottom-first states; last one is active."""
    from statestack.runtime.state_stack import RuntimeStateStack

    return RuntimeStateStack.from_states(states)


__all__ = [
    "StateSlot",
    "StateSlots",
    "StateStackPort",
    "create_state_stack",
    "create_state_stack_many",
]
