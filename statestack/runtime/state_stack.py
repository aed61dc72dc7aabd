"""Never-empty state stack implementation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import overload

from statestack.api.errors import EmptyStateStackError, PoppedTooMany
from statestack.api.transitions import Transition, TransitionOutcome
from statestack.runtime.config import get_config
from statestack.runtime.logging import get_logger
from statestack.runtime.transitions import apply_transition, describe_outcome

_LOG = get_logger("statestack.runtime")


@dataclass(frozen=True, slots=True)
class RuntimeStateSlot[TState]:
    """Writable handle to one bottom-based position of a stack's list."""

    states: list[TState] = field(repr=False, compare=False)
    index: int

    @property
    def value(self) -> TState:
        return self.states[self.index]

    def replace(self, state: TState) -> TState:
        """Store a new state and return the previous one."""
        previous = self.states[self.index]
        self.states[self.index] = state
        return previous


class RuntimeStateSlots[TState]:
    """Fixed-length writable view over a stack's list.

    With ``exclude_active`` the topmost state is outside the view. Item
    assignment is supported; anything that would change the length is not.
    """

    def __init__(self, states: list[TState], *, exclude_active: bool = False) -> None:
        self._states = states
        self._exclude_active = exclude_active

    def __len__(self) -> int:
        if self._exclude_active:
            return max(0, len(self._states) - 1)
        return len(self._states)

    def __iter__(self) -> Iterator[TState]:
        for index in range(len(self)):
            yield self._states[index]

    @overload
    def __getitem__(self, index: int) -> TState: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[TState, ...]: ...

    def __getitem__(self, index: int | slice) -> TState | tuple[TState, ...]:
        if isinstance(index, slice):
            return tuple(self._states[: len(self)][index])
        return self._states[self._normalize(index)]

    def __setitem__(self, index: int, state: TState) -> None:
        if isinstance(index, slice):
            raise TypeError("state slots do not support slice assignment")
        self._states[self._normalize(index)] = state

    def __repr__(self) -> str:
        return f"RuntimeStateSlots({list(self)!r})"

    def _normalize(self, index: int) -> int:
        size = len(self)
        position = index + size if index < 0 else index
        if not 0 <= position < size:
            raise IndexError("state slot index out of range")
        return position


class RuntimeStateStack[TState]:
    """Bottom-first list of states whose last element is active.

    The list is never empty: construction needs at least one state and
    :meth:`apply` is the only operation that changes the length.
    """

    def __init__(self, initial: TState) -> None:
        self._states: list[TState] = [initial]

    @classmethod
    def from_states(cls, states: Iterable[TState]) -> RuntimeStateStack[TState]:
        """Build a stack from bottom-first states; the last one is active."""
        collected = list(states)
        if not collected:
            raise ValueError("state stack requires at least one state")
        stack = cls(collected[0])
        stack._states = collected
        return stack

    def active(self) -> TState:
        """Return topmost state."""
        return self._require_states()[-1]

    def set_active(self, state: TState) -> TState:
        """Replace topmost state in place and return the previous one."""
        states = self._require_states()
        previous = states[-1]
        states[-1] = state
        return previous

    def split_last(self) -> tuple[TState, tuple[TState, ...]]:
        """Return active state and a bottom-first snapshot of the rest."""
        states = self._require_states()
        return states[-1], tuple(states[:-1])

    def split_last_mut(self) -> tuple[TState, RuntimeStateSlots[TState]]:
        """Return active state and a writable view of the rest."""
        states = self._require_states()
        return states[-1], RuntimeStateSlots(states, exclude_active=True)

    def apply(self, transition: Transition[TState]) -> TransitionOutcome[TState]:
        """Apply one transition; on error the stack is left unchanged."""
        states = self._require_states()
        try:
            outcome = apply_transition(transition, states)
        except PoppedTooMany as exc:
            _LOG.debug(
                "state_stack_transition_rejected popcnt=%d available=%d",
                exc.popcnt,
                exc.available,
                extra={"depth": len(states)},
            )
            raise
        if get_config().trace_transitions:
            _LOG.debug(
                "state_stack_transition_applied depth=%d",
                len(states),
                extra=describe_outcome(outcome),
            )
        return outcome

    def get_stack(self) -> tuple[TState, ...]:
        """Return bottom-first snapshot."""
        return tuple(self._require_states())

    def get_stack_mut(self) -> RuntimeStateSlots[TState]:
        """Return writable bottom-first view."""
        return RuntimeStateSlots(self._require_states())

    def raw_states(self) -> list[TState]:
        """Return the underlying list itself.

        The caller must leave at least one state in it. An emptied list is not
        repaired; the next call that needs a state raises
        :class:`EmptyStateStackError`.
        """
        return self._states

    def iter(self) -> Iterator[TState]:
        """Iterate from topmost to bottommost."""
        return reversed(self._require_states())

    def iter_mut(self) -> Iterator[RuntimeStateSlot[TState]]:
        """Iterate writable slots from topmost to bottommost."""
        states = self._require_states()
        return (RuntimeStateSlot(states, index) for index in range(len(states) - 1, -1, -1))

    def consume(self) -> list[TState]:
        """Hand the bottom-first list back; the stack is unusable afterwards."""
        states = self._require_states()
        self._states = []
        return states

    def __iter__(self) -> Iterator[TState]:
        return self.iter()

    def __len__(self) -> int:
        return len(self._require_states())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuntimeStateStack):
            return NotImplemented
        return self._states == other._states

    def __repr__(self) -> str:
        return f"RuntimeStateStack({self._states!r})"

    def _require_states(self) -> list[TState]:
        if not self._states:
            raise EmptyStateStackError(
                "state stack is empty; its raw list was drained or it was consumed"
            )
        return self._states


StateStack = RuntimeStateStack
