"""Public transition and outcome contracts for state stacks."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Noop:
    """Leave the stack untouched."""


@dataclass(frozen=True, slots=True)
class Push[TState]:
    """Push one state on top."""

    state: TState


@dataclass(frozen=True, slots=True)
class Pop:
    """Pop the active state."""


@dataclass(frozen=True, slots=True)
class Swap[TState]:
    """Replace the active state."""

    state: TState


@dataclass(frozen=True, slots=True, init=False)
class PopNAndPush[TState]:
    """Pop ``count`` states, then push ``states`` in order.

    Every other transition is a special case of this one. The last element of
    ``states`` becomes the new active state.
    """

    count: int
    states: tuple[TState, ...]

    def __init__(self, count: int, states: Iterable[TState] = ()) -> None:
        count = operator.index(count)
        if count < 0:
            raise ValueError("count must be >= 0")
        object.__setattr__(self, "count", count)
        object.__setattr__(self, "states", tuple(states))


type Transition[TState] = Noop | Push[TState] | Pop | Swap[TState] | PopNAndPush[TState]


@dataclass(frozen=True, slots=True)
class Unchanged:
    """Nothing happened."""


@dataclass(frozen=True, slots=True)
class Pushed:
    """States were pushed and nothing was removed."""


@dataclass(frozen=True, slots=True)
class Revealed[TState]:
    """States were popped, revealing the one below.

    ``removed`` keeps the original stack order, so its last element was the
    previous active state.
    """

    removed: tuple[TState, ...]


@dataclass(frozen=True, slots=True)
class SwappedIn[TState]:
    """States were popped and replacements pushed on top.

    ``pushed_above`` is the number of pushed states sitting above the first
    pushed one, i.e. ``len(pushed) - 1``.
    """

    removed: tuple[TState, ...]
    pushed_above: int


type TransitionOutcome[TState] = Unchanged | Pushed | Revealed[TState] | SwappedIn[TState]


__all__ = [
    "Noop",
    "Pop",
    "PopNAndPush",
    "Push",
    "Pushed",
    "Revealed",
    "Swap",
    "SwappedIn",
    "Transition",
    "TransitionOutcome",
    "Unchanged",
]
