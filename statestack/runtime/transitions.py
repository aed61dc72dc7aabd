"""Transition application over a bottom-first list of states."""

from __future__ import annotations

from statestack.api.errors import EmptyStateStackError, PoppedTooMany
from statestack.api.transitions import (
    Noop,
    Pop,
    PopNAndPush,
    Push,
    Pushed,
    Revealed,
    Swap,
    SwappedIn,
    Transition,
    TransitionOutcome,
    Unchanged,
)


def apply_transition[TState](
    transition: Transition[TState],
    states: list[TState],
) -> TransitionOutcome[TState]:
    """Apply ``transition`` to ``states`` in place.

    Every variant is reduced to a pop count and a batch of states to push.
    When the pop count is not allowed, :class:`PoppedTooMany` is raised and
    ``states`` is left exactly as it was.
    """
    to_push: tuple[TState, ...]
    match transition:
        case Noop():
            return Unchanged()
        case Push(state=state):
            pop_count, to_push = 0, (state,)
        case Pop():
            pop_count, to_push = 1, ()
        case Swap(state=state):
            pop_count, to_push = 1, (state,)
        case PopNAndPush(count=count, states=pushed):
            pop_count, to_push = count, pushed
        case _:
            raise TypeError(f"unsupported transition: {transition!r}")

    if not states:
        raise EmptyStateStackError("cannot apply a transition to an empty state stack")

    # One state must survive unless replacements arrive in the same step.
    allowed = len(states) if to_push else len(states) - 1
    if pop_count > allowed:
        raise PoppedTooMany(popcnt=pop_count, available=allowed)

    boundary = len(states) - pop_count
    removed = tuple(states[boundary:])
    del states[boundary:]

    if not to_push:
        return Revealed(removed)
    states.extend(to_push)
    if not removed:
        return Pushed()
    return SwappedIn(removed, len(to_push) - 1)


def describe_outcome(outcome: TransitionOutcome[object]) -> dict[str, object]:
    """Return a compact, JSON-friendly summary of an outcome."""
    match outcome:
        case Unchanged():
            return {"outcome": "unchanged"}
        case Pushed():
            return {"outcome": "pushed"}
        case Revealed(removed=removed):
            return {"outcome": "revealed", "removed": len(removed)}
        case SwappedIn(removed=removed, pushed_above=pushed_above):
            return {"outcome": "swapped_in", "removed": len(removed), "pushed_above": pushed_above}
    raise TypeError(f"unsupported outcome: {outcome!r}")


__all__ = ["apply_transition", "describe_outcome"]
