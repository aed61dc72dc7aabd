"""Public state-stack error types."""

from __future__ import annotations


class TransitionError(ValueError):
    """Base class for transitions rejected without touching the stack."""


class PoppedTooMany(TransitionError):
    """A transition asked to pop more states than the stack can give up.

    ``available`` is the stack length when the transition also pushes states,
    otherwise the length minus one.
    """

    def __init__(self, popcnt: int, available: int) -> None:
        super().__init__(popcnt, available)
        self.popcnt = popcnt
        self.available = available

    def __str__(self) -> str:
        return f"tried to pop {self.popcnt} states, but could only pop {self.available}"

    def __repr__(self) -> str:
        return f"PoppedTooMany(popcnt={self.popcnt}, available={self.available})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PoppedTooMany):
            return NotImplemented
        return (self.popcnt, self.available) == (other.popcnt, other.available)

    def __hash__(self) -> int:
        return hash((PoppedTooMany, self.popcnt, self.available))


class EmptyStateStackError(RuntimeError):
    """A state stack was observed empty.

    Only reachable by draining the raw list or by using a consumed stack.
    """


__all__ = ["EmptyStateStackError", "PoppedTooMany", "TransitionError"]
