from __future__ import annotations

import dataclasses

import pytest

from statestack.api.errors import PoppedTooMany, TransitionError
from statestack.api.transitions import (
    Noop,
    Pop,
    PopNAndPush,
    Push,
    Pushed,
    Revealed,
    Swap,
    SwappedIn,
    Unchanged,
)


def test_pop_n_and_push_coerces_states_to_tuple() -> None:
    transition = PopNAndPush(2, ["a", "b"])
    assert transition.count == 2
    assert transition.states == ("a", "b")


def test_pop_n_and_push_accepts_generators_and_defaults_to_empty() -> None:
    assert PopNAndPush(1, (str(i) for i in range(3))).states == ("0", "1", "2")
    assert PopNAndPush(1).states == ()


def test_pop_n_and_push_rejects_negative_count() -> None:
    with pytest.raises(ValueError):
        PopNAndPush(-1, ["a"])


def test_pop_n_and_push_rejects_non_integral_count() -> None:
    with pytest.raises(TypeError):
        PopNAndPush(1.9, ["a"])  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        PopNAndPush("2", ["a"])  # type: ignore[arg-type]


def test_transitions_are_frozen_values() -> None:
    push = Push("battle")
    with pytest.raises(dataclasses.FrozenInstanceError):
        push.state = "menu"  # type: ignore[misc]
    assert Push("battle") == push
    assert Swap("x") != Push("x")
    assert Pop() == Pop()
    assert Noop() == Noop()
    assert PopNAndPush(1, ["a"]) == PopNAndPush(1, ("a",))


def test_outcomes_compare_by_value() -> None:
    assert Unchanged() == Unchanged()
    assert Pushed() == Pushed()
    assert Revealed(("3",)) == Revealed(("3",))
    assert SwappedIn(("2",), 0) == SwappedIn(("2",), 0)
    assert SwappedIn(("2",), 0) != SwappedIn(("2",), 1)
    assert Revealed(()) != Pushed()


def test_popped_too_many_is_a_comparable_value_error() -> None:
    error = PoppedTooMany(popcnt=100, available=2)
    assert isinstance(error, TransitionError)
    assert isinstance(error, ValueError)
    assert error == PoppedTooMany(100, 2)
    assert error != PoppedTooMany(100, 3)
    assert hash(error) == hash(PoppedTooMany(100, 2))
    assert str(error) == "tried to pop 100 states, but could only pop 2"
    assert repr(error) == "PoppedTooMany(popcnt=100, available=2)"
