from __future__ import annotations

import pytest

import statestack
from statestack import Pushed, Push, create_state_stack, create_state_stack_many
from statestack.runtime.state_stack import RuntimeStateStack


def test_create_state_stack_returns_runtime_implementation() -> None:
    stack = create_state_stack("bottom")
    assert isinstance(stack, RuntimeStateStack)
    assert stack.get_stack() == ("bottom",)
    assert stack.apply(Push("top")) == Pushed()
    assert stack.active() == "top"


def test_create_state_stack_many_keeps_bottom_first_order() -> None:
    stack = create_state_stack_many(["a", "b", "c"])
    assert stack.active() == "c"
    assert stack.get_stack() == ("a", "b", "c")


def test_create_state_stack_many_rejects_empty_input() -> None:
    with pytest.raises(ValueError):
        create_state_stack_many([])


def test_top_level_state_stack_name_builds_runtime_stacks() -> None:
    single = statestack.StateStack("bottom")
    many = statestack.StateStack.from_states(["a", "b"])
    assert isinstance(single, RuntimeStateStack)
    assert many.active() == "b"
    assert statestack.StateStack is RuntimeStateStack
    assert statestack.StateStackPort is not statestack.StateStack
