"""Never-empty state stacks and the transitions that change them."""

from statestack.api import (
    EmptyStateStackError,
    Noop,
    Pop,
    PopNAndPush,
    PoppedTooMany,
    Push,
    Pushed,
    Revealed,
    StateStackPort,
    Swap,
    SwappedIn,
    Transition,
    TransitionError,
    TransitionOutcome,
    Unchanged,
    create_state_stack,
    create_state_stack_many,
)
from statestack.runtime.state_stack import StateStack

__all__ = [
    "EmptyStateStackError",
    "Noop",
    "Pop",
    "PopNAndPush",
    "PoppedTooMany",
    "Push",
    "Pushed",
    "Revealed",
    "StateStack",
    "StateStackPort",
    "Swap",
    "SwappedIn",
    "Transition",
    "TransitionError",
    "TransitionOutcome",
    "Unchanged",
    "create_state_stack",
    "create_state_stack_many",
]
