"""Public state-stack API contracts."""

from statestack.api.errors import EmptyStateStackError, PoppedTooMany, TransitionError
from statestack.api.logging import LoggingConfig, configure_logging
from statestack.api.stack import (
    StateSlot,
    StateSlots,
    StateStackPort,
    create_state_stack,
    create_state_stack_many,
)
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

__all__ = [
    "EmptyStateStackError",
    "LoggingConfig",
    "Noop",
    "Pop",
    "PopNAndPush",
    "PoppedTooMany",
    "Push",
    "Pushed",
    "Revealed",
    "StateSlot",
    "StateSlots",
    "StateStackPort",
    "Swap",
    "SwappedIn",
    "Transition",
    "TransitionError",
    "TransitionOutcome",
    "Unchanged",
    "configure_logging",
    "create_state_stack",
    "create_state_stack_many",
]
