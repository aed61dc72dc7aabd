"""State-stack runtime modules."""

from statestack.runtime.config import StateStackConfig, get_config, load_config, set_config
from statestack.runtime.logging import configure_logging, get_logger, setup_logging
from statestack.runtime.serialization import (
    dumps_stack,
    dumps_stack_text,
    loads_stack,
    stack_from_list,
    stack_to_list,
)
from statestack.runtime.state_stack import (
    RuntimeStateSlot,
    RuntimeStateSlots,
    RuntimeStateStack,
    StateStack,
)
from statestack.runtime.transitions import apply_transition, describe_outcome

__all__ = [
    "RuntimeStateSlot",
    "RuntimeStateSlots",
    "RuntimeStateStack",
    "StateStack",
    "StateStackConfig",
    "apply_transition",
    "configure_logging",
    "describe_outcome",
    "dumps_stack",
    "dumps_stack_text",
    "get_config",
    "get_logger",
    "load_config",
    "loads_stack",
    "set_config",
    "setup_logging",
    "stack_from_list",
    "stack_to_list",
]
