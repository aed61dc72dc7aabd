from __future__ import annotations

from collections.abc import Iterator

import pytest

from statestack.runtime.config import set_config
from statestack.runtime.state_stack import RuntimeStateStack


@pytest.fixture(autouse=True)
def _reset_config() -> Iterator[None]:
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def screens() -> RuntimeStateStack[str]:
    return RuntimeStateStack.from_states(["main_menu", "options", "audio"])
