"""Base interfaces for components and outputs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Initializable(ABC):
    """Something that must be initialised before use."""

    @abstractmethod
    def init(self) -> None:
        """Initialise the component."""


class Output(Initializable):
    """An output that accepts a state value, e.g. an actuator intensity."""

    @abstractmethod
    def write_state(self, value: Any) -> None:
        """Write a new state to the output."""


def init_not_null(component: Any) -> None:
    """Initialise ``component`` unless it is ``None``."""
    if component is not None:
        component.init()


def tick_not_null(component: Any) -> None:
    """Tick ``component`` unless it is ``None``."""
    if component is not None:
        component.tick()