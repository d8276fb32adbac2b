"""The interface every game screen implements."""

from __future__ import annotations

from abc import ABC, abstractmethod


class State(ABC):
    """A screen of the game: it reacts to events, advances, and draws itself."""

    @abstractmethod
    def handle_input(self, engine, event) -> None:
        """React to one window event."""

    @abstractmethod
    def update(self, engine, delta_time: float) -> None:
        """Advance one frame; ``delta_time`` is in seconds."""

    @abstractmethod
    def render(self, engine) -> None:
        """Draw the screen onto the engine's window."""