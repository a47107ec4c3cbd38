"""Protocol interfaces for thumbnail client components."""

from __future__ import annotations

from typing import Any, Protocol

from event_thumbnail.types import ControllerState, GenerationRequest


class ImageGenerator(Protocol):
    """Sends one generation request to the external image service."""

    async def generate(self, request: GenerationRequest) -> Any:
        """Return the raw service response with ``candidates[*].content.parts``."""


class StateObserver(Protocol):
    """Receives every controller state transition."""

    def __call__(self, state: ControllerState) -> None:
        """Handle the new controller state."""
