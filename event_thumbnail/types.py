"""Domain types shared across the thumbnail generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(slots=True, frozen=True)
class GenerationRequest:
    """One outbound image-generation call, built from a description snapshot."""

    description: str
    prompt: str
    model: str
    aspect_ratio: str


@dataclass(slots=True, frozen=True)
class Loading:
    """A generation request has been dispatched and has not settled."""


@dataclass(slots=True, frozen=True)
class Success:
    """The service returned an image, encoded as a data URI."""

    image_data_uri: str


@dataclass(slots=True, frozen=True)
class Failure:
    """The generation settled without an image."""

    message: str


GenerationResult = Union[Loading, Success, Failure]


@dataclass(slots=True, frozen=True)
class ControllerState:
    """Snapshot of the controller's two state slots.

    ``result`` is ``None`` until the first generation is attempted.
    """

    in_flight: bool = False
    result: GenerationResult | None = None

    @property
    def is_settled(self) -> bool:
        """Return True when the last attempt finished with an image or an error."""
        return not self.in_flight and isinstance(self.result, (Success, Failure))
