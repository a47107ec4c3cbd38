"""Generation lifecycle: request building, reply interpretation, state transitions."""

from __future__ import annotations

import asyncio
import base64
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from event_thumbnail.config import DEFAULT_ASPECT_RATIO, DEFAULT_IMAGE_MODEL
from event_thumbnail.input_capture import EventDescriptionInput
from event_thumbnail.interfaces import ImageGenerator, StateObserver
from event_thumbnail.prompting import build_generation_request
from event_thumbnail.types import (
    ControllerState,
    Failure,
    GenerationRequest,
    GenerationResult,
    Loading,
    Success,
)

LOGGER = logging.getLogger(__name__)

NO_IMAGE_MESSAGE = "No image was returned by the model."
GENERIC_FAILURE_MESSAGE = "Failed to generate thumbnail. Please try again."
CANCELLED_MESSAGE = "Thumbnail generation was cancelled."
DEFAULT_IMAGE_MIME_TYPE = "image/png"


def _read_field(source: Any, name: str, alias: str | None = None) -> Any:
    """Read a field from an SDK object or a plain mapping, trying an optional camelCase alias."""
    names: tuple[str, ...] = (name, alias) if alias else (name,)
    for key in names:
        if isinstance(source, Mapping):
            value: Any = source.get(key)
        else:
            value = getattr(source, key, None)
        if value is not None:
            return value
    return None


def first_candidate_parts(response: Any) -> list[Any]:
    """Return the ordered parts of the first candidate, or an empty list."""
    candidates: Any = _read_field(response, "candidates")
    if not candidates:
        return []
    content: Any = _read_field(candidates[0], "content")
    if content is None:
        return []
    return list(_read_field(content, "parts") or [])


def find_inline_image(parts: Iterable[Any]) -> Any | None:
    """Return the inline data of the first part that carries any, in response order."""
    for part in parts:
        inline_data: Any = _read_field(part, "inline_data", "inlineData")
        if inline_data is not None:
            return inline_data
    return None


def encode_data_uri(inline_data: Any) -> str:
    """Encode an inline-data blob as ``data:<mime>;base64,<payload>``."""
    data: Any = _read_field(inline_data, "data")
    mime_type: str = _read_field(inline_data, "mime_type", "mimeType") or DEFAULT_IMAGE_MIME_TYPE
    if isinstance(data, (bytes, bytearray)):
        payload: str = base64.b64encode(bytes(data)).decode("ascii")
    elif isinstance(data, str):
        # Plain JSON replies carry the payload already base64-encoded.
        payload = data
    else:
        raise ValueError("Inline image part did not contain any data.")
    return f"data:{mime_type};base64,{payload}"


def interpret_response(response: Any) -> GenerationResult:
    """Map a service reply onto Success or the empty-result Failure."""
    inline_data: Any | None = find_inline_image(first_candidate_parts(response))
    if inline_data is None:
        return Failure(NO_IMAGE_MESSAGE)
    return Success(encode_data_uri(inline_data))


@dataclass(slots=True)
class ThumbnailGenerationController:
    """Owns the single in-flight generation and the result it settles on.

    ``generate`` is a no-op while a previous call is still awaiting the
    service or while the description is blank. The guard is held here so it
    applies to every caller, not only to a rendered trigger.
    """

    description_input: EventDescriptionInput
    image_generator: ImageGenerator
    model: str = DEFAULT_IMAGE_MODEL
    aspect_ratio: str = DEFAULT_ASPECT_RATIO
    logger: logging.Logger = LOGGER
    _in_flight: bool = field(default=False, init=False)
    _result: GenerationResult | None = field(default=None, init=False)
    _observers: list[StateObserver] = field(default_factory=list, init=False, repr=False)

    @property
    def in_flight(self) -> bool:
        """Return True while a request is awaiting the service."""
        return self._in_flight

    @property
    def result(self) -> GenerationResult | None:
        """Return the current result, or None before the first attempt."""
        return self._result

    @property
    def state(self) -> ControllerState:
        """Return an immutable snapshot of both state slots."""
        return ControllerState(in_flight=self._in_flight, result=self._result)

    def subscribe(self, observer: StateObserver) -> Callable[[], None]:
        """Register an observer for state transitions and return its unsubscribe hook."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    async def generate(self) -> bool:
        """Run one generation cycle; return False when the trigger was ignored."""
        if self._in_flight:
            self.logger.debug("Thumbnail generation already in flight; trigger dropped.")
            return False
        if not self.description_input.is_actionable():
            self.logger.debug("Event description is empty; trigger ignored.")
            return False

        self._transition(in_flight=True, result=Loading())
        outcome: GenerationResult = Failure(GENERIC_FAILURE_MESSAGE)
        try:
            request: GenerationRequest = build_generation_request(
                self.description_input.get(),
                model=self.model,
                aspect_ratio=self.aspect_ratio,
            )
            self.logger.info(
                "Requesting thumbnail from %s (aspect ratio %s).",
                request.model,
                request.aspect_ratio,
            )
            response: Any = await self.image_generator.generate(request)
            outcome = interpret_response(response)
        except asyncio.CancelledError:
            outcome = Failure(CANCELLED_MESSAGE)
            raise
        except Exception as error:
            self.logger.error("Error generating thumbnail: %s", error, exc_info=True)
            outcome = Failure(str(error) or GENERIC_FAILURE_MESSAGE)
        finally:
            self._transition(in_flight=False, result=outcome)

        if isinstance(outcome, Success):
            self.logger.info("Thumbnail generated.")
        else:
            self.logger.info("Thumbnail generation failed: %s", outcome.message)
        return True

    def _transition(self, *, in_flight: bool, result: GenerationResult) -> None:
        """Replace both state slots together, then notify observers."""
        self._in_flight = in_flight
        self._result = result
        state: ControllerState = self.state
        for observer in list(self._observers):
            self._safe_notify(observer, state)

    def _safe_notify(self, observer: StateObserver, state: ControllerState) -> None:
        """Deliver a state change while swallowing observer errors."""
        try:
            observer(state)
        except Exception as error:
            self.logger.warning("State observer failed: %s", error)
