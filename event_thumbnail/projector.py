"""Pure mapping from controller state to the preview view."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from event_thumbnail.types import ControllerState, Failure, Success

GENERATE_LABEL = "Generate Thumbnail"
GENERATING_LABEL = "Generating..."


@dataclass(slots=True, frozen=True)
class LoadingView:
    """Spinner shown while a request is in flight."""


@dataclass(slots=True, frozen=True)
class ImageView:
    """Generated thumbnail ready to display."""

    image_data_uri: str


@dataclass(slots=True, frozen=True)
class ImageAbsentView:
    """Empty placeholder plus the error from the last attempt."""

    error_message: str


@dataclass(slots=True, frozen=True)
class EmptyPlaceholderView:
    """Nothing has been generated yet."""


PreviewView = Union[LoadingView, ImageView, ImageAbsentView, EmptyPlaceholderView]


def project_preview(state: ControllerState) -> PreviewView:
    """Select the single preview view for a controller state."""
    if state.in_flight:
        return LoadingView()
    result = state.result
    if isinstance(result, Success):
        return ImageView(image_data_uri=result.image_data_uri)
    if isinstance(result, Failure):
        return ImageAbsentView(error_message=result.message)
    if result is None:
        return EmptyPlaceholderView()
    return LoadingView()


def is_trigger_enabled(state: ControllerState, actionable: bool) -> bool:
    """Return True when a generate trigger would start a request."""
    return actionable and not state.in_flight


def trigger_label(state: ControllerState) -> str:
    """Return the caption for the generate trigger."""
    return GENERATING_LABEL if state.in_flight else GENERATE_LABEL
