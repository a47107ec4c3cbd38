"""Event thumbnail generator package."""

from event_thumbnail.controller import ThumbnailGenerationController
from event_thumbnail.input_capture import EventDescriptionInput
from event_thumbnail.projector import project_preview
from event_thumbnail.types import ControllerState, Failure, GenerationRequest, Loading, Success

__all__ = [
    "ControllerState",
    "EventDescriptionInput",
    "Failure",
    "GenerationRequest",
    "Loading",
    "Success",
    "ThumbnailGenerationController",
    "project_preview",
]
