from __future__ import annotations

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from event_thumbnail.controller import ThumbnailGenerationController
from event_thumbnail.input_capture import EventDescriptionInput
from fakes import GatedImageGenerator


@pytest.fixture()
def description_input() -> EventDescriptionInput:
    return EventDescriptionInput()


@pytest.fixture()
def gated_generator() -> GatedImageGenerator:
    return GatedImageGenerator()


@pytest.fixture()
def controller(
    description_input: EventDescriptionInput, gated_generator: GatedImageGenerator
) -> ThumbnailGenerationController:
    return ThumbnailGenerationController(
        description_input=description_input,
        image_generator=gated_generator,
    )
