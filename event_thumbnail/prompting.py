"""Prompt-building helpers."""

from __future__ import annotations

from event_thumbnail.types import GenerationRequest

EXAMPLE_DESCRIPTIONS: tuple[str, ...] = (
    "A weekend trip to Paris",
    "Beers in the local pub",
    "A sunny day at the beach",
    "A round of golf at sunset",
)


def build_thumbnail_prompt(description: str) -> str:
    """Wrap a raw event description in the thumbnail instructions."""
    return (
        "A high-quality, aesthetic, and inviting thumbnail image for an event "
        f"booking app. The event is: {description}. The image should be vibrant, "
        "professional, and suitable for a modern app interface. No text in the image."
    )


def build_generation_request(
    description: str,
    *,
    model: str,
    aspect_ratio: str,
) -> GenerationRequest:
    """Build the immutable request for one generation attempt."""
    return GenerationRequest(
        description=description,
        prompt=build_thumbnail_prompt(description),
        model=model,
        aspect_ratio=aspect_ratio,
    )
