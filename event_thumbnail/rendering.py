"""Plain-text booking card preview."""

from __future__ import annotations

import base64
import binascii

from event_thumbnail.projector import (
    ImageAbsentView,
    ImageView,
    LoadingView,
    PreviewView,
)

CARD_WIDTH = 56
PLACEHOLDER_TITLE = "Event Title"


def describe_data_uri(uri: str) -> tuple[str, int]:
    """Return the mime type and decoded byte size of a base64 data URI."""
    if not uri.startswith("data:") or ";base64," not in uri:
        raise ValueError("Not a base64 data URI.")
    header, payload = uri[len("data:") :].split(";base64,", maxsplit=1)
    try:
        size: int = len(base64.b64decode(payload, validate=True))
    except (binascii.Error, ValueError) as error:
        raise ValueError("Data URI payload is not valid base64.") from error
    return header, size


def _preview_line(view: PreviewView) -> str:
    """Describe the image area of the card."""
    if isinstance(view, LoadingView):
        return "Crafting your image..."
    if isinstance(view, ImageView):
        try:
            mime_type, size = describe_data_uri(view.image_data_uri)
        except ValueError:
            return "Thumbnail ready"
        return f"Thumbnail ready ({mime_type}, {size} bytes)"
    return "Your thumbnail will appear here"


def _boxed(lines: list[str]) -> list[str]:
    """Frame lines in a fixed-width ASCII box, truncating long text."""
    inner: int = CARD_WIDTH - 4
    border: str = "+" + "-" * (CARD_WIDTH - 2) + "+"
    body: list[str] = []
    for line in lines:
        text: str = line if len(line) <= inner else line[: inner - 3] + "..."
        body.append(f"| {text.ljust(inner)} |")
    return [border, *body, border]


def render_booking_card(view: PreviewView, description: str, *, show_uri: bool = False) -> str:
    """Render the mocked booking card for a preview view."""
    title: str = description.strip() or PLACEHOLDER_TITLE
    badge: str = "NEW"
    title_width: int = CARD_WIDTH - 4 - len(badge) - 1
    if len(title) > title_width:
        title = title[: title_width - 3] + "..."

    preview: list[str] = _boxed(["", _preview_line(view).center(CARD_WIDTH - 4), ""])
    details: list[str] = _boxed(
        [
            f"{title.ljust(title_width)} {badge}",
            "Location TBD",
            "",
            "Select Date  |  Invite Friends",
        ]
    )
    lines: list[str] = [*preview, *details[1:]]

    if isinstance(view, ImageAbsentView):
        lines.append(f"Error: {view.error_message}")
    if show_uri and isinstance(view, ImageView):
        lines.append(view.image_data_uri)
    return "\n".join(lines)
