"""Holder for the free-text event description."""

from __future__ import annotations

from dataclasses import dataclass

from event_thumbnail.prompting import EXAMPLE_DESCRIPTIONS


@dataclass(slots=True)
class EventDescriptionInput:
    """Stores the description exactly as the user typed it."""

    _text: str = ""

    def set(self, text: str) -> None:
        """Replace the current description."""
        self._text = text

    def get(self) -> str:
        """Return the current description."""
        return self._text

    def is_actionable(self) -> bool:
        """Return True when the description has non-whitespace content."""
        return bool(self._text.strip())

    def use_example(self, index: int) -> str:
        """Load a built-in example by zero-based index and return it."""
        if index < 0 or index >= len(EXAMPLE_DESCRIPTIONS):
            raise IndexError(
                f"Unknown example {index + 1}. Choose 1 to {len(EXAMPLE_DESCRIPTIONS)}."
            )
        self._text = EXAMPLE_DESCRIPTIONS[index]
        return self._text
