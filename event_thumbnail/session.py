"""Interactive session wiring input, controller, and card rendering."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from event_thumbnail.controller import ThumbnailGenerationController
from event_thumbnail.input_capture import EventDescriptionInput
from event_thumbnail.projector import is_trigger_enabled, project_preview, trigger_label
from event_thumbnail.prompting import EXAMPLE_DESCRIPTIONS
from event_thumbnail.rendering import render_booking_card
from event_thumbnail.types import ControllerState, GenerationResult

LOGGER = logging.getLogger(__name__)

HELP_TEXT = (
    "Describe your event to generate a thumbnail.\n"
    "Commands: /example N, /examples, /show, /quit"
)


def format_examples() -> str:
    """Render the built-in example descriptions as a numbered list."""
    return "\n".join(
        f"{index}. {example}" for index, example in enumerate(EXAMPLE_DESCRIPTIONS, start=1)
    )


@dataclass(slots=True)
class ThumbnailSession:
    """Runs the single-user preview loop on one event loop."""

    description_input: EventDescriptionInput
    controller: ThumbnailGenerationController
    show_uri: bool = False
    output: Callable[[str], None] = print
    read_line: Callable[[str], str] = input
    logger: logging.Logger = LOGGER
    _pending: set[asyncio.Task[bool]] = field(default_factory=set, init=False, repr=False)

    def __post_init__(self) -> None:
        """Re-render the card on every controller transition."""
        self.controller.subscribe(self._on_state)

    def render(self, state: ControllerState | None = None) -> str:
        """Render the booking card for the given or current controller state."""
        current: ControllerState = state if state is not None else self.controller.state
        return render_booking_card(
            project_preview(current),
            self.description_input.get(),
            show_uri=self.show_uri,
        )

    def trigger(self) -> bool:
        """Start a generation in the background when the trigger is enabled."""
        state: ControllerState = self.controller.state
        if not is_trigger_enabled(state, self.description_input.is_actionable()):
            if state.in_flight:
                self.output("A thumbnail is already being generated; please wait.")
            else:
                self.output("Enter an event description first.")
            return False

        task: asyncio.Task[bool] = asyncio.create_task(self.controller.generate())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return True

    def handle_line(self, line: str) -> bool:
        """Apply one line of user input; return False when the session should end."""
        command: str = line.strip()
        if command in {"/quit", "/exit"}:
            return False
        if command == "/examples":
            self.output(format_examples())
        elif command.startswith("/example"):
            self._load_example(command[len("/example") :].strip())
        elif command == "/show":
            self.output(self.render())
        elif command in {"/help", "/?"}:
            self.output(HELP_TEXT)
        elif command.startswith("/"):
            self.output(f"Unknown command: {command}\n{HELP_TEXT}")
        else:
            self.description_input.set(line)
            self.trigger()
        return True

    def _load_example(self, argument: str) -> None:
        """Load a 1-based example and trigger generation."""
        try:
            self.description_input.use_example(int(argument) - 1)
        except ValueError:
            self.output(f"Usage: /example N (1 to {len(EXAMPLE_DESCRIPTIONS)})")
            return
        except IndexError as error:
            self.output(str(error))
            return
        self.trigger()

    async def run(self) -> None:
        """Read lines until /quit or end of input, then wait for any in-flight request."""
        self.output(HELP_TEXT)
        self.output(self.render())
        while True:
            prompt: str = f"[{trigger_label(self.controller.state)}] > "
            try:
                line: str = await asyncio.to_thread(self.read_line, prompt)
            except EOFError:
                break
            if not self.handle_line(line):
                break
        await self.wait_idle()
        self.logger.info("Session ended.")

    async def run_once(self) -> GenerationResult | None:
        """Generate once for the current description and return the settled result."""
        await self.controller.generate()
        return self.controller.result

    async def wait_idle(self) -> None:
        """Wait until every generation started by this session has settled."""
        if self._pending:
            await asyncio.gather(*self._pending)

    def _on_state(self, state: ControllerState) -> None:
        """Print the refreshed card."""
        self.output(self.render(state))
