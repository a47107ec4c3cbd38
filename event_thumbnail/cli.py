"""Command-line interface for the event thumbnail generator."""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence

from dotenv import load_dotenv

from event_thumbnail.config import AppConfig
from event_thumbnail.controller import ThumbnailGenerationController
from event_thumbnail.gemini_client import GeminiImageGenerator
from event_thumbnail.input_capture import EventDescriptionInput
from event_thumbnail.session import ThumbnailSession, format_examples
from event_thumbnail.types import Success


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Describe an event and preview an AI-generated booking thumbnail."
    )
    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument(
        "--describe",
        type=str,
        default=None,
        help="Generate one thumbnail for this description and exit.",
    )
    source_group.add_argument(
        "--example",
        type=int,
        default=None,
        help="Generate one thumbnail for built-in example N and exit.",
    )
    parser.add_argument("--list-examples", action="store_true", help="Print built-in examples and exit.")
    parser.add_argument("--show-uri", action="store_true", help="Print the full image data URI.")
    return parser


def configure_logging(level: str) -> None:
    """Configure process logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def build_session(args: argparse.Namespace) -> tuple[ThumbnailSession, AppConfig]:
    """Construct a fully wired session from environment config + CLI overrides."""
    config: AppConfig = AppConfig.from_env()
    configure_logging(config.log_level)

    description_input = EventDescriptionInput()
    controller = ThumbnailGenerationController(
        description_input=description_input,
        image_generator=GeminiImageGenerator(config.gemini),
        model=config.gemini.model,
        aspect_ratio=config.gemini.aspect_ratio,
        logger=logging.getLogger("event_thumbnail.controller"),
    )
    session = ThumbnailSession(
        description_input=description_input,
        controller=controller,
        show_uri=args.show_uri or config.show_data_uri,
        logger=logging.getLogger("event_thumbnail.session"),
    )
    return session, config


def run(args: argparse.Namespace) -> int:
    """Run the thumbnail command and return exit code."""
    if args.list_examples:
        print(format_examples())
        return 0

    load_dotenv()
    session, _ = build_session(args)

    if args.describe is not None or args.example is not None:
        if args.example is not None:
            session.description_input.use_example(args.example - 1)
        else:
            session.description_input.set(args.describe)
        if not session.description_input.is_actionable():
            raise ValueError("Event description must not be empty.")
        result = asyncio.run(session.run_once())
        return 0 if isinstance(result, Success) else 1

    try:
        asyncio.run(session.run())
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Stopped by user.")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return run(args)
    except (ValueError, IndexError) as error:
        parser.error(str(error))
    return 2
