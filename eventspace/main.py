"""Composition root for the event space booking tracker.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Dependency injection
- Interactive CLI loop
"""

import asyncio
import json
import logging
import sys
from typing import Any

from eventspace.adapters.cli.commands import CLICommandHandler
from eventspace.adapters.description.disabled import DisabledDescriptionAdapter
from eventspace.adapters.description.gemini import GeminiDescriptionAdapter
from eventspace.adapters.runtime import SystemClock, UUIDGenerator
from eventspace.config import Settings, load_settings
from eventspace.core.booking_service import BookingService
from eventspace.core.calendar import CalendarEngine
from eventspace.core.ports import ClockPort, DescriptionPort, IdGeneratorPort
from eventspace.core.venue_store import VenueStore
from eventspace.sample_data import sample_venues


async def _run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for venue and booking commands.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    loop = asyncio.get_running_loop()

    while True:
        try:
            # Read command from stdin in a thread to avoid blocking
            command_line = await loop.run_in_executor(
                None,
                input,
                "eventspace> "
            )

            command_line = command_line.strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            if not isinstance(args, dict):
                logger.error("Arguments must be a JSON object. Use 'help' for command syntax.")
                continue

            try:
                result = await _execute_cli_command(cli_handler, command, args)
                _print_result(result)
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                print(json.dumps({
                    "status": "error",
                    "message": str(e)
                }, indent=2))

        except EOFError:
            # Ctrl+D to exit
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            # Ctrl+C
            logger.info("Interrupted by user")
            continue
        except Exception as e:
            logger.error(f"CLI error: {e}", exc_info=True)


def _print_result(result: dict[str, Any]) -> None:
    """Print text payloads verbatim and everything else as JSON."""
    data = result.get("data")
    if result.get("status") == "success" and isinstance(data, str) and "\n" in data:
        print(data)
    else:
        print(json.dumps(result, indent=2, default=str))


async def _execute_cli_command(
    cli_handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Execute a CLI command.

    Args:
        cli_handler: CLICommandHandler instance.
        command: Command name.
        args: Command arguments.

    Returns:
        Command result dictionary.

    Raises:
        ValueError: If command is not recognized or a required
            parameter is missing.
    """
    if command == "list":
        return cli_handler.list_venues(
            filter_text=args.get("filter"),
            output_format=args.get("format", "text"),
        )

    elif command == "show":
        return cli_handler.show_venue(
            venue_id=args.get("venue_id"),
            output_format=args.get("format", "text"),
        )

    elif command == "select":
        if "venue_id" not in args:
            raise ValueError("Missing required parameter: venue_id")
        return cli_handler.select_venue(args["venue_id"])

    elif command == "create":
        return await cli_handler.create_venue(args)

    elif command == "update":
        if "venue_id" not in args:
            raise ValueError("Missing required parameter: venue_id")
        fields = {k: v for k, v in args.items() if k != "venue_id"}
        return await cli_handler.update_venue(args["venue_id"], fields)

    elif command == "delete":
        return cli_handler.delete_venue(venue_id=args.get("venue_id"))

    elif command == "calendar":
        return cli_handler.show_calendar(
            venue_id=args.get("venue_id"),
            output_format=args.get("format", "text"),
        )

    elif command == "next":
        return cli_handler.next_month()

    elif command == "prev":
        return cli_handler.previous_month()

    elif command == "book":
        if "date" not in args:
            raise ValueError("Missing required parameter: date")
        return cli_handler.book(args["date"], venue_id=args.get("venue_id"))

    elif command == "describe":
        return await cli_handler.describe(args.get("keywords", ""))

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  list
    List venues, optionally filtered by name or location.

    Example: list {"filter": "loft"}

  show
    Show details of a venue (default: the selected venue).

    Example: show {"venue_id": "uuid-here", "format": "json"}

  select
    Select a venue.
    Required: venue_id

    Example: select {"venue_id": "uuid-here"}

  create
    Create a venue. Required: name, location.
    Optional: capacity, price_per_day, amenities, description, image_url,
    keywords (generates a description when none is given)

    Example: create {"name": "Rooftop", "location": "Midtown", "amenities": "Wi-Fi, Bar"}

  update
    Edit a venue. Required: venue_id. Other fields as for create.

    Example: update {"venue_id": "uuid-here", "capacity": 40}

  delete
    Delete a venue (default: the selected venue).

    Example: delete {"venue_id": "uuid-here"}

  calendar
    Show the booking calendar for the current view month.

    Example: calendar {"venue_id": "uuid-here"}

  next / prev
    Move the calendar view forward or back by one month.

  book
    Book a whole day for a venue (default: the selected venue).
    Required: date (YYYY-MM-DD)

    Example: book {"date": "2026-12-31"}

  describe
    Suggest a venue description from keywords.

    Example: describe {"keywords": "modern, downtown, great view"}

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_description_adapter(settings: Settings) -> DescriptionPort:
    """Select the description adapter from configuration.

    Raises:
        ValueError: If the selected backend has no API key.
    """
    logger = logging.getLogger(__name__)

    if settings.description_backend == "gemini":
        adapter: DescriptionPort = GeminiDescriptionAdapter(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            api_url=settings.gemini_api_url,
            timeout_seconds=settings.description_timeout_seconds,
        )
        logger.info("Description adapter: Gemini")
    elif settings.description_backend == "openai":
        # Lazy import for optional OpenAI dependency
        from eventspace.adapters.description.openai import OpenAIDescriptionAdapter

        adapter = OpenAIDescriptionAdapter(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            timeout_seconds=settings.description_timeout_seconds,
        )
        logger.info("Description adapter: OpenAI")
    else:
        adapter = DisabledDescriptionAdapter()
        logger.info("Description adapter: disabled")

    return adapter


def build_booking_service(
    settings: Settings,
    clock: ClockPort,
    id_generator: IdGeneratorPort,
    description_generator: DescriptionPort,
) -> BookingService:
    """Wire the venue store and calendar engine into a BookingService."""
    venues = sample_venues(id_generator) if settings.seed_sample_venues else []
    store = VenueStore(id_generator, venues)
    calendar = CalendarEngine(clock)
    return BookingService(
        store=store,
        calendar=calendar,
        id_generator=id_generator,
        description_generator=description_generator,
    )


async def bootstrap() -> None:
    """Load configuration, wire adapters, and start the application.

    This is the composition root: the single place where all components
    are instantiated and wired together.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate adapters with configuration
    4. Initialize core services
    5. Run the interactive CLI

    Raises:
        SystemExit: On fatal configuration or adapter errors.
    """
    # Step 1: Load configuration
    settings = load_settings()

    # Step 2: Configure logging
    configure_logging(
        "DEBUG" if settings.debug else settings.log_level, settings.log_format
    )
    logger = logging.getLogger(__name__)
    logger.info("Loading event space booking tracker...")

    # Step 3: Instantiate adapters
    clock = SystemClock()
    id_generator = UUIDGenerator()
    try:
        description_generator = build_description_adapter(settings)
    except ValueError as e:
        logger.error(f"Cannot initialize description adapter: {e}")
        sys.exit(1)

    # Step 4: Initialize core services
    booking_service = build_booking_service(
        settings, clock, id_generator, description_generator
    )
    logger.info(
        f"Loaded {len(booking_service.list_venues())} venues",
        extra={"seeded": settings.seed_sample_venues},
    )

    cli_handler = CLICommandHandler(
        booking_service,
        description_generator,
        default_capacity=settings.default_capacity,
        default_price_per_day=settings.default_price_per_day,
    )

    # Step 5: Run the interactive CLI
    try:
        await _run_cli_interactive(cli_handler)
    finally:
        if hasattr(description_generator, "close"):
            await description_generator.close()


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        asyncio.run(bootstrap())
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except asyncio.CancelledError:
        logger.info("Graceful shutdown completed")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
