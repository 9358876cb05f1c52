"""Command processor for executing command lines against a parking lot."""

import logging

from lot.errors import ParkingError
from lot.parking_lot import ParkingLot

from ..dto.command_result import CommandResult
from ..handlers.base import HandlerContext
from .command_parser import CommandParser
from .command_registry import CommandRegistry, create_default_registry


class CommandProcessor:
    """Parses, dispatches and executes one command line at a time."""

    def __init__(
        self,
        lot: ParkingLot,
        registry: CommandRegistry | None = None,
        parser: CommandParser | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the command processor.

        Args:
            lot: Parking lot the commands operate on
            registry: Command registry mapping commands to handlers
            parser: Parser for raw command lines
            logger: Logger instance
        """
        self.lot = lot
        self.registry = registry or create_default_registry()
        self.parser = parser or CommandParser()
        self.logger = logger or logging.getLogger(__name__)

    def execute(self, line: str) -> CommandResult:
        """Execute a single command line.

        Rejected commands come back as a failed CommandResult; they never
        end the session.

        Args:
            line: Raw command text

        Returns:
            CommandResult carrying either the result lines or the error message

        Raises:
            RuntimeError: If a handler fails with an unexpected exception
        """
        self.logger.debug(f"Processing command: {line!r}")

        try:
            request = self.parser.parse(line)

            handler = self.registry.get_handler(request.command)
            if handler is None:
                raise ValueError(f"Unknown command: {request.command.value}")

            context = HandlerContext(lot=self.lot, logger=self.logger)
            lines = handler(request.params, context)
        except ParkingError as e:
            # Rejected commands are expected - log and report
            self.logger.warning(f"Command rejected {line!r}: {e}")
            return CommandResult.failure(line, str(e))
        except ValueError as e:
            self.logger.warning(f"Validation error processing command {line!r}: {e}")
            return CommandResult.failure(line, str(e))
        except Exception as e:
            # Unexpected errors - log with full traceback
            self.logger.error(f"Error processing command {line!r}: {e}", exc_info=True)
            raise RuntimeError(f"Failed to process command {line!r}: {e}") from e

        return CommandResult.success(line, lines)
