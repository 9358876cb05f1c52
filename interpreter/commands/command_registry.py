"""Registry for mapping command types to handler functions."""

from ..handlers.base import Handler
from ..handlers.occupancy import LotCommandHandler
from ..handlers.query import QueryCommandHandler
from .command_parser import CommandType


class CommandRegistry:
    """Registry for mapping command identifiers to handler functions."""

    def __init__(self) -> None:
        """Initialize the registry with all command handlers."""
        self._handlers: dict[str, Handler] = {}
        self._register_all()

    def _register_all(self) -> None:
        """Register all command handlers."""
        # Lot commands
        self.register(CommandType.CREATE_PARKING_LOT, LotCommandHandler.handle_create)
        self.register(CommandType.PARK, LotCommandHandler.handle_park)
        self.register(CommandType.LEAVE, LotCommandHandler.handle_leave)
        self.register(CommandType.STATUS, LotCommandHandler.handle_status)

        # Lookups
        self.register(
            CommandType.REGISTRATIONS_FOR_COLOUR,
            QueryCommandHandler.handle_registrations_for_colour,
        )
        self.register(CommandType.SLOTS_FOR_COLOUR, QueryCommandHandler.handle_slots_for_colour)
        self.register(
            CommandType.SLOT_FOR_REGISTRATION,
            QueryCommandHandler.handle_slot_for_registration,
        )

    def register(self, command: CommandType | str, handler: Handler) -> None:
        """Register a handler for a command.

        Args:
            command: Command identifier (`CommandType` or keyword string)
            handler: Handler function that takes (params, context) and returns lines
        """
        key = command.value if isinstance(command, CommandType) else command
        self._handlers[key] = handler

    def get_handler(self, command: CommandType | str) -> Handler | None:
        """Get handler for a command, or None if not found."""
        key = command.value if isinstance(command, CommandType) else command
        return self._handlers.get(key)

    def has_handler(self, command: CommandType | str) -> bool:
        key = command.value if isinstance(command, CommandType) else command
        return key in self._handlers


def create_default_registry() -> CommandRegistry:
    """Create and return a default command registry with all handlers registered.

    Returns:
        CommandRegistry instance with all default handlers registered
    """
    return CommandRegistry()
