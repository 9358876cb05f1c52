"""Handler for commands that allocate the lot or change its occupancy."""

from typing import Any

from .base import HandlerContext, require_param


class LotCommandHandler:
    """Handler for lot domain commands."""

    @staticmethod
    def handle_create(params: dict[str, Any], context: HandlerContext) -> list[str]:
        """Handle create_parking_lot.

        Args:
            params: Command parameters (required 'capacity')
            context: Handler context

        Raises:
            ValueError: If capacity is missing or not an integer
            ParkingError: If the lot is already allocated or capacity is 0
        """
        capacity = require_param(params, "capacity", "create_parking_lot", int)
        return context.lot.allocate(capacity)

    @staticmethod
    def handle_park(params: dict[str, Any], context: HandlerContext) -> list[str]:
        """Handle park, placing the vehicle in the first free slot."""
        registration = require_param(params, "registration", "park", str)
        colour = require_param(params, "colour", "park", str)
        return context.lot.park(registration, colour)

    @staticmethod
    def handle_leave(params: dict[str, Any], context: HandlerContext) -> list[str]:
        slot_number = require_param(params, "slot_number", "leave", int)
        return context.lot.leave(slot_number)

    @staticmethod
    def handle_status(_params: dict[str, Any], context: HandlerContext) -> list[str]:
        """Handle status.

        Args:
            _params: Command parameters (unused)
            context: Handler context
        """
        lines = context.lot.status()
        context.logger.debug(f"Status reported {len(lines) - 1} occupied slots")
        return lines
