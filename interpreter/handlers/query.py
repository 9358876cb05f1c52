"""Handler for read-only occupancy lookups."""

from typing import Any

from lot.queries import SlotQuery

from .base import HandlerContext, require_param


class QueryCommandHandler:
    """Handler for lookups by colour or registration."""

    @staticmethod
    def handle_registrations_for_colour(
        params: dict[str, Any], context: HandlerContext
    ) -> list[str]:
        """Registrations of every vehicle with the given colour."""
        colour = require_param(params, "colour", "registration_numbers_for_cars_with_colour", str)
        return context.lot.query(SlotQuery.registrations_with_colour(colour))

    @staticmethod
    def handle_slots_for_colour(params: dict[str, Any], context: HandlerContext) -> list[str]:
        """Slot numbers of every vehicle with the given colour."""
        colour = require_param(params, "colour", "slot_numbers_for_cars_with_colour", str)
        return context.lot.query(SlotQuery.slots_with_colour(colour))

    @staticmethod
    def handle_slot_for_registration(
        params: dict[str, Any], context: HandlerContext
    ) -> list[str]:
        """Slot numbers holding the given registration."""
        registration = require_param(
            params, "registration", "slot_number_for_registration_number", str
        )
        return context.lot.query(SlotQuery.slots_with_registration(registration))
