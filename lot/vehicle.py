"""Vehicle occupying a parking slot."""

from dataclasses import dataclass
from typing import Any

from lot.types import Colour, Registration


@dataclass(frozen=True)
class Vehicle:
    """A parked vehicle.

    Registration and colour keep the casing they were parked with; matching
    against them ignores case.
    """

    registration: Registration
    colour: Colour

    def matches_registration(self, registration: str) -> bool:
        """Return True if the registration matches, ignoring case."""
        return self.registration.lower() == registration.lower()

    def matches_colour(self, colour: str) -> bool:
        """Return True if the colour matches, ignoring case."""
        return self.colour.lower() == colour.lower()

    def to_dict(self) -> dict[str, Any]:
        return {"registration": str(self.registration), "colour": str(self.colour)}
