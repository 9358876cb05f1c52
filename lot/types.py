from enum import Enum
from typing import NewType

# Identifiers
SlotNumber = NewType("SlotNumber", int)
Registration = NewType("Registration", str)
Colour = NewType("Colour", str)

# Sizes
Capacity = NewType("Capacity", int)


class QueryKind(str, Enum):
    """Read-only lookups the lot can answer over its occupied slots."""

    COLOUR_TO_REGISTRATION = "COLOUR_TO_REGISTRATION"
    COLOUR_TO_SLOT = "COLOUR_TO_SLOT"
    REGISTRATION_TO_SLOT = "REGISTRATION_TO_SLOT"
