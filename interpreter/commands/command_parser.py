"""Command parser for turning raw text lines into typed command requests."""

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from lot.errors import ParkingError

# ASCII whitespace separates tokens; other Unicode spaces stay inside tokens.
_TOKEN_RE = re.compile(r"[^ \t\n\x0c\r]+")
_NUMBER_RE = re.compile(r"\+?[0-9]+")

# Largest count or slot number a command may carry (unsigned 64-bit).
MAX_NUMBER = 2**64 - 1


class CommandParseError(ParkingError):
    """Command text does not match the grammar, or a number is malformed.

    ``command`` always holds the original line verbatim.
    """

    def __init__(self, message: str, *, command: str = "") -> None:
        self.command = command
        super().__init__(message)


class CommandType(str, Enum):
    """Command keywords accepted on the input line."""

    CREATE_PARKING_LOT = "create_parking_lot"
    PARK = "park"
    LEAVE = "leave"
    STATUS = "status"
    REGISTRATIONS_FOR_COLOUR = "registration_numbers_for_cars_with_colour"
    SLOTS_FOR_COLOUR = "slot_numbers_for_cars_with_colour"
    SLOT_FOR_REGISTRATION = "slot_number_for_registration_number"


# Positional parameter names per command, in token order.
COMMAND_PARAMS: dict[CommandType, tuple[str, ...]] = {
    CommandType.CREATE_PARKING_LOT: ("capacity",),
    CommandType.PARK: ("registration", "colour"),
    CommandType.LEAVE: ("slot_number",),
    CommandType.STATUS: (),
    CommandType.REGISTRATIONS_FOR_COLOUR: ("colour",),
    CommandType.SLOTS_FOR_COLOUR: ("colour",),
    CommandType.SLOT_FOR_REGISTRATION: ("registration",),
}

NUMERIC_PARAMS = frozenset({"capacity", "slot_number"})


class CommandRequest(BaseModel):
    """Parsed command with typed parameters and the line it came from."""

    command: CommandType
    params: dict[str, Any] = Field(default_factory=dict)
    raw: str = ""


class CommandParser:
    """Parser for the line-oriented parking lot command language."""

    def parse(self, line: str) -> CommandRequest:
        """Parse one command line.

        Args:
            line: Raw command text, echoed verbatim in parse errors

        Returns:
            Validated CommandRequest

        Raises:
            CommandParseError: If the keyword is unknown, the argument count is
                wrong, or a numeric argument is not a non-negative integer
        """
        tokens = _TOKEN_RE.findall(line)
        if not tokens:
            raise CommandParseError(f"Can't parse command: {line}", command=line)

        keyword, args = tokens[0], tokens[1:]
        try:
            command = CommandType(keyword)
        except ValueError:
            raise CommandParseError(f"Can't parse command: {line}", command=line) from None

        names = COMMAND_PARAMS[command]
        if len(args) != len(names):
            raise CommandParseError(f"Can't parse command: {line}", command=line)

        params: dict[str, Any] = {}
        for name, token in zip(names, args):
            params[name] = _parse_number(token, line) if name in NUMERIC_PARAMS else token

        return CommandRequest(command=command, params=params, raw=line)


def _parse_number(token: str, line: str) -> int:
    """Parse a non-negative decimal integer argument, optionally signed with '+'."""
    significant = token.lstrip("+").lstrip("0")
    # Bound the digit count before int() so huge tokens never get converted
    if (
        not _NUMBER_RE.fullmatch(token)
        or len(significant) > len(str(MAX_NUMBER))
        or int(token) > MAX_NUMBER
    ):
        raise CommandParseError(
            f"Can't parse number '{token}' in command: {line}", command=line
        )
    return int(token)
