"""Shared types for command handlers."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lot.parking_lot import ParkingLot


@dataclass
class HandlerContext:
    """Context passed to command handlers containing required dependencies."""

    lot: ParkingLot
    logger: logging.Logger


# Handlers take (params, context) and return the result lines in output order.
Handler = Callable[[dict[str, Any], HandlerContext], list[str]]


def require_param(params: dict[str, Any], name: str, command: str, kind: type) -> Any:
    """Return a required parameter after checking its type.

    Raises:
        ValueError: If the parameter is missing or has the wrong type
    """
    if name not in params:
        raise ValueError(f"{name} is required for {command} command")
    value = params[name]
    # bool is an int subclass but never a valid slot count or number
    if not isinstance(value, kind) or isinstance(value, bool):
        raise ValueError(f"{name} must be {'an integer' if kind is int else 'a string'}")
    return value
