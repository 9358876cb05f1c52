"""Command handlers for the parking lot interpreter."""

from .base import Handler, HandlerContext
from .occupancy import LotCommandHandler
from .query import QueryCommandHandler

__all__ = ["Handler", "HandlerContext", "LotCommandHandler", "QueryCommandHandler"]
