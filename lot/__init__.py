from lot.errors import (
    AlreadyAllocatedError,
    InvalidCapacityError,
    InvalidSlotNumberError,
    LotFullError,
    NotAllocatedError,
    NotFoundError,
    ParkingError,
)
from lot.parking_lot import AllocatedLot, ParkingLot, UnallocatedLot
from lot.queries import SlotQuery
from lot.slot import Slot
from lot.types import QueryKind
from lot.vehicle import Vehicle

__all__ = [
    "AllocatedLot",
    "AlreadyAllocatedError",
    "InvalidCapacityError",
    "InvalidSlotNumberError",
    "LotFullError",
    "NotAllocatedError",
    "NotFoundError",
    "ParkingError",
    "ParkingLot",
    "QueryKind",
    "Slot",
    "SlotQuery",
    "UnallocatedLot",
    "Vehicle",
]
