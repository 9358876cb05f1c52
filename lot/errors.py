"""Error hierarchy for parking lot operations."""


class ParkingError(ValueError):
    """Base exception for every rejected parking command."""


class AlreadyAllocatedError(ParkingError):
    """The lot has already been allocated."""

    def __init__(self) -> None:
        super().__init__("Parking slots already allocated")


class InvalidCapacityError(ParkingError):
    """Allocation was requested with a non-positive capacity."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__("Parking lot size must be greater than 0")


class NotAllocatedError(ParkingError):
    """A slot operation was issued before the lot was allocated."""

    def __init__(self) -> None:
        super().__init__("Parking slots are not allocated")


class LotFullError(ParkingError):
    """No empty slot is left for an arriving vehicle."""

    def __init__(self) -> None:
        super().__init__("Sorry, parking lot is full")


class InvalidSlotNumberError(ParkingError):
    """Slot number outside ``[1, capacity]``."""

    def __init__(self, slot_number: int, capacity: int) -> None:
        self.slot_number = slot_number
        self.capacity = capacity
        super().__init__(
            "Invalid parking place number, please choose a number in interval "
            f"[1, {capacity}]"
        )


class NotFoundError(ParkingError):
    """A lookup matched no occupied slot."""

    def __init__(self) -> None:
        super().__init__("Not found")
