"""Tests for the ParkingLot state store."""

import pytest

from lot.errors import (
    AlreadyAllocatedError,
    InvalidCapacityError,
    InvalidSlotNumberError,
    LotFullError,
    NotAllocatedError,
    NotFoundError,
)
from lot.parking_lot import STATUS_HEADER, ParkingLot
from lot.queries import SlotQuery


def _lot_with(capacity: int, *vehicles: tuple[str, str]) -> ParkingLot:
    """Create an allocated lot and park the given (registration, colour) pairs."""
    lot = ParkingLot()
    lot.allocate(capacity)
    for registration, colour in vehicles:
        lot.park(registration, colour)
    return lot


class TestAllocation:
    """Tests for lot allocation."""

    def test_allocate_returns_confirmation(self) -> None:
        """Test allocating a lot reports its size."""
        lot = ParkingLot()
        assert lot.allocate(6) == ["Created a parking lot with 6 slots"]
        assert lot.is_allocated is True
        assert lot.capacity == 6

    def test_allocate_single_slot(self) -> None:
        """Test the smallest valid lot."""
        lot = ParkingLot()
        assert lot.allocate(1) == ["Created a parking lot with 1 slots"]

    def test_allocate_twice_raises(self) -> None:
        """Test that a second allocation is rejected."""
        lot = ParkingLot()
        lot.allocate(7)
        with pytest.raises(AlreadyAllocatedError, match="Parking slots already allocated"):
            lot.allocate(6)
        assert lot.capacity == 7

    def test_allocate_twice_with_same_capacity_raises(self) -> None:
        """Test that re-allocation fails even with an identical capacity."""
        lot = ParkingLot()
        lot.allocate(3)
        with pytest.raises(AlreadyAllocatedError):
            lot.allocate(3)

    def test_allocate_zero_raises(self) -> None:
        """Test that zero capacity is rejected."""
        lot = ParkingLot()
        with pytest.raises(InvalidCapacityError, match="must be greater than 0"):
            lot.allocate(0)
        assert lot.is_allocated is False

    def test_allocate_after_failed_allocation(self) -> None:
        """Test that a rejected capacity does not consume the single allocation."""
        lot = ParkingLot()
        with pytest.raises(InvalidCapacityError):
            lot.allocate(0)
        assert lot.allocate(2) == ["Created a parking lot with 2 slots"]

    def test_unallocated_capacity_is_zero(self) -> None:
        """Test read-only accessors before allocation."""
        lot = ParkingLot()
        assert lot.capacity == 0
        assert lot.occupied_count == 0


class TestNotAllocated:
    """Tests that slot operations fail before allocation."""

    def test_park_before_allocation(self) -> None:
        with pytest.raises(NotAllocatedError, match="Parking slots are not allocated"):
            ParkingLot().park("A", "B")

    def test_leave_before_allocation(self) -> None:
        with pytest.raises(NotAllocatedError):
            ParkingLot().leave(1)

    def test_status_before_allocation(self) -> None:
        with pytest.raises(NotAllocatedError):
            ParkingLot().status()

    def test_query_before_allocation(self) -> None:
        with pytest.raises(NotAllocatedError):
            ParkingLot().query(SlotQuery.slots_with_colour("Red"))


class TestParkAndLeave:
    """Tests for first-fit parking and freeing slots."""

    def test_park_fills_slots_in_order(self) -> None:
        """Test that consecutive parks take consecutive slots."""
        lot = ParkingLot()
        lot.allocate(3)
        assert lot.park("T800", "Red") == ["Allocated slot number: 1"]
        assert lot.park("T1000", "BLACK") == ["Allocated slot number: 2"]
        assert lot.park("HAL9000", "GrEeN") == ["Allocated slot number: 3"]
        assert lot.occupied_count == 3

    def test_park_when_full_raises(self) -> None:
        """Test that parking in a full lot is rejected."""
        lot = _lot_with(2, ("A1", "Red"), ("A2", "Blue"))
        with pytest.raises(LotFullError, match="Sorry, parking lot is full"):
            lot.park("A3", "White")

    def test_park_reuses_lowest_free_slot(self) -> None:
        """Test first-fit picks the lowest-numbered free slot."""
        lot = _lot_with(3, ("T800", "Red"), ("T1000", "Black"), ("HAL9000", "Green"))
        with pytest.raises(LotFullError):
            lot.park("Submarine", "Yellow")

        assert lot.leave(2) == ["Slot number 2 is free"]
        assert lot.leave(3) == ["Slot number 3 is free"]
        assert lot.park("Submarine", "Yellow") == ["Allocated slot number: 2"]
        assert lot.park("Kitt", "Black") == ["Allocated slot number: 3"]

    def test_leave_last_slot(self) -> None:
        """Test that the slot equal to capacity can be freed."""
        lot = _lot_with(3, ("A1", "Red"), ("A2", "Red"), ("A3", "Red"))
        assert lot.leave(3) == ["Slot number 3 is free"]
        assert lot.park("A4", "Blue") == ["Allocated slot number: 3"]

    def test_leave_above_capacity_raises(self) -> None:
        """Test that a slot number past the end is rejected."""
        lot = _lot_with(3)
        with pytest.raises(InvalidSlotNumberError, match=r"interval \[1, 3\]"):
            lot.leave(4)

    def test_leave_zero_raises(self) -> None:
        """Test that slot 0 is rejected."""
        lot = _lot_with(3)
        with pytest.raises(InvalidSlotNumberError):
            lot.leave(0)

    def test_leave_negative_raises(self) -> None:
        lot = _lot_with(3)
        with pytest.raises(InvalidSlotNumberError):
            lot.leave(-1)

    def test_leave_empty_slot_is_idempotent(self) -> None:
        """Test that freeing an empty slot succeeds."""
        lot = _lot_with(2, ("A1", "Red"))
        assert lot.leave(2) == ["Slot number 2 is free"]
        assert lot.leave(1) == ["Slot number 1 is free"]
        assert lot.leave(1) == ["Slot number 1 is free"]
        assert lot.occupied_count == 0


class TestStatus:
    """Tests for the status report."""

    def test_status_header_only_when_empty(self) -> None:
        """Test status right after allocation."""
        lot = _lot_with(4)
        assert lot.status() == [STATUS_HEADER]

    def test_status_lists_occupied_slots_in_order(self) -> None:
        """Test that empty slots are skipped and order follows slot numbers."""
        lot = _lot_with(4, ("KA-01", "White"), ("KA-02", "Black"), ("KA-03", "Red"))
        lot.leave(2)
        assert lot.status() == [
            "Slot No.   Registration No  Colour",
            "1     KA-01  White",
            "3     KA-03  Red",
        ]

    def test_status_keeps_original_casing(self) -> None:
        lot = _lot_with(1, ("t800", "rEd"))
        assert lot.status()[1] == "1     t800  rEd"


class TestQuery:
    """Tests for colour and registration lookups."""

    def test_registrations_with_colour(self) -> None:
        """Test registrations are reported in slot order."""
        lot = _lot_with(4, ("A1", "White"), ("A2", "Black"), ("A3", "white"))
        assert lot.query(SlotQuery.registrations_with_colour("White")) == ["A1", "A3"]

    def test_slots_with_colour(self) -> None:
        lot = _lot_with(4, ("A1", "White"), ("A2", "Black"), ("A3", "white"))
        assert lot.query(SlotQuery.slots_with_colour("WHITE")) == ["1", "3"]

    def test_slot_with_registration(self) -> None:
        lot = _lot_with(3, ("A1", "White"), ("T800", "Red"))
        assert lot.query(SlotQuery.slots_with_registration("t800")) == ["2"]

    @pytest.mark.parametrize("colour", ["red", "RED", "ReD", "Red"])
    def test_colour_match_ignores_case(self, colour: str) -> None:
        """Test that colour lookups are case-insensitive."""
        lot = _lot_with(2, ("T800", "Red"))
        assert lot.query(SlotQuery.slots_with_colour(colour)) == ["1"]

    def test_query_no_match_raises(self) -> None:
        """Test that an empty result is reported as not found."""
        lot = _lot_with(2, ("T800", "Red"))
        with pytest.raises(NotFoundError, match="Not found"):
            lot.query(SlotQuery.registrations_with_colour("Blue"))

    def test_query_on_empty_lot_raises(self) -> None:
        with pytest.raises(NotFoundError):
            _lot_with(2).query(SlotQuery.slots_with_registration("T800"))

    def test_query_ignores_vehicles_that_left(self) -> None:
        lot = _lot_with(2, ("T800", "Red"), ("T1000", "Red"))
        lot.leave(1)
        assert lot.query(SlotQuery.slots_with_colour("red")) == ["2"]


class TestSnapshot:
    """Tests for the detached state snapshot."""

    def test_snapshot_unallocated(self) -> None:
        assert ParkingLot().snapshot() == {"allocated": False, "capacity": 0, "slots": []}

    def test_snapshot_allocated(self) -> None:
        """Test snapshot content after parking."""
        lot = _lot_with(2, ("T800", "Red"))
        assert lot.snapshot() == {
            "allocated": True,
            "capacity": 2,
            "slots": [
                {"number": 1, "vehicle": {"registration": "T800", "colour": "Red"}},
                {"number": 2, "vehicle": None},
            ],
        }

    def test_snapshot_is_detached(self) -> None:
        """Test that mutating a snapshot leaves the lot untouched."""
        lot = _lot_with(1, ("T800", "Red"))
        snapshot = lot.snapshot()
        snapshot["slots"][0]["vehicle"] = None
        assert lot.occupied_count == 1
