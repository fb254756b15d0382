from decimal import Decimal

import pytest

from reservation_engine.core.config import Settings
from reservation_engine.schemas import (
    AislePosition,
    Reservation,
    SeatingPosition,
    SeatMapRecord,
    StairPosition,
)


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def make_seat():
    def _make(x, y, seat_id=None, row=None, **fields):
        return SeatingPosition(
            id=seat_id or f"seat-{x}-{y}",
            row=row or chr(ord("A") + y - 1),
            x=x,
            y=y,
            seat_number=fields.pop("seat_number", x),
            **fields,
        )
    return _make


@pytest.fixture
def make_aisle():
    def _make(x, y):
        return AislePosition(id=f"aisle-{x}-{y}", row=chr(ord("A") + y - 1), x=x, y=y)
    return _make


@pytest.fixture
def make_stair():
    def _make(x, y):
        return StairPosition(id=f"stair-{x}-{y}", row=chr(ord("A") + y - 1), x=x, y=y)
    return _make


@pytest.fixture
def make_seat_map():
    def _make(seat_map_id, seat="seat-1", price="12.50", status="AVAILABLE", showing="showing-1"):
        return SeatMapRecord(
            id=seat_map_id,
            seat=seat,
            showing=showing,
            price=Decimal(price),
            status=status,
        )
    return _make


@pytest.fixture
def make_reservation():
    def _make(**fields):
        fields.setdefault("reservation_type", "RESERVED_SEATS")
        fields.setdefault("ticket_count", 1)
        return Reservation(**fields)
    return _make
