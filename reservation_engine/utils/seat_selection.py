import logging
from decimal import Decimal
from typing import Iterable, List, Optional, Sequence

from reservation_engine.core.config import Settings, settings as default_settings
from reservation_engine.schemas.reservation import Reservation
from reservation_engine.schemas.seat_map import SeatMapRecord
from reservation_engine.schemas.selection import SelectionFailure, SelectionResult

logger = logging.getLogger(__name__)


def is_selectable(seat_map: SeatMapRecord) -> bool:
    """
    A seat map can be picked when it is on sale and not held or sold.
    If the seat is embedded it must also be a bookable seat (not an aisle or
    stair, not switched off by the theatre).
    """
    if not seat_map.is_available or seat_map.is_reserved:
        return False
    seat = seat_map.expanded_seat
    if seat is not None and not seat.is_bookable:
        return False
    return True


def selectable_seat_maps(seat_maps: Iterable[SeatMapRecord]) -> List[SeatMapRecord]:
    return [seat_map for seat_map in seat_maps if is_selectable(seat_map)]


def toggle_seat(selected_ids: Sequence[str], seat_map_id: str) -> List[str]:
    """Return a new selection with `seat_map_id` added, or removed if present."""
    if seat_map_id in selected_ids:
        return [i for i in selected_ids if i != seat_map_id]
    return [*selected_ids, seat_map_id]


def evaluate_selection(
    seat_maps: Iterable[SeatMapRecord],
    selected_ids: Sequence[str],
    reservation_type: str,
    ticket_count: int,
    seatless_types: Optional[Iterable[str]] = None,
    settings: Optional[Settings] = None,
) -> SelectionResult:
    """
    Check the seats picked for a reservation.

    Seatless reservation types (general admission by default; pass
    `seatless_types` to override) must not pick seats at all. Every other
    type must pick exactly `ticket_count` distinct, selectable seat maps.
    Bad ids are reported before a wrong count, so the UI can point at the
    seats to drop first.

    On success `total_price` is the sum of the selected seat map prices as
    stored; nothing is repriced here.
    """
    settings = settings or default_settings
    selected = list(selected_ids)

    if seatless_types is None:
        seatless = set(settings.SEATLESS_RESERVATION_TYPES)
    else:
        seatless = set(seatless_types)

    if reservation_type in seatless:
        if selected:
            return SelectionResult(
                is_valid=False,
                failure=SelectionFailure.INVALID_SELECTION,
                message="Must be empty.",
                selected_ids=selected,
                invalid_ids=selected,
                expected_count=0,
                selected_count=len(selected),
            )
        return SelectionResult(is_valid=True, expected_count=0, selected_count=0)

    by_id = {seat_map.id: seat_map for seat_map in seat_maps}

    invalid_ids: List[str] = []
    seen = set()
    for seat_map_id in selected:
        seat_map = by_id.get(seat_map_id)
        duplicate = seat_map_id in seen
        seen.add(seat_map_id)
        if duplicate or seat_map is None or not is_selectable(seat_map):
            if seat_map_id not in invalid_ids:
                invalid_ids.append(seat_map_id)

    if invalid_ids:
        logger.debug("Rejected seat selection %s: %s", selected, invalid_ids)
        return SelectionResult(
            is_valid=False,
            failure=SelectionFailure.INVALID_SELECTION,
            message=f"Seats not available: {', '.join(invalid_ids)}",
            selected_ids=selected,
            invalid_ids=invalid_ids,
            expected_count=ticket_count,
            selected_count=len(selected),
        )

    if len(selected) != ticket_count:
        return SelectionResult(
            is_valid=False,
            failure=SelectionFailure.SELECTION_COUNT_MISMATCH,
            message=f"Selected {len(selected)} seat(s) for {ticket_count} ticket(s).",
            selected_ids=selected,
            expected_count=ticket_count,
            selected_count=len(selected),
        )

    total_price = sum((by_id[i].price for i in selected), Decimal("0"))
    return SelectionResult(
        is_valid=True,
        selected_ids=selected,
        expected_count=ticket_count,
        selected_count=len(selected),
        total_price=total_price,
    )


def evaluate_reservation_selection(
    reservation: Reservation,
    seat_maps: Iterable[SeatMapRecord],
    seatless_types: Optional[Iterable[str]] = None,
    settings: Optional[Settings] = None,
) -> SelectionResult:
    """evaluate_selection using a Reservation's own type, ticket count and seating."""
    return evaluate_selection(
        seat_maps,
        reservation.selected_seating,
        reservation.reservation_type,
        reservation.ticket_count,
        seatless_types=seatless_types,
        settings=settings,
    )
