from reservation_engine.core.logging import configure_logging
from reservation_engine.utils.seat_grid import SeatGrid, build_grid, build_seat_map_grid
from reservation_engine.utils.lifecycle import (
    ValidatedReservation, required_lifecycle_field, validate_reservation, validate_reservations,
)
from reservation_engine.utils.seat_selection import (
    evaluate_reservation_selection, evaluate_selection, is_selectable,
    selectable_seat_maps, toggle_seat,
)

__version__ = "0.1.0"
