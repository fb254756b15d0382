from reservation_engine.schemas.common import (
    EngineModel, FieldError, ValidationResult,
    ErrorResponse, InvalidSelectionError, SelectionCountMismatchError,
)
from reservation_engine.schemas.seat import (
    Seat, SeatBase, SeatingPosition, AislePosition, StairPosition,
    LayoutType, SeatType, parse_seat, parse_seats,
)
from reservation_engine.schemas.showing import Showing
from reservation_engine.schemas.seat_map import (
    SeatMapRecord, SeatMapStatus, IdReference, ExpandedSeat, ExpandedShowing,
)
from reservation_engine.schemas.reservation import (
    Reservation, ReservationStatus, ReservationType,
)
from reservation_engine.schemas.selection import SelectionFailure, SelectionResult
