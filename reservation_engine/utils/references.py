from typing import Mapping, Optional, TypeVar, Union

from reservation_engine.core.exceptions import UnresolvedReferenceError
from reservation_engine.schemas.seat import SeatBase
from reservation_engine.schemas.seat_map import (
    ExpandedSeat,
    ExpandedShowing,
    IdReference,
    SeatMapRecord,
)
from reservation_engine.schemas.showing import Showing

T = TypeVar("T")


def resolve_reference(
    reference: Union[IdReference, ExpandedSeat, ExpandedShowing],
    lookup: Optional[Mapping[str, T]] = None,
    kind: str = "Entity",
) -> T:
    """
    Turn a reference-or-expansion into the underlying entity.

    Expanded references carry the entity already. Bare ids are looked up in
    `lookup`; an id that is missing there is a caller bug and raises
    UnresolvedReferenceError.
    """
    if reference.kind == "expanded":
        return reference.value
    if lookup is None or reference.id not in lookup:
        raise UnresolvedReferenceError(kind, reference.id)
    return lookup[reference.id]


def resolve_seat(
    seat_map: SeatMapRecord, seats: Optional[Mapping[str, SeatBase]] = None
) -> SeatBase:
    return resolve_reference(seat_map.seat, seats, kind="Seat")


def resolve_showing(
    seat_map: SeatMapRecord, showings: Optional[Mapping[str, Showing]] = None
) -> Showing:
    return resolve_reference(seat_map.showing, showings, kind="Showing")


def expand_seat_map(
    seat_map: SeatMapRecord,
    seats: Optional[Mapping[str, SeatBase]] = None,
    showings: Optional[Mapping[str, Showing]] = None,
) -> SeatMapRecord:
    """
    Return a copy of `seat_map` whose seat (and showing, when `showings` is
    given or it is already embedded) are expanded. The input is not modified.
    """
    update = {"seat": ExpandedSeat(value=resolve_seat(seat_map, seats))}
    if showings is not None or seat_map.showing.kind == "expanded":
        update["showing"] = ExpandedShowing(value=resolve_showing(seat_map, showings))
    return seat_map.model_copy(update=update)
