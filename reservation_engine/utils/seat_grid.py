import logging
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Iterable, List, Mapping, Optional, Tuple, TypeVar, Union

from reservation_engine.core.config import Settings, settings as default_settings
from reservation_engine.core.exceptions import (
    DuplicateSeatCoordinateError,
    InvalidSeatCoordinateError,
)
from reservation_engine.schemas.seat import SeatBase
from reservation_engine.schemas.seat_map import SeatMapRecord
from reservation_engine.utils.references import resolve_seat

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Key of the synthesized column-label row
LABEL_ROW = 0


def seat_position(item) -> Tuple[int, int]:
    return item.x, item.y


@dataclass(frozen=True)
class SeatGrid(Generic[T]):
    """
    Dense seat layout.

    `rows` maps y to a list of exactly `max_x` cells. Keys run from `max_y`
    down to 1 (row 1 sits nearest the screen and renders last), followed by
    LABEL_ROW holding the column numbers 1..max_x. A cell is None when no
    seat occupies that coordinate.
    """

    rows: Dict[int, List[Union[T, int, None]]]
    max_x: int = 0
    max_y: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def column_labels(self) -> List[int]:
        return list(self.rows.get(LABEL_ROW, []))

    def cell(self, x: int, y: int) -> Optional[T]:
        if not (1 <= x <= self.max_x and 1 <= y <= self.max_y):
            return None
        return self.rows[y][x - 1]

    def row_entries(self, include_labels: bool = True) -> List[Tuple[int, List[Union[T, int, None]]]]:
        """(y, row) pairs in presentation order."""
        if self.is_empty:
            return []
        order = list(range(self.max_y, 0, -1))
        if include_labels:
            order.append(LABEL_ROW)
        return [(y, self.rows[y]) for y in order]


def build_grid(
    items: Iterable[T],
    position: Optional[Callable[[T], Tuple[int, int]]] = None,
    settings: Optional[Settings] = None,
) -> SeatGrid[T]:
    """
    Lay a flat list of seats out as a dense 2D grid.

    Each item is placed at grid[y][x - 1] using `position` (defaults to the
    item's own x/y). Every row from 1 to max_y is materialised with max_x
    cells, empty rows included, so columns line up across the whole layout.
    Aisles and stairs take their cell like any seat.

    Raises InvalidSeatCoordinateError for x or y below 1. Two items on the
    same coordinate follow GRID_DUPLICATE_POLICY.
    """
    settings = settings or default_settings
    position = position or seat_position

    placed = [(position(item), item) for item in items]
    if not placed:
        return SeatGrid(rows={}, max_x=0, max_y=0)

    max_x = 0
    max_y = 0
    for (x, y), _ in placed:
        if x < 1 or y < 1:
            raise InvalidSeatCoordinateError(x, y)
        if x > max_x:
            max_x = x
        if y > max_y:
            max_y = y

    cells: List[List[Optional[T]]] = [[None] * max_x for _ in range(max_y)]
    for (x, y), item in placed:
        if cells[y - 1][x - 1] is not None:
            if settings.GRID_DUPLICATE_POLICY == "error":
                raise DuplicateSeatCoordinateError(x, y)
            logger.warning("Duplicate seat at (%d, %d); keeping the later entry.", x, y)
        cells[y - 1][x - 1] = item

    rows: Dict[int, List[Union[T, int, None]]] = {}
    for y in range(max_y, 0, -1):
        rows[y] = cells[y - 1]
    rows[LABEL_ROW] = list(range(1, max_x + 1))

    logger.debug("Built %dx%d seat grid from %d entries.", max_x, max_y, len(placed))
    return SeatGrid(rows=rows, max_x=max_x, max_y=max_y)


def build_seat_map_grid(
    seat_maps: Iterable[SeatMapRecord],
    seats: Optional[Mapping[str, SeatBase]] = None,
    settings: Optional[Settings] = None,
) -> SeatGrid[SeatMapRecord]:
    """Grid of seat maps, positioned by their resolved seat."""
    return build_grid(
        seat_maps,
        position=lambda seat_map: seat_position(resolve_seat(seat_map, seats)),
        settings=settings,
    )
