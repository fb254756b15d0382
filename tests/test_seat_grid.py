import logging
import random

import pytest

from reservation_engine.core.config import Settings
from reservation_engine.core.exceptions import (
    DuplicateSeatCoordinateError,
    InvalidSeatCoordinateError,
    UnresolvedReferenceError,
)
from reservation_engine.utils.seat_grid import LABEL_ROW, build_grid, build_seat_map_grid


class TestBuildGrid:

    def test_empty_input(self):
        grid = build_grid([])

        assert grid.rows == {}
        assert grid.max_x == 0
        assert grid.max_y == 0
        assert grid.is_empty
        assert grid.row_entries() == []

    def test_three_seat_example(self, make_seat):
        a = make_seat(1, 1)
        b = make_seat(2, 1)
        c = make_seat(1, 2)

        grid = build_grid([a, b, c])

        assert grid.max_x == 2
        assert grid.max_y == 2
        assert set(grid.rows) == {0, 1, 2}
        assert grid.rows[0] == [1, 2]
        assert grid.rows[2] == [c, None]
        assert grid.rows[1] == [a, b]

    def test_rows_are_ordered_top_down_then_labels(self, make_seat):
        grid = build_grid([make_seat(1, 1), make_seat(3, 4)])

        assert [y for y, _ in grid.row_entries()] == [4, 3, 2, 1, LABEL_ROW]
        assert [y for y, _ in grid.row_entries(include_labels=False)] == [4, 3, 2, 1]

    def test_empty_rows_are_kept_at_full_width(self, make_seat):
        grid = build_grid([make_seat(3, 1), make_seat(1, 3)])

        assert grid.rows[2] == [None, None, None]
        assert len(grid.rows) == grid.max_y + 1
        assert all(len(row) == grid.max_x for row in grid.rows.values())

    def test_every_seat_lands_on_its_coordinate(self, make_seat):
        seats = [make_seat(x, y) for x in range(1, 6) for y in range(1, 4) if (x + y) % 2]

        grid = build_grid(seats)

        for seat in seats:
            assert grid.rows[seat.y][seat.x - 1] is seat
            assert grid.cell(seat.x, seat.y) is seat
        placed = [cell for y, row in grid.row_entries(include_labels=False) for cell in row if cell is not None]
        assert len(placed) == len(seats)

    def test_placement_ignores_input_order(self, make_seat):
        seats = [make_seat(x, y) for x in range(1, 5) for y in range(1, 5)]
        shuffled = list(seats)
        random.Random(7).shuffle(shuffled)

        assert build_grid(seats).rows == build_grid(shuffled).rows

    def test_header_row_counts_columns(self, make_seat):
        grid = build_grid([make_seat(7, 2)])

        assert grid.rows[LABEL_ROW] == [1, 2, 3, 4, 5, 6, 7]
        assert grid.column_labels == [1, 2, 3, 4, 5, 6, 7]

    def test_aisles_and_stairs_take_their_cell(self, make_seat, make_aisle, make_stair):
        seat = make_seat(1, 1)
        aisle = make_aisle(2, 1)
        stair = make_stair(3, 1)

        grid = build_grid([stair, seat, aisle])

        assert grid.rows[1] == [seat, aisle, stair]

    def test_input_is_not_mutated(self, make_seat):
        seats = [make_seat(2, 2), make_seat(1, 1)]
        before = list(seats)

        build_grid(seats)

        assert seats == before

    def test_cell_outside_grid_is_none(self, make_seat):
        grid = build_grid([make_seat(2, 2)])

        assert grid.cell(3, 1) is None
        assert grid.cell(0, 1) is None
        assert grid.cell(1, 1) is None


class TestBuildGridPreconditions:

    def test_duplicate_coordinates_last_write_wins(self, make_seat, settings, caplog):
        first = make_seat(1, 1, seat_id="first")
        second = make_seat(1, 1, seat_id="second")

        caplog.set_level(logging.WARNING, logger="reservation_engine")
        grid = build_grid([first, second], settings=settings)

        assert grid.rows[1] == [second]
        assert "Duplicate seat at (1, 1)" in caplog.text

    def test_duplicate_coordinates_can_be_an_error(self, make_seat):
        strict = Settings(_env_file=None, GRID_DUPLICATE_POLICY="error")

        with pytest.raises(DuplicateSeatCoordinateError) as exc:
            build_grid([make_seat(2, 1), make_seat(2, 1)], settings=strict)

        assert (exc.value.x, exc.value.y) == (2, 1)

    def test_non_positive_coordinates_raise(self):
        with pytest.raises(InvalidSeatCoordinateError):
            build_grid([(0, 1)], position=lambda item: item)


class TestBuildSeatMapGrid:

    def test_positions_seat_maps_by_resolved_seat(self, make_seat, make_seat_map):
        front = make_seat(1, 1)
        back = make_seat(2, 2)
        expanded = make_seat_map("sm-front", seat=front)
        by_id = make_seat_map("sm-back", seat=back.id)

        grid = build_seat_map_grid([expanded, by_id], seats={back.id: back})

        assert grid.rows[1] == [expanded, None]
        assert grid.rows[2] == [None, by_id]

    def test_unresolvable_seat_raises(self, make_seat_map):
        with pytest.raises(UnresolvedReferenceError):
            build_seat_map_grid([make_seat_map("sm-1", seat="missing")], seats={})
