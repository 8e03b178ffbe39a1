from puzzlebox.verifiers import Cell, chebyshev, direction, is_line, line_cells, trusted_walk


class TestLineCells:
    """Test cases for cells covered by a drag selection."""

    def test_horizontal_line(self):
        """A horizontal drag covers every cell in between."""
        assert line_cells(Cell(0, 0), Cell(0, 3)) == [(0, 0), (0, 1), (0, 2), (0, 3)]

    def test_vertical_line_upwards(self):
        """Cells are listed from start to end even when walking backwards."""
        assert line_cells(Cell(3, 2), Cell(1, 2)) == [(3, 2), (2, 2), (1, 2)]

    def test_diagonal_line(self):
        assert line_cells(Cell(0, 0), Cell(3, 3)) == [(0, 0), (1, 1), (2, 2), (3, 3)]

    def test_anti_diagonal_line(self):
        assert line_cells(Cell(0, 3), Cell(3, 0)) == [(0, 3), (1, 2), (2, 1), (3, 0)]

    def test_non_line_degrades_to_endpoints(self):
        """A knight-like drag is not a line; only the endpoints count."""
        assert line_cells(Cell(0, 0), Cell(2, 5)) == [(0, 0), (2, 5)]

    def test_single_point(self):
        assert line_cells(Cell(4, 4), Cell(4, 4)) == [(4, 4)]

    def test_accepts_plain_tuples(self):
        cells = line_cells((1, 1), (1, 2))
        assert cells == [Cell(1, 1), Cell(1, 2)]
        assert cells[0].key == "1-1"


class TestLineHelpers:
    """Test cases for direction and distance helpers."""

    def test_direction_is_unit_step(self):
        assert direction(Cell(5, 5), Cell(0, 9)) == (-1, 1)
        assert direction(Cell(2, 2), Cell(2, 2)) == (0, 0)

    def test_chebyshev(self):
        assert chebyshev(Cell(0, 0), Cell(2, 5)) == 5

    def test_is_line(self):
        assert is_line(Cell(0, 0), Cell(0, 7))
        assert is_line(Cell(0, 0), Cell(4, 4))
        assert not is_line(Cell(0, 0), Cell(1, 2))


class TestTrustedWalk:
    """Test cases for walking stored word endpoints."""

    def test_walk_matches_line_for_valid_endpoints(self):
        assert trusted_walk(Cell(1, 1), Cell(1, 3)) == line_cells(Cell(1, 1), Cell(1, 3))

    def test_walk_is_bounded_for_skewed_endpoints(self):
        """Endpoints off the eight directions still terminate after max(|dr|, |dc|) steps."""
        cells = trusted_walk(Cell(0, 0), Cell(1, 3))
        assert len(cells) == 4
        assert cells[0] == (0, 0)
        assert cells[-1] == (3, 3)

    def test_walk_single_cell(self):
        assert trusted_walk(Cell(2, 2), Cell(2, 2)) == [(2, 2)]
