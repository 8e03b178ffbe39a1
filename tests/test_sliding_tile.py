import random

import pytest

from puzzlebox.errors import ConfigurationInvalid, PhaseError
from puzzlebox.puzzles import Phase, SlidingTilePuzzle, Tile, is_solvable, shuffle_tiles
from puzzlebox.puzzles.sliding_tile import all_in_place, create_tiles, is_adjacent


def near_solved_payload(secret, grid_size=3):
    """Solved board except the blank and the last tile are swapped."""
    last = grid_size * grid_size - 1
    tiles = []
    for i in range(last + 1):
        current = i
        if i == last:
            current = last - 1
        elif i == last - 1:
            current = last
        tiles.append({"id": i, "originalIndex": i, "currentIndex": current})
    return {
        "puzzleImageSrc": "data:image/png;base64,AAAA",
        "gridSize": grid_size,
        "initialTiles": tiles,
        "secret": secret.model_dump(),
    }


class TestShuffle:
    """Test cases for tile shuffling and solvability."""

    @pytest.mark.parametrize("grid_size", [3, 4, 5])
    def test_shuffle_is_permutation(self, grid_size):
        """Every id and every position appears exactly once."""
        tiles = shuffle_tiles(grid_size, random.Random(7))
        n = grid_size * grid_size
        assert sorted(t.id for t in tiles) == list(range(n))
        assert sorted(t.current_index for t in tiles) == list(range(n))
        assert all(t.id == t.original_index for t in tiles)

    @pytest.mark.parametrize("grid_size", [3, 4])
    def test_shuffle_is_always_solvable(self, grid_size):
        rng = random.Random(1)
        for _ in range(50):
            tiles = shuffle_tiles(grid_size, rng)
            assert is_solvable(tiles, grid_size)
            assert not all_in_place(tiles)

    def test_raw_shuffle_can_be_unsolvable(self):
        rng = random.Random(3)
        results = {is_solvable(shuffle_tiles(3, rng, solvable_only=False), 3) for _ in range(200)}
        assert results == {True, False}

    def test_single_swap_is_unsolvable(self):
        """Swapping two tiles with the blank at home cannot be slid back."""
        tiles = create_tiles(3)
        tiles[0].current_index, tiles[1].current_index = 1, 0
        assert not is_solvable(tiles, 3)

    def test_blank_slide_is_solvable(self):
        tiles = create_tiles(3)
        tiles[7].current_index, tiles[8].current_index = 8, 7
        assert is_solvable(tiles, 3)

    def test_is_adjacent(self):
        assert is_adjacent(0, 1, 3)
        assert is_adjacent(1, 4, 3)
        assert not is_adjacent(2, 3, 3)  # row wrap
        assert not is_adjacent(0, 4, 3)  # diagonal


class TestStart:
    """Test cases for configuring a sliding tile puzzle."""

    def test_start_shuffles_and_rasterizes(self, image, secret):
        puzzle = SlidingTilePuzzle(seed=11)
        puzzle.start(image, 4, secret)

        assert puzzle.phase == Phase.PLAYING
        assert puzzle.puzzle_image_src.startswith("data:image/png;base64,")
        assert len(puzzle.tiles) == 16
        assert puzzle.initial_tiles == puzzle.tiles
        assert is_solvable(puzzle.tiles, 4)

    def test_same_seed_same_shuffle(self, image, secret):
        first = SlidingTilePuzzle(seed=5)
        second = SlidingTilePuzzle(seed=5)
        first.start(image, 3, secret)
        second.start(image, 3, secret)
        assert first.tiles == second.tiles

    def test_missing_image_and_secret(self):
        with pytest.raises(ConfigurationInvalid) as exc:
            SlidingTilePuzzle().start(None, 3, None)
        assert set(exc.value.codes) == {"MISSING_IMAGE", "MISSING_SECRET"}

    def test_invalid_grid_size(self, image, secret):
        puzzle = SlidingTilePuzzle()
        with pytest.raises(ConfigurationInvalid) as exc:
            puzzle.start(image, 6, secret)
        assert exc.value.codes == ["INVALID_GRID_SIZE"]
        assert puzzle.phase == Phase.CONFIGURING

    def test_unreadable_image(self, secret):
        with pytest.raises(ConfigurationInvalid) as exc:
            SlidingTilePuzzle().start(b"not an image", 3, secret)
        assert exc.value.codes == ["INVALID_IMAGE"]

    def test_image_is_cropped_square(self, image, secret):
        import base64
        import io
        from PIL import Image

        puzzle = SlidingTilePuzzle()
        puzzle.start(image, 3, secret)
        data = base64.b64decode(puzzle.puzzle_image_src.split(",", 1)[1])
        with Image.open(io.BytesIO(data)) as square:
            assert square.size == (40, 40)

    def test_click_before_start(self):
        with pytest.raises(PhaseError):
            SlidingTilePuzzle().click(0)


class TestPlay:
    """Test cases for clicking tiles."""

    def test_click_adjacent_tile_solves(self, secret):
        puzzle = SlidingTilePuzzle.from_export(near_solved_payload(secret))
        assert puzzle.phase == Phase.PLAYING
        assert puzzle.revealed_secret is None

        assert puzzle.click(7) is True
        assert puzzle.moves == 1
        assert puzzle.is_solved
        assert puzzle.revealed_secret == secret

    def test_non_adjacent_click_is_ignored(self, secret):
        puzzle = SlidingTilePuzzle.from_export(near_solved_payload(secret))
        assert puzzle.click(0) is False
        assert puzzle.moves == 0

    def test_clicking_blank_is_ignored(self, secret):
        puzzle = SlidingTilePuzzle.from_export(near_solved_payload(secret))
        assert puzzle.click(8) is False

    def test_clicks_after_win_are_ignored(self, secret):
        puzzle = SlidingTilePuzzle.from_export(near_solved_payload(secret))
        puzzle.click(7)
        assert puzzle.click(5) is False
        assert puzzle.moves == 1

    def test_tiles_remain_a_permutation(self, secret):
        puzzle = SlidingTilePuzzle.from_export(near_solved_payload(secret))
        puzzle.click(4)  # above the blank
        positions = sorted(t.current_index for t in puzzle.tiles)
        assert positions == list(range(9))

    def test_board(self, secret):
        puzzle = SlidingTilePuzzle.from_export(near_solved_payload(secret))
        assert puzzle.board() == [[0, 1, 2], [3, 4, 5], [6, None, 7]]

    def test_export_replays_initial_arrangement(self, image, secret):
        puzzle = SlidingTilePuzzle(seed=2)
        puzzle.start(image, 3, secret)
        blank = puzzle.tile(puzzle.blank_id)
        neighbour = next(
            t for t in puzzle.tiles if is_adjacent(t.current_index, blank.current_index, 3)
        )
        puzzle.click(neighbour.id)

        restored = SlidingTilePuzzle.from_export(puzzle.export_state())
        assert restored.tiles == puzzle.initial_tiles
        assert restored.moves == 0

    def test_export_before_start(self):
        with pytest.raises(PhaseError):
            SlidingTilePuzzle().export_state()

    def test_tile_payload_uses_camel_case(self, secret):
        payload = SlidingTilePuzzle.from_export(near_solved_payload(secret)).export_state()
        assert set(payload) == {"puzzleImageSrc", "gridSize", "initialTiles", "secret"}
        assert set(payload["initialTiles"][0]) == {"id", "originalIndex", "currentIndex"}
        assert Tile.model_validate(payload["initialTiles"][0]).original_index == 0
