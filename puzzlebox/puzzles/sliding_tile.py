import random
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..errors import ConfigurationInvalid, ConfigurationIssue, PhaseError
from ..verifiers.models import Secret
from .imaging import ImageSource, rasterize_square
from .models import Phase, SlidingTileState, Tile, secret_issues


GRID_SIZES = (3, 4, 5)


def create_tiles(grid_size: int) -> List[Tile]:
    """Tiles in solved order; the last tile (id n*n - 1) is the blank."""
    return [Tile(id=i, original_index=i, current_index=i) for i in range(grid_size * grid_size)]


def is_solvable(tiles: List[Tile], grid_size: int) -> bool:
    """
    Check whether an arrangement can be slid back to the solved state.

    Every legal slide is a transposition that also moves the blank one step,
    so the permutation parity must equal the parity of the blank's taxicab
    distance from its home corner.
    """
    board = [0] * len(tiles)
    for tile in tiles:
        board[tile.current_index] = tile.original_index

    seen = [False] * len(board)
    transpositions = 0
    for start in range(len(board)):
        length = 0
        pos = start
        while not seen[pos]:
            seen[pos] = True
            pos = board[pos]
            length += 1
        if length:
            transpositions += length - 1

    blank = next(t for t in tiles if t.id == grid_size * grid_size - 1)
    row, col = divmod(blank.current_index, grid_size)
    distance = (grid_size - 1 - row) + (grid_size - 1 - col)
    return transpositions % 2 == distance % 2


def shuffle_tiles(
    grid_size: int,
    rng: Optional[random.Random] = None,
    solvable_only: bool = True,
) -> List[Tile]:
    """
    Shuffle tile identities with Fisher-Yates (random.shuffle).

    With solvable_only, arrangements that are unsolvable or already solved
    are rejected and reshuffled, which keeps the draw uniform over the
    accepted arrangements.
    """
    rng = rng or random.Random()
    while True:
        order = create_tiles(grid_size)
        rng.shuffle(order)
        tiles = [
            Tile(id=tile.id, original_index=tile.original_index, current_index=index)
            for index, tile in enumerate(order)
        ]
        if not solvable_only:
            return tiles
        if is_solvable(tiles, grid_size) and not all_in_place(tiles):
            return tiles


def all_in_place(tiles: List[Tile]) -> bool:
    return bool(tiles) and all(t.current_index == t.original_index for t in tiles)


def is_adjacent(a: int, b: int, grid_size: int) -> bool:
    """Orthogonal neighbours: same row and one apart, or exactly one row apart."""
    same_row = a // grid_size == b // grid_size
    return (abs(a - b) == 1 and same_row) or abs(a - b) == grid_size


class SlidingTilePuzzle(BaseModel):
    """
    Sliding tile puzzle over a square image.

    The user supplies an image and grid size. The image is rasterized once
    to a square data URL and the tiles are shuffled. Clicking a tile next to
    the blank swaps them. The puzzle is solved when every tile is back at its
    original index.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    phase: Phase = Phase.CONFIGURING
    secret: Secret = Field(default_factory=Secret)
    grid_size: int = 3
    puzzle_image_src: Optional[str] = None
    tiles: List[Tile] = Field(default_factory=list)
    initial_tiles: List[Tile] = Field(default_factory=list)
    moves: int = 0
    seed: Optional[int] = None
    _rng: random.Random = PrivateAttr(default=None)

    def model_post_init(self, __context) -> None:
        self._rng = random.Random(self.seed)

    def start(self, image: Optional[ImageSource], grid_size: int, secret: Secret) -> None:
        """
        Validate the configuration, rasterize the image and shuffle.

        Raises:
            ConfigurationInvalid: If the image, grid size or secret is unusable
        """
        issues = secret_issues(secret)
        if grid_size not in GRID_SIZES:
            issues.append(ConfigurationIssue(
                code="INVALID_GRID_SIZE",
                message=f"Grid size must be one of {', '.join(map(str, GRID_SIZES))}.",
                field="grid_size",
            ))
        image_src = None
        if image is None:
            issues.append(ConfigurationIssue(
                code="MISSING_IMAGE",
                message="Please upload an image.",
                field="image",
            ))
        else:
            try:
                image_src = rasterize_square(image)
            except (OSError, ValueError) as e:
                issues.append(ConfigurationIssue(
                    code="INVALID_IMAGE",
                    message=f"Could not read image: {e}",
                    field="image",
                ))
        if issues:
            raise ConfigurationInvalid(issues)

        self.secret = secret
        self.grid_size = grid_size
        self.puzzle_image_src = image_src
        self.tiles = shuffle_tiles(grid_size, self._rng)
        self.initial_tiles = [tile.model_copy() for tile in self.tiles]
        self.moves = 0
        self.phase = Phase.PLAYING
        self._check_win()

    @property
    def blank_id(self) -> int:
        return self.grid_size * self.grid_size - 1

    @property
    def is_solved(self) -> bool:
        return self.phase == Phase.SOLVED

    @property
    def revealed_secret(self) -> Optional[Secret]:
        return self.secret if self.is_solved else None

    def tile(self, tile_id: int) -> Tile:
        for tile in self.tiles:
            if tile.id == tile_id:
                return tile
        raise KeyError(f"No tile with id {tile_id}")

    def click(self, tile_id: int) -> bool:
        """
        Slide a tile into the blank if they are orthogonally adjacent.

        Returns:
            True if the tile moved. Non-adjacent clicks and clicks after the
            puzzle is solved are ignored and return False.
        """
        if self.phase == Phase.CONFIGURING:
            raise PhaseError("Puzzle has not been started")
        if self.phase != Phase.PLAYING:
            return False

        clicked = self.tile(tile_id)
        blank = self.tile(self.blank_id)
        if clicked.id == blank.id:
            return False
        if not is_adjacent(blank.current_index, clicked.current_index, self.grid_size):
            return False

        blank.current_index, clicked.current_index = clicked.current_index, blank.current_index
        self.moves += 1
        self._check_win()
        return True

    def _check_win(self) -> None:
        if all_in_place(self.tiles):
            self.phase = Phase.SOLVED

    def tiles_in_position_order(self) -> List[Tile]:
        return sorted(self.tiles, key=lambda t: t.current_index)

    def board(self) -> List[List[Optional[int]]]:
        """Original index shown at each position, None for the blank."""
        rows: List[List[Optional[int]]] = []
        ordered = self.tiles_in_position_order()
        for r in range(self.grid_size):
            row = ordered[r * self.grid_size:(r + 1) * self.grid_size]
            rows.append([None if t.id == self.blank_id else t.original_index for t in row])
        return rows

    def export_state(self) -> Dict:
        """Snapshot the starting arrangement so every opening replays it."""
        if self.phase == Phase.CONFIGURING:
            raise PhaseError("Nothing to export before the puzzle is started")
        return SlidingTileState(
            puzzle_image_src=self.puzzle_image_src,
            grid_size=self.grid_size,
            initial_tiles=self.initial_tiles,
            secret=self.secret,
        ).to_payload()

    @classmethod
    def from_export(cls, payload: Dict) -> "SlidingTilePuzzle":
        state = SlidingTileState.model_validate(payload)
        puzzle = cls(
            phase=Phase.PLAYING,
            secret=state.secret,
            grid_size=state.grid_size,
            puzzle_image_src=state.puzzle_image_src,
            tiles=[tile.model_copy() for tile in state.initial_tiles],
            initial_tiles=state.initial_tiles,
        )
        puzzle._check_win()
        return puzzle
