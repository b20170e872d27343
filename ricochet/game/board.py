from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

Position = Tuple[int, int]

MAX_BOARD_SIZE = 16


class CellType(Enum):
    EMPTY = 0
    WALL = 1
    START = 2
    GOAL = 3


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


CELL_SYMBOLS = {
    CellType.EMPTY: ".",
    CellType.WALL: "#",
    CellType.START: "+",
    CellType.GOAL: "o",
}


class Board:
    """Static puzzle grid.

    The grid is a read-only numpy array indexed ``grid[y, x]``. A board never
    changes after construction, so a single instance is shared by every state
    of a search.
    """

    def __init__(self, width: int, height: int, grid: Optional[np.ndarray] = None):
        if not (1 <= width <= MAX_BOARD_SIZE and 1 <= height <= MAX_BOARD_SIZE):
            raise ValueError(
                f"Board dimensions must be within 1..{MAX_BOARD_SIZE}, "
                f"got {width}x{height}"
            )
        self.width = width
        self.height = height

        if grid is None:
            grid = np.zeros((height, width), dtype=np.int8)
        else:
            grid = np.array(grid, dtype=np.int8)
            if grid.shape != (height, width):
                raise ValueError(
                    f"Grid shape {grid.shape} does not match board {width}x{height}"
                )
            valid = {cell_type.value for cell_type in CellType}
            if not set(np.unique(grid).tolist()) <= valid:
                raise ValueError("Grid contains unknown cell type values")
        grid.setflags(write=False)
        self.grid = grid

        # Hot-path lookups for the move generator
        self._walls = frozenset(self.find_cells_by_type(CellType.WALL))
        self._goals = frozenset(self.find_cells_by_type(CellType.GOAL))
        starts = self.find_cells_by_type(CellType.START)
        self._start = starts[0] if len(starts) == 1 else None

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[CellType]]) -> "Board":
        height = len(rows)
        width = len(rows[0]) if rows else 0
        grid = [[cell.value for cell in row] for row in rows]
        return cls(width, height, grid)

    # -- queries --------------------------------------------------------------

    def dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    def in_bounds(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def is_valid_position(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_type(self, position: Position) -> CellType:
        x, y = position
        return self.get_cell_type(x, y)

    def get_cell_type(self, x: int, y: int) -> Optional[CellType]:
        if not self.is_valid_position(x, y):
            return None
        return CellType(int(self.grid[y, x]))

    def is_wall(self, position: Position) -> bool:
        return position in self._walls

    def is_goal(self, position: Position) -> bool:
        return position in self._goals

    def is_start(self, position: Position) -> bool:
        return position == self._start

    def is_blocked(self, position: Position) -> bool:
        """True for cells no piece can enter: off the board or a wall."""
        return not self.in_bounds(position) or position in self._walls

    @property
    def start_position(self) -> Optional[Position]:
        return self._start

    @property
    def goal_positions(self) -> List[Position]:
        return sorted(self._goals, key=lambda p: (p[1], p[0]))

    @property
    def wall_positions(self) -> List[Position]:
        return sorted(self._walls, key=lambda p: (p[1], p[0]))

    def find_cells_by_type(self, cell_type: CellType) -> List[Position]:
        ys, xs = np.nonzero(self.grid == cell_type.value)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def count_cells(self, cell_type: CellType) -> int:
        return int(np.count_nonzero(self.grid == cell_type.value))

    # -- serialization --------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "grid": self.grid.tolist(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Board":
        return cls(data["width"], data["height"], data["grid"])

    def with_cells(self, cells: Iterable[Tuple[Position, CellType]]) -> "Board":
        """Return a new board with the given cells overwritten."""
        grid = self.grid.copy()
        for (x, y), cell_type in cells:
            if not self.is_valid_position(x, y):
                raise ValueError(f"Cell ({x}, {y}) is outside the board")
            grid[y, x] = cell_type.value
        return Board(self.width, self.height, grid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.grid, other.grid)
        )

    def __hash__(self) -> int:
        return hash((self.width, self.height, self.grid.tobytes()))

    def __str__(self) -> str:
        result = []
        for y in range(self.height):
            row = [CELL_SYMBOLS[self.get_cell_type(x, y)] for x in range(self.width)]
            result.append("".join(row))
        return "\n".join(result)

    def __repr__(self) -> str:
        return f"Board({self.width}x{self.height})"
