from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple

from .board import Direction, Position

MAIN_INDEX = 0


class PieceRole(Enum):
    MAIN = "main"
    HELPER = "helper"


def bits_for(extent: int) -> int:
    """Number of bits needed to store a coordinate in ``range(extent)``."""
    return max(1, (extent - 1).bit_length())


def pack_position(position: Position, bits_y: int) -> int:
    x, y = position
    return (x << bits_y) | y


def unpack_position(packed: int, bits_y: int) -> Position:
    return packed >> bits_y, packed & ((1 << bits_y) - 1)


@dataclass(frozen=True)
class State:
    """Dynamic part of a puzzle: piece positions plus the goal flag.

    ``positions[0]`` is the main piece, the remaining entries are helpers in a
    fixed order. States are immutable values; every mutator returns a new
    instance so they can be shared freely across the search frontier.
    """

    positions: Tuple[Position, ...]
    goal_visited: bool = False

    def __post_init__(self):
        if not self.positions:
            raise ValueError("State needs at least the main piece")

    # -- accessors ------------------------------------------------------------

    @property
    def main_position(self) -> Position:
        return self.positions[MAIN_INDEX]

    @property
    def helper_positions(self) -> Tuple[Position, ...]:
        return self.positions[1:]

    @property
    def num_pieces(self) -> int:
        return len(self.positions)

    @property
    def num_helpers(self) -> int:
        return len(self.positions) - 1

    def position_of(self, index: int) -> Position:
        return self.positions[index]

    def role_of(self, index: int) -> PieceRole:
        return PieceRole.MAIN if index == MAIN_INDEX else PieceRole.HELPER

    def is_occupied(self, position: Position) -> bool:
        return position in self.positions

    # -- pure mutators --------------------------------------------------------

    def with_position(self, index: int, position: Position) -> "State":
        positions = self.positions[:index] + (position,) + self.positions[index + 1 :]
        return State(positions, self.goal_visited)

    def with_goal_visited(self) -> "State":
        if self.goal_visited:
            return self
        return State(self.positions, True)

    # -- packing --------------------------------------------------------------

    def pack(self, bits_x: int, bits_y: int) -> int:
        """Pack into one integer: pieces in order, goal flag in the lowest bit."""
        bits_per_piece = bits_x + bits_y
        key = 0
        for position in self.positions:
            key = (key << bits_per_piece) | pack_position(position, bits_y)
        return (key << 1) | int(self.goal_visited)

    @classmethod
    def unpack(
        cls, key: int, num_pieces: int, bits_x: int, bits_y: int
    ) -> "State":
        goal_visited = bool(key & 1)
        key >>= 1
        bits_per_piece = bits_x + bits_y
        mask = (1 << bits_per_piece) - 1
        positions = []
        for _ in range(num_pieces):
            positions.append(unpack_position(key & mask, bits_y))
            key >>= bits_per_piece
        return cls(tuple(reversed(positions)), goal_visited)

    # -- serialization --------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "main": list(self.main_position),
            "helpers": [list(p) for p in self.helper_positions],
            "goal_visited": self.goal_visited,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "State":
        positions = [tuple(data["main"])] + [tuple(p) for p in data.get("helpers", [])]
        return cls(tuple(positions), data.get("goal_visited", False))

    @classmethod
    def initial(cls, main: Position, helpers=()) -> "State":
        return cls((tuple(main),) + tuple(tuple(h) for h in helpers), False)


@dataclass(frozen=True)
class Move:
    """Slide of one piece in one direction."""

    piece: int
    direction: Direction

    @property
    def role(self) -> PieceRole:
        return PieceRole.MAIN if self.piece == MAIN_INDEX else PieceRole.HELPER

    @property
    def piece_name(self) -> str:
        if self.piece == MAIN_INDEX:
            return "Main"
        return f"Helper{self.piece}"

    def __str__(self) -> str:
        return f"{self.piece_name} {self.direction.name.capitalize()}"
