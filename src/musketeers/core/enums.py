"""Core enumerations for the Three Musketeers domain."""

from __future__ import annotations

from enum import IntEnum


class CellContent(IntEnum):
    """What a single board cell holds."""

    EMPTY = 0
    MUSKETEER = 1
    ENEMY = 2

    @property
    def symbol(self) -> str:
        """Board-file character, e.g. ``MUSKETEER`` → ``'M'``."""
        return _CELL_SYMBOLS[self]

    @classmethod
    def from_symbol(cls, char: str) -> CellContent:
        """Create cell content from a board-file character."""
        for content, symbol in _CELL_SYMBOLS.items():
            if symbol == char:
                return content
        raise ValueError(f"Invalid cell symbol: {char!r}")

    def __str__(self) -> str:
        return self.symbol


_CELL_SYMBOLS: dict[CellContent, str] = {
    CellContent.EMPTY: ".",
    CellContent.MUSKETEER: "M",
    CellContent.ENEMY: "o",
}


class Side(IntEnum):
    """The two sides; also the turn state of a game."""

    MUSKETEERS = 0
    ENEMIES = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def piece(self) -> CellContent:
        """Cell content a piece of this side occupies."""
        if self == Side.MUSKETEERS:
            return CellContent.MUSKETEER
        return CellContent.ENEMY

    @property
    def target(self) -> CellContent:
        """Cell content this side is allowed to move onto."""
        if self == Side.MUSKETEERS:
            return CellContent.ENEMY
        return CellContent.EMPTY

    def __str__(self) -> str:
        return self.name.lower()


class Direction(IntEnum):
    """Single orthogonal step."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def delta(self) -> tuple[int, int]:
        """``(row, col)`` offset of one step."""
        return _DIRECTION_DELTAS[self]

    @property
    def letter(self) -> str:
        return self.name[0]

    @classmethod
    def from_letter(cls, char: str) -> Direction:
        """Parse ``U``/``D``/``L``/``R`` (any case)."""
        for direction in cls:
            if direction.letter == char.upper():
                return direction
        raise ValueError(f"Invalid direction letter: {char!r}")


_DIRECTION_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


class GameOutcome(IntEnum):
    """Outcome of a game, always derived from the board."""

    IN_PROGRESS = 0
    MUSKETEERS_WIN = 1
    ENEMIES_WIN = 2


class MoveError(IntEnum):
    """Reasons a proposed move is rejected."""

    OUT_OF_BOUNDS = 1
    INVALID_DIRECTION = 2
    NO_PIECE_AT_SOURCE = 3
    ILLEGAL_TARGET = 4

    @property
    def message(self) -> str:
        """Human-readable explanation shown to the player."""
        return _MOVE_ERROR_MESSAGES[self]


_MOVE_ERROR_MESSAGES: dict[MoveError, str] = {
    MoveError.OUT_OF_BOUNDS: "This move gets out of the board.",
    MoveError.INVALID_DIRECTION: "Invalid direction. Use L/l, R/r, U/u, or D/d.",
    MoveError.NO_PIECE_AT_SOURCE: "There is none of your pieces at that location.",
    MoveError.ILLEGAL_TARGET: "That piece cannot move onto the target cell.",
}
