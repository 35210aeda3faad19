"""Move value objects."""

from __future__ import annotations

from dataclasses import dataclass

from musketeers.core.enums import CellContent, Direction
from musketeers.core.types import Position, in_bounds, position_name


@dataclass(frozen=True, slots=True)
class Move:
    """A move request: the piece at *position* steps once in *direction*.

    Nothing about legality is known yet; see ``MoveValidator.validate``.
    """

    position: Position
    direction: Direction

    def __str__(self) -> str:
        row, col = self.position
        if in_bounds(row, col):
            origin = position_name(self.position)
        else:
            origin = f"({row}, {col})"
        letter = getattr(self.direction, "letter", str(self.direction))
        return f"{origin}={letter}"


@dataclass(frozen=True, slots=True)
class ValidatedMove:
    """A move that passed validation, with its destination resolved."""

    source: Position
    destination: Position
    piece: CellContent

    @property
    def is_capture(self) -> bool:
        """Musketeer moves always capture the enemy on the destination."""
        return self.piece == CellContent.MUSKETEER

    def __str__(self) -> str:
        return f"{position_name(self.source)}{position_name(self.destination)}"
