"""Exception hierarchy shared by the core and the I/O layers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from musketeers.core.enums import MoveError
    from musketeers.core.move import Move


class MusketeersError(Exception):
    """Base class for every error raised by this package."""


class IllegalMoveError(MusketeersError):
    """A proposed move was rejected by the validator."""

    def __init__(self, move: Move, reason: MoveError) -> None:
        super().__init__(f"{move}: {reason.message}")
        self.move = move
        self.reason = reason


class MalformedInputError(MusketeersError, ValueError):
    """Move-input text does not parse into position and direction."""


class BoardFileError(MusketeersError):
    """Reading or writing a board file failed."""


class LoadError(BoardFileError):
    """A board file is missing, unreadable or malformed."""


class SaveError(BoardFileError):
    """A board file could not be written."""
