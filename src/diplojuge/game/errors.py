"""
Board and ledger errors.

Every validation failure is raised to the immediate caller. The exceptions
keep their arguments as attributes so an orchestrator can inspect them
without parsing the message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .adjudicator import Pawn
    from .board import PawnType, Player


class BoardError(Exception):
    """Base exception for board validation failures."""

    pass


class UnknownLocationError(BoardError):
    """Raised when a location name is not registered on the board."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Location {name} does not exist.")


class SelfAdjacencyError(BoardError):
    """Raised when a relation would connect a location to itself."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Trying to define a self relation {name} <-> {name}.")


class DuplicateRelationError(BoardError):
    """Raised when an equivalent relation is already on the board."""

    def __init__(self, location_a: str, location_b: str, pawn_type: PawnType):
        self.location_a = location_a
        self.location_b = location_b
        self.pawn_type = pawn_type
        super().__init__(
            f"The relation {location_a} <-> {location_b} for {pawn_type.value} already exists."
        )


class DuplicateLocationError(BoardError):
    """Raised in strict mode when a location name is added twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Location {name} is already defined.")


class NotACenterError(BoardError):
    """Raised when ownership is assigned to a location that is not a center."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Location {name} is not a supply center.")


class CenterAlreadyOwnedError(BoardError):
    """Raised in strict mode when a center is handed to a different player."""

    def __init__(self, name: str, owner: Player):
        self.name = name
        self.owner = owner
        super().__init__(f"Center {name} is already owned by {owner.name}.")


class AdjudicatorError(BoardError):
    """Base exception for pawn ledger failures."""

    pass


class LocationOccupiedError(AdjudicatorError):
    """Raised when a pawn is placed on an occupied location."""

    def __init__(self, name: str, pawn: Pawn):
        self.name = name
        self.pawn = pawn
        super().__init__(f"Location {name} already hosts a pawn {pawn}.")
