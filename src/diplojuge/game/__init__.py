from .adjudicator import Adjudicator, Pawn
from .board import Board, Location, LocationType, PawnType, Player, Relation
from .errors import (
    AdjudicatorError,
    BoardError,
    CenterAlreadyOwnedError,
    DuplicateLocationError,
    DuplicateRelationError,
    LocationOccupiedError,
    NotACenterError,
    SelfAdjacencyError,
    UnknownLocationError,
)
from .map import build_board

__all__ = [
    "Adjudicator",
    "Pawn",
    "Board",
    "Location",
    "LocationType",
    "PawnType",
    "Player",
    "Relation",
    "build_board",
    "AdjudicatorError",
    "BoardError",
    "CenterAlreadyOwnedError",
    "DuplicateLocationError",
    "DuplicateRelationError",
    "LocationOccupiedError",
    "NotACenterError",
    "SelfAdjacencyError",
    "UnknownLocationError",
]
