from __future__ import annotations

from typing import List, Tuple

from diplojuge.config import GameConfig

from .board import Board, Location, LocationType, PawnType


LOCATIONS: List[Tuple[str, bool, LocationType]] = [
    ("par", True, LocationType.LAND),
    ("pic", False, LocationType.COASTAL),
    ("bre", True, LocationType.COASTAL),
    ("gas", False, LocationType.COASTAL),
    ("bur", False, LocationType.LAND),
    ("bel", True, LocationType.COASTAL),
    ("man", False, LocationType.SEA),
    ("mao", False, LocationType.SEA),
]

RELATIONS: List[Tuple[PawnType, str, str]] = [
    (PawnType.ARMY, "par", "pic"),
    (PawnType.ARMY, "par", "bre"),
    (PawnType.ARMY, "par", "bur"),
    (PawnType.ARMY, "par", "gas"),
    (PawnType.ARMY, "pic", "bre"),
    (PawnType.ARMY, "pic", "bur"),
    (PawnType.ARMY, "pic", "bel"),
    (PawnType.ARMY, "bre", "gas"),
    (PawnType.ARMY, "gas", "bur"),
    (PawnType.ARMY, "bur", "bel"),
    (PawnType.FLEET, "bre", "man"),
    (PawnType.FLEET, "man", "pic"),
    (PawnType.FLEET, "man", "bel"),
    (PawnType.FLEET, "man", "mao"),
    (PawnType.FLEET, "pic", "bre"),
    (PawnType.FLEET, "pic", "bel"),
    (PawnType.FLEET, "bre", "mao"),
    (PawnType.FLEET, "bre", "gas"),
    (PawnType.FLEET, "gas", "mao"),
]


def build_board(config: GameConfig | None = None) -> Board:
    board = Board(config)
    for name, is_center, location_type in LOCATIONS:
        board.add_location(Location(name, is_center, location_type))
    for pawn_type, source, target in RELATIONS:
        board.add_relation(pawn_type, source, target)
    return board
