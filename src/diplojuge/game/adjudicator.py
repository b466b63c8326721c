from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping

import numpy as np

from .board import Board, PawnType, Player
from .errors import LocationOccupiedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pawn:
    unit: PawnType
    player: Player

    def __str__(self) -> str:
        return f"{self.unit.value} ({self.player.name})"


class Adjudicator:
    """
    Pawn ledger bound to a fully built board.

    The adjudicator takes ownership of the board: callers should stop
    mutating it once it has been handed over. Every placement is validated
    against the board before the ledger is touched. Center control is read
    straight from the board, which holds the only record of it.
    """

    def __init__(self, board: Board) -> None:
        self._board = board
        self._pawns: Dict[str, Pawn] = {}

    @property
    def board(self) -> Board:
        return self._board

    @property
    def pawns(self) -> Mapping[str, Pawn]:
        return MappingProxyType(self._pawns)

    def place_pawn(self, location: str, pawn: Pawn) -> None:
        self._board.check_location(location)
        occupant = self._pawns.get(location)
        if occupant is not None:
            logger.debug("Rejected %s at %s, occupied by %s", pawn, location, occupant)
            raise LocationOccupiedError(location, occupant)
        self._pawns[location] = pawn
        logger.debug("Placed %s at %s", pawn, location)

    def has_pawn(self, location: str) -> bool:
        return location in self._pawns

    def get_pawn(self, location: str) -> Pawn | None:
        return self._pawns.get(location)

    def pawns_of(self, player: Player) -> Dict[str, Pawn]:
        return {name: pawn for name, pawn in self._pawns.items() if pawn.player is player}

    def assign_center(self, name: str, player: Player) -> None:
        self._board.assign_center(name, player)

    def center_owner(self, name: str) -> Player | None:
        return self._board.owner_of(name)

    def centers_of(self, player: Player) -> List[str]:
        return sorted(
            name for name, location in self._board.locations.items() if location.owner is player
        )

    def encode_state(self) -> np.ndarray:
        names = self._board.location_names()
        index = {name: idx for idx, name in enumerate(names)}
        players = list(Player)
        pawn_types = list(PawnType)
        num_locations = len(names)

        pawn_plane = np.zeros((len(players), num_locations), dtype=np.float32)
        center_plane = np.zeros((len(players), num_locations), dtype=np.float32)
        type_plane = np.zeros((len(pawn_types), num_locations), dtype=np.float32)
        for name, pawn in self._pawns.items():
            pawn_plane[players.index(pawn.player), index[name]] = 1.0
            type_plane[pawn_types.index(pawn.unit), index[name]] = 1.0
        for name, location in self._board.locations.items():
            if location.owner is not None:
                center_plane[players.index(location.owner), index[name]] = 1.0

        return np.concatenate(
            [
                pawn_plane.reshape(-1),
                center_plane.reshape(-1),
                type_plane.reshape(-1),
            ]
        )
