"""
Board - the map of a game: locations, typed adjacency and center ownership.

Locations are keyed by name. Relations are undirected and tagged with the
pawn type allowed to cross them, so an Army edge and a Fleet edge between
the same two locations are tracked independently. Relations hash on a
canonical key (pawn type plus the sorted endpoints) which makes existence
and duplicate checks constant time regardless of declaration order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Set, Tuple

import numpy as np

from diplojuge.config import GameConfig

from .errors import (
    CenterAlreadyOwnedError,
    DuplicateLocationError,
    DuplicateRelationError,
    NotACenterError,
    SelfAdjacencyError,
    UnknownLocationError,
)

logger = logging.getLogger(__name__)


class PawnType(Enum):
    ARMY = "army"
    FLEET = "fleet"


class LocationType(Enum):
    LAND = "land"
    COASTAL = "coastal"
    SEA = "sea"


class Player(Enum):
    """The seven great powers."""

    GB = "England"
    FR = "France"
    GE = "Germany"
    IT = "Italy"
    AH = "Austria-Hungary"
    RU = "Russia"
    TU = "Turkey"


@dataclass(frozen=True)
class Location:
    name: str
    is_center: bool
    location_type: LocationType
    owner: Player | None = None


RelationKey = Tuple[PawnType, str, str]


@dataclass(frozen=True, eq=False)
class Relation:
    location_a: str
    location_b: str
    pawn_type: PawnType

    @property
    def key(self) -> RelationKey:
        low, high = sorted((self.location_a, self.location_b))
        return (self.pawn_type, low, high)

    def connects(self, name: str) -> bool:
        return name in (self.location_a, self.location_b)

    def other(self, name: str) -> str:
        return self.location_b if name == self.location_a else self.location_a

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)


class Board:
    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config or GameConfig()
        self._locations: Dict[str, Location] = {}
        self._relations: List[Relation] = []
        self._relation_index: Set[Relation] = set()

    def __contains__(self, name: object) -> bool:
        return name in self._locations

    def __iter__(self) -> Iterator[str]:
        return iter(self._locations)

    def __len__(self) -> int:
        return len(self._locations)

    @property
    def locations(self) -> Mapping[str, Location]:
        return MappingProxyType(self._locations)

    @property
    def relations(self) -> Tuple[Relation, ...]:
        return tuple(self._relations)

    def add_location(self, location: Location) -> None:
        """
        Register a location under its name.

        A location with the same name replaces the previous one unless the
        board was configured with ``replace_locations=False``. Only a center
        may arrive with an owner already set.
        """
        if location.owner is not None and not location.is_center:
            logger.debug("Rejected owned non-center %s", location.name)
            raise NotACenterError(location.name)
        if location.name in self._locations:
            if not self.config.replace_locations:
                logger.debug("Rejected duplicate location %s", location.name)
                raise DuplicateLocationError(location.name)
            logger.debug("Replacing location %s", location.name)
        else:
            logger.debug("Added location %s", location.name)
        self._locations[location.name] = location

    def has_location(self, name: str) -> bool:
        return name in self._locations

    def check_location(self, name: str) -> None:
        if not self.has_location(name):
            logger.debug("Rejected unknown location %s", name)
            raise UnknownLocationError(name)

    def get_location(self, name: str) -> Location | None:
        return self._locations.get(name)

    def relation_exists(self, relation: Relation) -> bool:
        return relation in self._relation_index

    def add_relation(self, pawn_type: PawnType, source: str, target: str) -> Relation:
        """
        Declare that ``pawn_type`` units may move between two locations.

        Checks run in a fixed order so the reported error is deterministic:
        both locations must exist, they must differ, and no equivalent
        relation (in either direction) may already be declared.

        Raises:
            UnknownLocationError: source or target is not on the board
            SelfAdjacencyError: source and target are the same location
            DuplicateRelationError: the relation is already declared
        """
        self.check_location(source)
        self.check_location(target)
        if source == target:
            logger.debug("Rejected self relation %s", source)
            raise SelfAdjacencyError(source)

        relation = Relation(source, target, pawn_type)
        if self.relation_exists(relation):
            logger.debug("Rejected duplicate relation %s", relation.key)
            raise DuplicateRelationError(source, target, pawn_type)

        self._relations.append(relation)
        self._relation_index.add(relation)
        logger.debug("Added %s relation %s <-> %s", pawn_type.value, source, target)
        return relation

    def unit_can_move(self, pawn_type: PawnType, source: str, target: str) -> bool:
        # Reachability predicate only: unknown names are simply unreachable.
        return self.relation_exists(Relation(source, target, pawn_type))

    def neighbours(self, pawn_type: PawnType, name: str) -> List[str]:
        return sorted(
            relation.other(name)
            for relation in self._relations
            if relation.pawn_type is pawn_type and relation.connects(name)
        )

    def centers(self) -> List[str]:
        return sorted(name for name, location in self._locations.items() if location.is_center)

    def assign_center(self, name: str, player: Player) -> None:
        """
        Hand a supply center to ``player``.

        Locations are immutable, so the owner is recorded by swapping in an
        updated copy. This is the only way an owner is ever set.
        """
        self.check_location(name)
        location = self._locations[name]
        if not location.is_center:
            logger.debug("Rejected ownership of non-center %s", name)
            raise NotACenterError(name)
        previous = location.owner
        if previous is not None and previous is not player:
            if not self.config.reassign_centers:
                logger.debug("Rejected reassignment of center %s owned by %s", name, previous.name)
                raise CenterAlreadyOwnedError(name, previous)
            logger.debug("Center %s changes hands: %s -> %s", name, previous.name, player.name)
        else:
            logger.debug("Center %s assigned to %s", name, player.name)
        self._locations[name] = replace(location, owner=player)

    def owner_of(self, name: str) -> Player | None:
        location = self._locations.get(name)
        return location.owner if location is not None else None

    def location_names(self) -> List[str]:
        return sorted(self._locations)

    def adjacency_matrix(self, pawn_type: PawnType) -> np.ndarray:
        names = self.location_names()
        index = {name: idx for idx, name in enumerate(names)}
        matrix = np.zeros((len(names), len(names)), dtype=np.int8)
        for relation in self._relations:
            if relation.pawn_type is not pawn_type:
                continue
            a = index[relation.location_a]
            b = index[relation.location_b]
            matrix[a, b] = 1
            matrix[b, a] = 1
        return matrix
