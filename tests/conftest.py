"""
Shared fixtures for the diplojuge test suite.
"""

import logging

import pytest

from diplojuge.game import Adjudicator, Board, Location, LocationType, PawnType


@pytest.fixture
def corner_board() -> Board:
    """
    The four-location corner of France.

        par (center, land) -- army -- pic (coastal)
             |                          |
           army                       fleet
             |                          |
        bre (center, coastal) -- fleet -- man (sea)
    """
    board = Board()
    board.add_location(Location("par", True, LocationType.LAND))
    board.add_location(Location("pic", False, LocationType.COASTAL))
    board.add_location(Location("bre", True, LocationType.COASTAL))
    board.add_location(Location("man", False, LocationType.SEA))
    board.add_relation(PawnType.ARMY, "par", "pic")
    board.add_relation(PawnType.ARMY, "par", "bre")
    board.add_relation(PawnType.FLEET, "bre", "man")
    board.add_relation(PawnType.FLEET, "man", "pic")
    return board


@pytest.fixture
def adjudicator(corner_board: Board) -> Adjudicator:
    return Adjudicator(corner_board)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Leave the package logger as configure_logging found it."""
    logger = logging.getLogger("diplojuge")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)
