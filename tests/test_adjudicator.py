"""
Tests for the pawn ledger and the center control read through it.
"""

import numpy as np
import pytest

from diplojuge.game import (
    Adjudicator,
    Location,
    LocationOccupiedError,
    LocationType,
    NotACenterError,
    Pawn,
    PawnType,
    Player,
    UnknownLocationError,
)


class TestPlacePawn:
    def test_place_and_query(self, adjudicator: Adjudicator):
        adjudicator.place_pawn("par", Pawn(PawnType.ARMY, Player.FR))

        assert adjudicator.has_pawn("par")
        assert not adjudicator.has_pawn("bre")
        assert adjudicator.get_pawn("par") == Pawn(PawnType.ARMY, Player.FR)
        assert adjudicator.get_pawn("bre") is None

    def test_unknown_location(self, adjudicator: Adjudicator):
        with pytest.raises(UnknownLocationError) as exc_info:
            adjudicator.place_pawn("xyz", Pawn(PawnType.ARMY, Player.FR))
        assert exc_info.value.name == "xyz"
        assert not adjudicator.has_pawn("xyz")

    def test_occupied(self, adjudicator: Adjudicator):
        first = Pawn(PawnType.FLEET, Player.GB)
        adjudicator.place_pawn("man", first)

        with pytest.raises(LocationOccupiedError) as exc_info:
            adjudicator.place_pawn("man", Pawn(PawnType.FLEET, Player.FR))
        assert exc_info.value.name == "man"
        assert exc_info.value.pawn == first
        assert "fleet (GB)" in str(exc_info.value)
        assert adjudicator.has_pawn("man")
        assert adjudicator.get_pawn("man") == first

    def test_pawns_of(self, adjudicator: Adjudicator):
        adjudicator.place_pawn("par", Pawn(PawnType.ARMY, Player.FR))
        adjudicator.place_pawn("bre", Pawn(PawnType.FLEET, Player.FR))
        adjudicator.place_pawn("man", Pawn(PawnType.FLEET, Player.GB))

        assert sorted(adjudicator.pawns_of(Player.FR)) == ["bre", "par"]
        assert list(adjudicator.pawns_of(Player.GB)) == ["man"]
        assert adjudicator.pawns_of(Player.RU) == {}

    def test_pawns_view_is_read_only(self, adjudicator: Adjudicator):
        with pytest.raises(TypeError):
            adjudicator.pawns["par"] = Pawn(PawnType.ARMY, Player.FR)


class TestCenters:
    def test_assign_records_controller(self, adjudicator: Adjudicator):
        adjudicator.assign_center("par", Player.FR)

        assert adjudicator.center_owner("par") is Player.FR
        assert adjudicator.board.get_location("par").owner is Player.FR
        assert adjudicator.center_owner("bre") is None

    def test_reassign_overwrites(self, adjudicator: Adjudicator):
        adjudicator.assign_center("bre", Player.FR)
        adjudicator.assign_center("bre", Player.GB)

        assert adjudicator.center_owner("bre") is Player.GB
        assert adjudicator.centers_of(Player.FR) == []
        assert adjudicator.centers_of(Player.GB) == ["bre"]

    def test_not_a_center_leaves_owner_unset(self, adjudicator: Adjudicator):
        with pytest.raises(NotACenterError):
            adjudicator.assign_center("man", Player.GB)
        assert adjudicator.center_owner("man") is None

    def test_unknown_center(self, adjudicator: Adjudicator):
        with pytest.raises(UnknownLocationError):
            adjudicator.assign_center("xyz", Player.GB)

    def test_follows_board_reassignment(self, adjudicator: Adjudicator):
        adjudicator.assign_center("par", Player.FR)
        adjudicator.board.assign_center("par", Player.GB)

        assert adjudicator.center_owner("par") is Player.GB
        assert adjudicator.centers_of(Player.FR) == []
        assert adjudicator.centers_of(Player.GB) == ["par"]

    def test_follows_location_replacement(self, adjudicator: Adjudicator):
        adjudicator.assign_center("par", Player.FR)
        adjudicator.board.add_location(Location("par", False, LocationType.LAND))

        assert adjudicator.center_owner("par") is None
        assert adjudicator.centers_of(Player.FR) == []
        encoded = adjudicator.encode_state()
        center_plane = encoded[7 * 4 : 14 * 4]
        assert not center_plane.any()


class TestEncodeState:
    def test_shape(self, adjudicator: Adjudicator):
        encoded = adjudicator.encode_state()
        # 7 pawn owner planes + 7 center owner planes + 2 pawn type planes
        assert encoded.shape == ((7 + 7 + 2) * 4,)
        assert encoded.dtype == np.float32
        assert not encoded.any()

    def test_planes(self, adjudicator: Adjudicator):
        adjudicator.place_pawn("par", Pawn(PawnType.ARMY, Player.FR))
        adjudicator.assign_center("bre", Player.GB)
        encoded = adjudicator.encode_state()

        # sorted locations: bre, man, par, pic
        pawn_plane = encoded[: 7 * 4].reshape(7, 4)
        center_plane = encoded[7 * 4 : 14 * 4].reshape(7, 4)
        type_plane = encoded[14 * 4 :].reshape(2, 4)
        players = list(Player)

        assert pawn_plane[players.index(Player.FR), 2] == 1.0
        assert pawn_plane.sum() == 1.0
        assert center_plane[players.index(Player.GB), 0] == 1.0
        assert center_plane.sum() == 1.0
        assert type_plane[0, 2] == 1.0
        assert type_plane.sum() == 1.0
