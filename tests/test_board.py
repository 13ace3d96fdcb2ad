from __future__ import annotations

import math

import pytest

from hexboard.board import Board, BoardLayout, BoardMetrics
from hexboard.hexmath import Axial, hex_count, is_in_hex_board
from hexboard.tile import HexTile

COS30 = math.cos(math.pi / 6)


@pytest.mark.parametrize("side", [1, 2, 3, 4, 7, 10])
def test_generated_tile_count_matches_hex_number(side):
    board = BoardLayout.generate(side)
    assert len(board.tiles()) == 3 * side * side - 3 * side + 1 == hex_count(side)


def test_side_seven_has_127_tiles():
    assert len(BoardLayout.generate(7)) == 127


def test_side_one_is_single_origin_tile():
    board = BoardLayout.generate(1)
    assert [tile.coord for tile in board.tiles()] == [Axial(0, 0)]


def test_every_tile_passes_membership_and_is_unique():
    board = BoardLayout.generate(7)
    coords = [tile.coord for tile in board.tiles()]
    assert len(set(coords)) == len(coords)
    assert all(is_in_hex_board(c.q, c.r, 7) for c in coords)


def test_generation_order_is_q_outer_r_inner():
    coords = [tile.coord.as_tuple() for tile in BoardLayout.generate(2).tiles()]
    assert coords == [(-1, 0), (-1, 1), (0, -1), (0, 0), (0, 1), (1, -1), (1, 0)]


def test_tiles_are_materialised_and_reiterable():
    board = BoardLayout.generate(3)
    assert isinstance(board.tiles(), tuple)
    assert list(board) == list(board) == list(board.tiles())


def test_tile_lookup_and_membership():
    board = BoardLayout.generate(7)
    assert board.tile_at(0, 0) == HexTile.at(0, 0)
    assert board.tile_at(6, 1) is None
    assert (3, -2) in board
    assert Axial(-6, 6) in board
    assert HexTile.at(7, 0) not in board
    assert "0 0" not in board


def test_board_rejects_duplicates_and_off_board_tiles():
    with pytest.raises(ValueError, match="Duplicate"):
        Board(2, (HexTile.at(0, 0), HexTile.at(0, 0)))
    with pytest.raises(ValueError, match="outside"):
        Board(2, (HexTile.at(2, 0),))


def test_metrics_for_reference_board():
    metrics = BoardMetrics(32.0, 7)
    assert metrics.effective_tile_x == pytest.approx(32 * COS30)
    assert metrics.board_size == 13
    assert metrics.half_board_width == pytest.approx(32 * COS30 * 13)
    assert metrics.margin == pytest.approx(32 * COS30)
    width, height = metrics.surface_size
    assert width == height == pytest.approx(28 * 32 * COS30)
    assert 775 <= width < 777


def test_metrics_origin_is_surface_centre():
    metrics = BoardMetrics(20.0, 4)
    width, height = metrics.surface_size
    assert metrics.origin == pytest.approx((width / 2, height / 2))


def test_metrics_translations_are_inverse():
    metrics = BoardMetrics(24.0, 5)
    px, py = metrics.to_surface(13.5, -7.25)
    assert metrics.to_board(px, py) == pytest.approx((13.5, -7.25))


@pytest.mark.parametrize(("tile_size", "side"), [(0.0, 7), (-3.0, 7), (32.0, 0)])
def test_metrics_reject_invalid_configuration(tile_size, side):
    with pytest.raises(ValueError):
        BoardMetrics(tile_size, side)
