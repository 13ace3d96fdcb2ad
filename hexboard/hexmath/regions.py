"""Membership and sizing helpers for hexagon-shaped boards."""

from __future__ import annotations

import math


def _check_side(side: int) -> None:
    if side < 1:
        raise ValueError(f"side must be at least 1, got {side!r}")


def board_size_for_side(side: int) -> int:
    """Number of cells across the board through its centre."""

    _check_side(side)
    return 2 * side - 1


def board_bounds(side: int) -> tuple[int, int]:
    """Return ``(min_q, max_q)``; valid components satisfy ``min_q <= c < max_q``."""

    board_size = board_size_for_side(side)
    max_q = math.ceil(board_size / 2)
    min_q = max_q - board_size
    return min_q, max_q


def is_in_hex_board(q: int, r: int, side: int) -> bool:
    min_q, max_q = board_bounds(side)
    return min_q <= q < max_q and min_q <= r < max_q and -max_q < q + r < max_q


def hex_count(side: int) -> int:
    """Centred hexagonal number for ``side``."""

    _check_side(side)
    return 3 * side * side - 3 * side + 1
