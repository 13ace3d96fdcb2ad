"""Axial <-> pixel transforms for the skewed pointy-top board layout.

The forward transform uses a fixed basis angle of 30 degrees.  Moving one
step along ``r`` shifts the centre by half a tile width horizontally, so the
inverse has to undo that skew before dividing out the tile width.
"""

from __future__ import annotations

import math

from .coords import Axial, Cube, Point

BASIS_ANGLE = math.pi / 6.0  # 30°
COS_BASIS = math.cos(BASIS_ANGLE)
VERTEX_STEP = math.pi / 3.0  # 60°


def cube_to_axial(c: Cube) -> Axial:
    return Axial(c.x, c.z)


def _check_tile_size(tile_size: float) -> None:
    if tile_size <= 0:
        raise ValueError(f"tile_size must be positive, got {tile_size!r}")


def effective_tile_x(tile_size: float) -> float:
    """Horizontal half-step between neighbouring centres."""

    _check_tile_size(tile_size)
    return tile_size * COS_BASIS


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Python's :func:`round` uses banker's rounding; cell boundaries land on
    exact halves often enough that the difference is visible when clicking.
    """

    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def axial_to_pixel(q: float, r: float, tile_size: float) -> Point:
    """Return the pixel centre of ``(q, r)`` relative to the board origin."""

    _check_tile_size(tile_size)
    qx = q * tile_size * COS_BASIS
    rx = r * tile_size * COS_BASIS
    x = 2.0 * qx + rx
    y = 2.0 * rx * COS_BASIS
    return x, y


def hex_vertices(cx: float, cy: float, tile_size: float) -> list[Point]:
    """Return the six corners of a hex centred at ``(cx, cy)``.

    The first corner sits at 30° and the rest follow in increasing angle.
    """

    _check_tile_size(tile_size)
    points: list[Point] = []
    for index in range(6):
        angle = BASIS_ANGLE + index * VERTEX_STEP
        points.append(
            (
                cx + tile_size * math.cos(angle),
                cy + tile_size * math.sin(angle),
            )
        )
    return points


def pixel_to_axial_fractional(px: float, py: float, tile_size: float) -> Point:
    """Invert :func:`axial_to_pixel` without rounding."""

    step = effective_tile_x(tile_size)
    r_px = py / (2.0 * COS_BASIS)
    q_px = (px - r_px) / 2.0
    return q_px / step, r_px / step


def pixel_to_axial(px: float, py: float, tile_size: float) -> tuple[int, int]:
    """Map a board-relative pixel to an axial coordinate.

    ``q`` and ``r`` are rounded independently.  Near cell edges this can pick
    a neighbour of the geometrically nearest hex; use
    :func:`pixel_to_axial_nearest` for exact picking.
    """

    qf, rf = pixel_to_axial_fractional(px, py, tile_size)
    return round_half_away(qf), round_half_away(rf)


def cube_round(qf: float, rf: float, sf: float) -> Cube:
    """Round fractional cube coordinates to the hex containing them."""

    qi, ri, si = round_half_away(qf), round_half_away(rf), round_half_away(sf)
    dq, dr, ds = abs(qi - qf), abs(ri - rf), abs(si - sf)
    if dq > dr and dq > ds:
        qi = -ri - si
    elif dr > ds:
        ri = -qi - si
    else:
        si = -qi - ri
    return Cube(qi, si, ri)


def pixel_to_axial_nearest(px: float, py: float, tile_size: float) -> tuple[int, int]:
    """Map a board-relative pixel to the hex whose centre is nearest."""

    qf, rf = pixel_to_axial_fractional(px, py, tile_size)
    nearest = cube_to_axial(cube_round(qf, rf, -qf - rf))
    return nearest.q, nearest.r
