from .coords import Axial, Cube, Point
from .conversions import (
    BASIS_ANGLE,
    axial_to_pixel,
    cube_round,
    cube_to_axial,
    effective_tile_x,
    hex_vertices,
    pixel_to_axial,
    pixel_to_axial_fractional,
    pixel_to_axial_nearest,
    round_half_away,
)
from .regions import board_bounds, board_size_for_side, hex_count, is_in_hex_board

__all__ = [
    "Axial",
    "Cube",
    "Point",
    "BASIS_ANGLE",
    "axial_to_pixel",
    "cube_round",
    "cube_to_axial",
    "effective_tile_x",
    "hex_vertices",
    "pixel_to_axial",
    "pixel_to_axial_fractional",
    "pixel_to_axial_nearest",
    "round_half_away",
    "board_bounds",
    "board_size_for_side",
    "hex_count",
    "is_in_hex_board",
]
