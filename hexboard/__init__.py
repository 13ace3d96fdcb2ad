"""Hexagonal board geometry and click resolution."""

from .board import Board, BoardLayout, BoardMetrics
from .hexmath import Axial, axial_to_pixel, hex_vertices, is_in_hex_board, pixel_to_axial
from .session import BoardSession, ClickResult, Rounding, Store
from .surface import FillRule, RenderSurface, SurfaceUnavailableError, paint_board, paint_tile
from .tile import PALETTES, HexTile, Palette, Shade, get_palette

__all__ = [
    "Axial",
    "Board",
    "BoardLayout",
    "BoardMetrics",
    "BoardSession",
    "ClickResult",
    "FillRule",
    "HexTile",
    "PALETTES",
    "Palette",
    "RenderSurface",
    "Rounding",
    "Shade",
    "Store",
    "SurfaceUnavailableError",
    "axial_to_pixel",
    "get_palette",
    "hex_vertices",
    "is_in_hex_board",
    "paint_board",
    "paint_tile",
    "pixel_to_axial",
]
