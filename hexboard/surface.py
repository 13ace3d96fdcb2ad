"""Drawing-surface contract and the routines that paint the board onto it."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from .board import Board, BoardMetrics
from .tile import HexTile, Palette


class FillRule(Enum):
    NONZERO = "nonzero"
    EVENODD = "evenodd"


class RenderSurface(Protocol):
    """Minimal path-based 2D drawing API consumed by the painters."""

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def stroke(self) -> None: ...

    def fill(self, rule: FillRule = FillRule.NONZERO) -> None: ...

    def set_stroke_color(self, color: str) -> None: ...

    def set_fill_color(self, color: str) -> None: ...

    def fill_text(self, text: str, x: float, y: float) -> None:
        """Draw ``text`` centred on ``(x, y)`` in the current fill colour."""
        ...


class SurfaceUnavailableError(RuntimeError):
    """Raised when no usable drawing surface can be acquired."""


def paint_tile(
    surface: RenderSurface,
    tile: HexTile,
    metrics: BoardMetrics,
    palette: Palette,
    *,
    label_spacing: int = 1,
    show_label: bool = True,
) -> None:
    """Paint one tile.

    The fill has to land before the stroke, otherwise the fill covers the
    outline.  The label is drawn last, centred on the tile.
    """

    points = [metrics.to_surface(x, y) for x, y in tile.outline(metrics.tile_size)]
    surface.begin_path()
    surface.move_to(*points[0])
    for x, y in points[1:]:
        surface.line_to(x, y)
    surface.line_to(*points[0])

    surface.set_fill_color(palette.fill_for(tile))
    surface.fill(FillRule.NONZERO)
    surface.stroke()

    if show_label:
        text = tile.label(label_spacing)
        cx, cy = metrics.to_surface(*tile.center(metrics.tile_size))
        surface.set_fill_color(palette.label)
        surface.fill_text(text, cx, cy)


def paint_board(
    surface: RenderSurface,
    board: Board,
    metrics: BoardMetrics,
    palette: Palette,
    *,
    label_spacing: int = 1,
    show_labels: bool = True,
) -> int:
    """Paint every tile in generation order and return the number painted."""

    surface.set_stroke_color(palette.stroke)
    painted = 0
    for tile in board.tiles():
        paint_tile(
            surface,
            tile,
            metrics,
            palette,
            label_spacing=label_spacing,
            show_label=show_labels,
        )
        painted += 1
    return painted


__all__ = [
    "FillRule",
    "RenderSurface",
    "SurfaceUnavailableError",
    "paint_board",
    "paint_tile",
]
