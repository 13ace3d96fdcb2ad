"""Textual widget that paints the board and reports clicks.

The widget is the board's drawing surface: it implements the path-based
``RenderSurface`` API on top of a grid of terminal cells.  Board pixels are
scaled so the whole surface fits the widget; terminal cells are treated as
twice as tall as they are wide.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

from rich.console import Console, ConsoleOptions, RenderResult
from rich.measure import Measurement
from rich.style import Style
from rich.text import Text
from textual import events
from textual.binding import Binding
from textual.message import Message
from textual.widget import Widget

from hexboard.session import BoardSession, ClickResult
from hexboard.surface import FillRule, SurfaceUnavailableError, paint_board
from hexboard.tile import Palette, get_palette

Point = Tuple[float, float]
Poly = List[Point]

CELL_ASPECT = 2.0


@dataclass
class _Cell:
    char: str = " "
    fg: str | None = None
    bg: str | None = None


class CellCanvas:
    """Fixed-size grid of styled character cells renderable by Rich."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._grid: list[list[_Cell]] = [[_Cell() for _ in range(width)] for _ in range(height)]

    def cell(self, x: int, y: int) -> _Cell | None:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self._grid[y][x]
        return None

    def set_background(self, x: int, y: int, colour: str) -> None:
        cell = self.cell(x, y)
        if cell is not None:
            cell.char = " "
            cell.bg = colour

    def text(self, x: int, y: int, value: str, *, colour: str | None = None) -> None:
        """Write ``value`` keeping each cell's background."""

        for offset, char in enumerate(value):
            cell = self.cell(x + offset, y)
            if cell is not None:
                cell.char = char
                cell.fg = colour

    def line(self, start: Point, end: Point, *, colour: str) -> None:
        x1, y1 = int(round(start[0])), int(round(start[1]))
        x2, y2 = int(round(end[0])), int(round(end[1]))

        dx = abs(x2 - x1)
        dy = abs(y2 - y1)
        sx = 1 if x1 < x2 else -1
        sy = 1 if y1 < y2 else -1
        err = dx - dy

        while True:
            self.set_background(x1, y1, colour)
            if x1 == x2 and y1 == y2:
                break
            e2 = err * 2
            if e2 > -dy:
                err -= dy
                x1 += sx
            if e2 < dx:
                err += dx
                y1 += sy

    def plain_rows(self) -> list[str]:
        return ["".join(cell.char for cell in row) for row in self._grid]

    def __rich_console__(
        self, console: Console, options: ConsoleOptions
    ) -> RenderResult:  # pragma: no cover - exercised via Textual render
        for row in self._grid:
            text = Text()
            for cell in row:
                style = Style(color=cell.fg, bgcolor=cell.bg) if (cell.fg or cell.bg) else None
                text.append(cell.char, style=style)
            yield text

    def __rich_measure__(
        self, console: Console, options: ConsoleOptions
    ) -> Measurement:  # pragma: no cover - trivial
        return Measurement(self.width, self.width)


def point_in_polygon(x: float, y: float, poly: Poly, rule: FillRule = FillRule.NONZERO) -> bool:
    """Return True if ``(x, y)`` is inside ``poly`` under ``rule``."""

    winding = 0
    crossings = 0
    total = len(poly)
    for index in range(total):
        x1, y1 = poly[index]
        x2, y2 = poly[(index + 1) % total]
        if y1 <= y < y2 or y2 <= y < y1:
            cross = (x2 - x1) * (y - y1) - (x - x1) * (y2 - y1)
            if (cross > 0) == (y2 > y1) and cross != 0:
                crossings += 1
                winding += 1 if y2 > y1 else -1
    if rule is FillRule.EVENODD:
        return crossings % 2 == 1
    return winding != 0


def fit_scale(surface_size: tuple[float, float], width: int, height: int) -> Point:
    """Return ``(pixels per column, pixels per row)`` fitting the surface."""

    if width <= 0 or height <= 0:
        raise SurfaceUnavailableError(f"Board canvas has no drawable area ({width}x{height})")
    surface_w, surface_h = surface_size
    per_column = max(surface_w / width, surface_h / (height * CELL_ASPECT))
    return per_column, per_column * CELL_ASPECT


class HexCanvas(Widget):
    """Hex board drawn on a cell canvas with click support."""

    BINDINGS = [
        Binding("l", "toggle_labels", "Labels"),
    ]

    DEFAULT_CSS = """
    HexCanvas {
        background: #141414;
        height: 100%;
        width: 100%;
    }
    """

    def __init__(
        self,
        session: BoardSession,
        *,
        palette: Palette | str = "classic",
        label_spacing: int = 1,
        id: str | None = "board",
    ) -> None:
        super().__init__(id=id)
        self.session = session
        self.palette = get_palette(palette) if isinstance(palette, str) else palette
        self.label_spacing = label_spacing
        self.show_labels = True
        self._canvas: CellCanvas | None = None
        self._scale: Point = (1.0, CELL_ASPECT)
        self._path: Poly = []
        self._stroke_colour = self.palette.stroke
        self._fill_colour = self.palette.shade_a

    # ------------------------------------------------------------------
    # RenderSurface

    def _to_cell(self, x: float, y: float) -> Point:
        sx, sy = self._scale
        return x / sx, y / sy

    def _require_canvas(self) -> CellCanvas:
        if self._canvas is None:
            raise SurfaceUnavailableError("Drawing outside of a paint pass")
        return self._canvas

    def begin_path(self) -> None:
        self._path = []

    def move_to(self, x: float, y: float) -> None:
        self._path = [(x, y)]

    def line_to(self, x: float, y: float) -> None:
        self._path.append((x, y))

    def set_stroke_color(self, color: str) -> None:
        self._stroke_colour = color

    def set_fill_color(self, color: str) -> None:
        self._fill_colour = color

    def fill(self, rule: FillRule = FillRule.NONZERO) -> None:
        canvas = self._require_canvas()
        if len(self._path) < 3:
            return
        sx, sy = self._scale
        cells = [self._to_cell(x, y) for x, y in self._path]
        min_x = int(max(0, math.floor(min(point[0] for point in cells))))
        max_x = int(min(canvas.width - 1, math.ceil(max(point[0] for point in cells))))
        min_y = int(max(0, math.floor(min(point[1] for point in cells))))
        max_y = int(min(canvas.height - 1, math.ceil(max(point[1] for point in cells))))
        for y in range(min_y, max_y + 1):
            for x in range(min_x, max_x + 1):
                if point_in_polygon((x + 0.5) * sx, (y + 0.5) * sy, self._path, rule):
                    canvas.set_background(x, y, self._fill_colour)

    def stroke(self) -> None:
        canvas = self._require_canvas()
        cells = [self._to_cell(x, y) for x, y in self._path]
        for start, end in zip(cells, cells[1:]):
            canvas.line(start, end, colour=self._stroke_colour)

    def fill_text(self, text: str, x: float, y: float) -> None:
        canvas = self._require_canvas()
        cx, cy = self._to_cell(x, y)
        canvas.text(int(cx - len(text) / 2), int(cy), text, colour=self._fill_colour)

    # ------------------------------------------------------------------
    # Rendering

    def paint(self, width: int, height: int) -> CellCanvas:
        """Paint the board onto a fresh ``width`` x ``height`` canvas."""

        self._scale = fit_scale(self.session.surface_size, width, height)
        self._canvas = CellCanvas(width, height)
        paint_board(
            self,
            self.session.board,
            self.session.metrics,
            self.palette,
            label_spacing=self.label_spacing,
            show_labels=self.show_labels,
        )
        return self._canvas

    def render(self) -> CellCanvas:
        width, height = self.size
        if width <= 0 or height <= 0:
            # Not laid out yet; the app checks for a usable area after mount.
            return CellCanvas(0, 0)
        return self.paint(width, height)

    def action_toggle_labels(self) -> None:
        self.show_labels = not self.show_labels
        self.refresh()

    # ------------------------------------------------------------------
    # Input

    def cell_to_pixel(self, x: int, y: int) -> Point:
        """Surface pixel under the centre of terminal cell ``(x, y)``."""

        sx, sy = self._scale
        return (float(x) + 0.5) * sx, (float(y) + 0.5) * sy

    def handle_click(self, x: int, y: int) -> ClickResult:
        px, py = self.cell_to_pixel(x, y)
        result = self.session.on_click(px, py)
        self.post_message(self.HexClicked(result))
        if result.accepted:
            self.refresh()
        return result

    async def on_click(self, event: events.Click) -> None:  # pragma: no cover - UI glue
        self.handle_click(event.x, event.y)

    class HexClicked(Message):
        """Posted for every click, whether or not it landed on a tile."""

        def __init__(self, result: ClickResult) -> None:
            super().__init__()
            self.result = result


__all__ = ["CELL_ASPECT", "CellCanvas", "HexCanvas", "fit_scale", "point_in_polygon"]
