"""Board generation, lookup and pixel metrics.

A board is the set of hexes within ``side - 1`` steps of the origin, i.e. a
"hexagon of hexagons".  Boards are immutable; a change of size produces a new
board rather than editing the existing one.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .hexmath import (
    Axial,
    Point,
    board_bounds,
    board_size_for_side,
    effective_tile_x,
    is_in_hex_board,
)
from .tile import HexTile


@dataclass(frozen=True)
class Board:
    """Ordered, immutable collection of tiles."""

    side: int
    _tiles: tuple[HexTile, ...]
    _index: dict[Axial, HexTile] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: dict[Axial, HexTile] = {}
        for tile in self._tiles:
            if tile.coord in index:
                raise ValueError(f"Duplicate tile at {tile.coord}")
            if not is_in_hex_board(tile.q, tile.r, self.side):
                raise ValueError(f"Tile {tile.coord} lies outside a side-{self.side} board")
            index[tile.coord] = tile
        object.__setattr__(self, "_index", index)

    def tiles(self) -> tuple[HexTile, ...]:
        return self._tiles

    def tile_at(self, q: int, r: int) -> HexTile | None:
        return self._index.get(Axial(q, r))

    def __contains__(self, item: object) -> bool:
        if isinstance(item, HexTile):
            item = item.coord
        elif isinstance(item, tuple) and len(item) == 2:
            item = Axial(*item)
        return item in self._index

    def __iter__(self) -> Iterator[HexTile]:
        return iter(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)


class BoardLayout:
    """Builds boards in nested-loop order (``q`` outer, ``r`` inner)."""

    @staticmethod
    def coordinates(side: int) -> Iterator[Axial]:
        min_q, max_q = board_bounds(side)
        for q in range(min_q, max_q):
            for r in range(min_q, max_q):
                if is_in_hex_board(q, r, side):
                    yield Axial(q, r)

    @classmethod
    def generate(cls, side: int) -> Board:
        return Board(side, tuple(HexTile(coord) for coord in cls.coordinates(side)))


@dataclass(frozen=True)
class BoardMetrics:
    """Pixel dimensions derived from the tile size and board side."""

    tile_size: float
    side: int

    def __post_init__(self) -> None:
        # Validate eagerly so a bad configuration fails before first paint.
        effective_tile_x(self.tile_size)
        board_size_for_side(self.side)

    @property
    def effective_tile_x(self) -> float:
        return effective_tile_x(self.tile_size)

    @property
    def board_size(self) -> int:
        return board_size_for_side(self.side)

    @property
    def half_board_width(self) -> float:
        return self.effective_tile_x * self.board_size

    @property
    def margin(self) -> float:
        return self.effective_tile_x

    @property
    def origin(self) -> Point:
        """Surface pixel position of axial ``(0, 0)``."""

        offset = self.margin + self.half_board_width
        return offset, offset

    @property
    def surface_size(self) -> tuple[float, float]:
        extent = 2.0 * self.half_board_width + 2.0 * self.margin
        return extent, extent

    def to_surface(self, x: float, y: float) -> Point:
        ox, oy = self.origin
        return x + ox, y + oy

    def to_board(self, px: float, py: float) -> Point:
        ox, oy = self.origin
        return px - ox, py - oy


__all__ = ["Board", "BoardLayout", "BoardMetrics"]
