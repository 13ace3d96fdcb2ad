"""Click-to-tile resolution and the placeholder game store."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from .board import Board, BoardLayout, BoardMetrics
from .hexmath import Axial, pixel_to_axial, pixel_to_axial_nearest
from .tile import HexTile


class Rounding(Enum):
    AXIAL = "axial"  # q and r rounded independently
    CUBE = "cube"  # nearest-hex rounding

    @classmethod
    def parse(cls, value: "Rounding | str") -> "Rounding":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            known = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown rounding mode {value!r}; expected one of: {known}") from None


@dataclass(frozen=True)
class ClickResult:
    """Outcome of mapping a surface click onto the board."""

    px: float
    py: float
    coord: Axial
    tile: HexTile | None
    accepted: bool = False

    @property
    def hit(self) -> bool:
        return self.tile is not None


class Store:
    """Game state holder.

    There are no rules yet: ``play`` accepts every coordinate and changes
    nothing.  Callers repaint whenever ``play`` returns ``True``.
    """

    state = "idle"

    def play(self, coord: Axial) -> bool:
        return True


class BoardSession:
    """Owns a board, its metrics and the store for one configuration."""

    def __init__(
        self,
        *,
        tile_size: float = 32.0,
        side: int = 7,
        rounding: Rounding | str = Rounding.AXIAL,
        store: Store | None = None,
    ) -> None:
        self.metrics = BoardMetrics(float(tile_size), int(side))
        self.board: Board = BoardLayout.generate(self.metrics.side)
        self.rounding = Rounding.parse(rounding)
        self.store = store or Store()

    @property
    def surface_size(self) -> tuple[float, float]:
        return self.metrics.surface_size

    def resolve_click(self, px: float, py: float) -> ClickResult:
        bx, by = self.metrics.to_board(px, py)
        if self.rounding is Rounding.CUBE:
            q, r = pixel_to_axial_nearest(bx, by, self.metrics.tile_size)
        else:
            q, r = pixel_to_axial(bx, by, self.metrics.tile_size)
        return ClickResult(px, py, Axial(q, r), self.board.tile_at(q, r))

    def on_click(self, px: float, py: float) -> ClickResult:
        """Resolve a click and offer hits to the store.

        ``accepted`` on the returned result is ``True`` when the store took
        the move and the board needs repainting.  Misses never reach the
        store.
        """

        result = self.resolve_click(px, py)
        if not result.hit:
            return result
        return replace(result, accepted=self.store.play(result.coord))


__all__ = ["BoardSession", "ClickResult", "Rounding", "Store"]
