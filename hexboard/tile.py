"""Single board cell: geometry, label and fill shade."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .hexmath import Axial, Point, axial_to_pixel, hex_vertices


class Shade(Enum):
    A = "a"
    B = "b"
    C = "c"


@dataclass(frozen=True, slots=True)
class HexTile:
    coord: Axial

    @classmethod
    def at(cls, q: int, r: int) -> "HexTile":
        return cls(Axial(q, r))

    @property
    def q(self) -> int:
        return self.coord.q

    @property
    def r(self) -> int:
        return self.coord.r

    def center(self, tile_size: float) -> Point:
        return axial_to_pixel(self.q, self.r, tile_size)

    def outline(self, tile_size: float) -> list[Point]:
        cx, cy = self.center(tile_size)
        return hex_vertices(cx, cy, tile_size)

    def label(self, spacing: int = 1) -> str:
        return f"{self.q}{' ' * spacing}{self.r}"

    def shade(self) -> Shade:
        odd_q = self.q % 2 == 1
        odd_r = self.r % 2 == 1
        if odd_q and odd_r:
            return Shade.C
        if odd_q or odd_r:
            return Shade.B
        return Shade.A


@dataclass(frozen=True)
class Palette:
    """Colours used to paint the board."""

    name: str
    shade_a: str
    shade_b: str
    shade_c: str
    stroke: str
    label: str

    def fill_for(self, tile: HexTile) -> str:
        return {
            Shade.A: self.shade_a,
            Shade.B: self.shade_b,
            Shade.C: self.shade_c,
        }[tile.shade()]


PALETTES: dict[str, Palette] = {
    "classic": Palette(
        name="classic",
        shade_a="#e8e0c9",
        shade_b="#cfc3a0",
        shade_c="#b3a57d",
        stroke="#aa2244",
        label="#333333",
    ),
    "ember": Palette(
        name="ember",
        shade_a="#3a1f1a",
        shade_b="#5a2a1e",
        shade_c="#7a3522",
        stroke="#ffb074",
        label="#ffe082",
    ),
    "slate": Palette(
        name="slate",
        shade_a="#1b2735",
        shade_b="#17212c",
        shade_c="#25364a",
        stroke="#88c0ff",
        label="#dbe2ea",
    ),
}


def get_palette(name: str) -> Palette:
    try:
        return PALETTES[name]
    except KeyError:
        known = ", ".join(sorted(PALETTES))
        raise ValueError(f"Unknown palette {name!r}; expected one of: {known}") from None


__all__ = ["HexTile", "PALETTES", "Palette", "Shade", "get_palette"]
