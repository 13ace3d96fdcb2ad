from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Axial:
    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def as_tuple(self) -> tuple[int, int]:
        return self.q, self.r


@dataclass(frozen=True, slots=True)
class Cube:
    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            raise ValueError("For cube coords, x + y + z must be 0")


Point = tuple[float, float]
