"""Grid geometry: absolute cells, relative displacements and headings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Coordinate:
    """An absolute grid cell. Components are never negative."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Coordinate components must be non-negative, got ({self.x}, {self.y})")

    def __add__(self, other: Offset) -> Offset:
        if not isinstance(other, Offset):
            return NotImplemented
        return Offset(self.x + other.x, self.y + other.y)


@dataclass(frozen=True, slots=True)
class Offset:
    """A signed displacement relative to an unknown origin."""

    ZERO: ClassVar[Offset]

    x: int
    y: int

    @classmethod
    def from_coordinate(cls, coordinate: Coordinate) -> Offset:
        return cls(coordinate.x, coordinate.y)

    def to_coordinate(self) -> Coordinate | None:
        """Return the matching cell, or ``None`` when the offset is off the near edge."""
        if self.x < 0 or self.y < 0:
            return None
        return Coordinate(self.x, self.y)

    def __add__(self, other: Offset) -> Offset:
        if not isinstance(other, Offset):
            return NotImplemented
        return Offset(self.x + other.x, self.y + other.y)

    def __mul__(self, factor: int) -> Offset:
        if not isinstance(factor, int):
            return NotImplemented
        return Offset(self.x * factor, self.y * factor)

    __rmul__ = __mul__


Offset.ZERO = Offset(0, 0)


class Direction(str, Enum):
    """Cardinal headings. North points toward row 0."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def delta(self) -> Offset:
        return _DELTAS[self]


_DELTAS: dict[Direction, Offset] = {
    Direction.NORTH: Offset(0, -1),
    Direction.EAST: Offset(1, 0),
    Direction.SOUTH: Offset(0, 1),
    Direction.WEST: Offset(-1, 0),
}
