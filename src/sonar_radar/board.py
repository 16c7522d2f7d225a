"""Static playing field: grid size, obstacles and quadrant layout."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from sonar_radar.exceptions import MapError
from sonar_radar.geometry import Coordinate


class Quadrant(int, Enum):
    """Board quarters, numbered left to right, top to bottom."""

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4


DEFAULT_MAP_SIZE = 10
DEFAULT_OBSTACLES: tuple[tuple[int, int], ...] = (
    (1, 2),
    (5, 1),
    (8, 3),
    (3, 4),
    (1, 5),
    (8, 6),
    (3, 7),
    (5, 7),
)


@dataclass(frozen=True, slots=True)
class GameMap:
    """Immutable square grid with a fixed set of obstacle cells.

    Quadrants split the grid at ``size // 2``: a component at or past the
    midline is on the "high" side, so odd sizes give the extra row and column
    to quadrants Two, Three and Four.
    """

    size: int
    obstacles: frozenset[Coordinate] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.size < 1:
            raise MapError(f"Map size must be positive, got {self.size}")
        obstacles = frozenset(self.obstacles)
        outside = sorted((c.x, c.y) for c in obstacles if not self.contains(c))
        if outside:
            raise MapError(f"Obstacles out of bounds for size {self.size}: {outside}")
        object.__setattr__(self, "obstacles", obstacles)

    @classmethod
    def from_pairs(cls, size: int, obstacles: Iterable[tuple[int, int]]) -> GameMap:
        try:
            cells = frozenset(Coordinate(x, y) for x, y in obstacles)
        except ValueError as exc:
            raise MapError(str(exc)) from exc
        return cls(size=size, obstacles=cells)

    def contains(self, coordinate: Coordinate) -> bool:
        return coordinate.x < self.size and coordinate.y < self.size

    def is_free(self, coordinate: Coordinate) -> bool:
        return self.contains(coordinate) and coordinate not in self.obstacles

    def quadrant_of(self, coordinate: Coordinate) -> Quadrant | None:
        if not self.contains(coordinate):
            return None

        mid = self.size // 2
        high_x = coordinate.x >= mid
        high_y = coordinate.y >= mid
        if high_y:
            return Quadrant.FOUR if high_x else Quadrant.THREE
        return Quadrant.TWO if high_x else Quadrant.ONE

    def free_cells(self) -> Iterator[Coordinate]:
        """Yield every non-obstacle cell, column by column."""
        for x in range(self.size):
            for y in range(self.size):
                coordinate = Coordinate(x, y)
                if coordinate not in self.obstacles:
                    yield coordinate


def default_map() -> GameMap:
    return GameMap.from_pairs(DEFAULT_MAP_SIZE, DEFAULT_OBSTACLES)
