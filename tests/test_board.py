import pytest

from sonar_radar.board import GameMap, Quadrant, default_map
from sonar_radar.exceptions import MapError
from sonar_radar.geometry import Coordinate, Direction, Offset


def test_quadrant_of_uses_high_side_tie_break() -> None:
    game_map = GameMap(size=10)

    assert game_map.quadrant_of(Coordinate(0, 0)) == Quadrant.ONE
    assert game_map.quadrant_of(Coordinate(9, 0)) == Quadrant.TWO
    assert game_map.quadrant_of(Coordinate(0, 9)) == Quadrant.THREE
    assert game_map.quadrant_of(Coordinate(9, 9)) == Quadrant.FOUR
    assert game_map.quadrant_of(Coordinate(5, 5)) == Quadrant.FOUR
    assert game_map.quadrant_of(Coordinate(4, 4)) == Quadrant.ONE
    assert game_map.quadrant_of(Coordinate(10, 3)) is None


def test_quadrant_of_odd_size_puts_middle_line_on_high_side() -> None:
    game_map = GameMap(size=5)

    assert game_map.quadrant_of(Coordinate(1, 1)) == Quadrant.ONE
    assert game_map.quadrant_of(Coordinate(2, 0)) == Quadrant.TWO
    assert game_map.quadrant_of(Coordinate(0, 2)) == Quadrant.THREE
    assert game_map.quadrant_of(Coordinate(2, 2)) == Quadrant.FOUR


def test_map_rejects_obstacle_outside_grid() -> None:
    with pytest.raises(MapError, match="out of bounds"):
        GameMap(size=4, obstacles=frozenset({Coordinate(1, 1), Coordinate(4, 0)}))

    with pytest.raises(MapError):
        GameMap.from_pairs(4, [(-1, 2)])

    with pytest.raises(MapError):
        GameMap(size=0)


def test_default_map_layout() -> None:
    game_map = default_map()
    free = list(game_map.free_cells())

    assert game_map.size == 10
    assert len(game_map.obstacles) == 8
    assert len(free) == 92
    assert Coordinate(1, 2) not in free
    assert free[0] == Coordinate(0, 0)
    assert free[1] == Coordinate(0, 1)
    assert game_map.is_free(Coordinate(0, 0))
    assert not game_map.is_free(Coordinate(5, 1))
    assert not game_map.is_free(Coordinate(10, 0))


def test_offsets_and_directions() -> None:
    assert Direction.NORTH.delta == Offset(0, -1)
    assert Direction.EAST.delta == Offset(1, 0)
    assert Direction.SOUTH.delta * 3 == Offset(0, 3)
    assert Offset(-1, 4).to_coordinate() is None
    assert Offset(2, 4).to_coordinate() == Coordinate(2, 4)
    assert (Coordinate(3, 3) + Offset(-1, 2)).to_coordinate() == Coordinate(2, 5)
    assert Offset.from_coordinate(Coordinate(7, 1)) + Offset.ZERO == Offset(7, 1)
