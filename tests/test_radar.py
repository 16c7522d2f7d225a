import pytest

from sonar_radar.board import GameMap, Quadrant, default_map
from sonar_radar.geometry import Coordinate, Direction
from sonar_radar.intel import InQuadrant, QuadrantPiece, RowPiece, TruthLie
from sonar_radar.moves import Dash, Directed
from sonar_radar.radar import Radar


def _assert_on_free_cells(radar: Radar, paths: list[tuple[Coordinate, ...]]) -> None:
    for path in paths:
        for cell in path:
            assert radar.map.contains(cell)
            assert cell not in radar.map.obstacles


def test_empty_trace_yields_one_singleton_per_free_cell() -> None:
    radar = Radar(default_map())

    paths = list(radar.get_possible_paths())

    assert len(paths) == 92
    assert all(len(path) == 1 for path in paths)
    assert {path[0] for path in paths} == set(radar.map.free_cells())


def test_north_move_drops_origins_without_free_north_neighbour() -> None:
    radar = Radar(default_map())
    radar.register_move(Directed(Direction.NORTH))

    paths = list(radar.get_possible_paths())
    expected_origins = {
        cell for cell in radar.map.free_cells() if cell.y >= 1 and radar.map.is_free(Coordinate(cell.x, cell.y - 1))
    }

    assert {path[0] for path in paths} == expected_origins
    assert Coordinate(1, 3) not in radar.get_possible_starts()
    assert Coordinate(4, 0) not in radar.get_possible_starts()
    for origin, current in paths:
        assert current == Coordinate(origin.x, origin.y - 1)


def test_candidates_never_touch_obstacles_or_leave_grid() -> None:
    radar = Radar(default_map())
    for move in (Directed(Direction.EAST), Dash(), Directed(Direction.SOUTH), Dash()):
        radar.register_move(move)

    paths = list(radar.get_possible_paths())

    assert paths
    _assert_on_free_cells(radar, paths)


def test_dash_through_obstacle_is_not_a_candidate() -> None:
    radar = Radar(GameMap.from_pairs(5, [(2, 0)]))
    radar.register_move(Dash())

    eastward_from_corner = [
        path for path in radar.get_possible_paths() if path[0] == Coordinate(0, 0) and path[1] == Coordinate(1, 0)
    ]

    assert eastward_from_corner == [(Coordinate(0, 0), Coordinate(1, 0))]


def test_in_quadrant_clue_filters_current_cell() -> None:
    radar = Radar(default_map())
    radar.register_move(Directed(Direction.EAST))
    radar.add_intel(InQuadrant(Quadrant.TWO, answer=True))

    inside = list(radar.get_possible_paths())
    assert inside
    assert all(radar.map.quadrant_of(path[-1]) == Quadrant.TWO for path in inside)

    radar.undo_trace()
    radar.add_intel(InQuadrant(Quadrant.TWO, answer=False))

    outside = list(radar.get_possible_paths())
    assert outside
    assert all(radar.map.quadrant_of(path[-1]) != Quadrant.TWO for path in outside)
    assert len(inside) + len(outside) == len({p[0] for p in inside} | {p[0] for p in outside})


def test_clue_stays_pinned_to_the_step_it_was_given_at() -> None:
    radar = Radar(GameMap(size=10))
    radar.add_intel(InQuadrant(Quadrant.ONE))
    radar.register_move(Directed(Direction.EAST))

    for path in radar.get_possible_paths():
        assert radar.map.quadrant_of(path[0]) == Quadrant.ONE
    assert Coordinate(5, 0) in radar.get_possible_positions()


def test_truth_lie_clue_keeps_exclusive_cells_only() -> None:
    radar = Radar(GameMap(size=4))
    radar.add_intel(TruthLie(QuadrantPiece(Quadrant.ONE), RowPiece(0)))

    assert radar.get_possible_positions() == {
        Coordinate(0, 1),
        Coordinate(1, 1),
        Coordinate(2, 0),
        Coordinate(3, 0),
    }


@pytest.mark.parametrize(
    "element",
    [
        Directed(Direction.WEST),
        Dash(),
        InQuadrant(Quadrant.THREE),
        TruthLie(RowPiece(4), QuadrantPiece(Quadrant.FOUR)),
    ],
)
def test_undo_restores_previous_candidates(element) -> None:
    radar = Radar(default_map())
    radar.register_move(Directed(Direction.SOUTH))
    radar.register_move(Dash())
    before = list(radar.get_possible_paths())

    if isinstance(element, (Directed, Dash)):
        radar.register_move(element)
    else:
        radar.add_intel(element)
    assert radar.undo_trace() is True

    assert list(radar.get_possible_paths()) == before


def test_undo_on_empty_radar_is_noop() -> None:
    radar = Radar(default_map())

    assert radar.undo_trace() is False
    assert len(list(radar.get_possible_paths())) == 92


def test_dash_on_single_cell_map_leaves_nothing() -> None:
    radar = Radar(GameMap(size=1))
    assert radar.get_possible_starts() == {Coordinate(0, 0)}

    radar.register_move(Dash())

    assert list(radar.candidates()) == []
    assert radar.get_possible_positions() == set()


def test_candidate_exposes_origin_and_position() -> None:
    radar = Radar(GameMap(size=3))
    radar.register_move(Directed(Direction.EAST))
    radar.register_move(Directed(Direction.EAST))

    candidates = list(radar.candidates())

    assert [c.origin for c in candidates] == [Coordinate(0, 0), Coordinate(0, 1), Coordinate(0, 2)]
    assert candidates[1].path == (Coordinate(0, 1), Coordinate(1, 1), Coordinate(2, 1))
    assert candidates[1].position == Coordinate(2, 1)


def test_radar_trace_logs_under_its_own_module_name() -> None:
    radar = Radar(GameMap(size=3), dash_max_distance=2)

    assert radar.trace.dash_max_distance == 2
    assert radar.trace._logger.name == "sonar_radar.trace"
