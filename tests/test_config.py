import pytest

from sonar_radar.config import Settings
from sonar_radar.exceptions import MapError
from sonar_radar.geometry import Coordinate


def test_settings_default_to_standard_map() -> None:
    game_map = Settings().build_map()

    assert game_map.size == 10
    assert Coordinate(8, 6) in game_map.obstacles


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("SONAR_RADAR_MAP_SIZE", "6")
    monkeypatch.setenv("SONAR_RADAR_OBSTACLES", "[[0, 0], [5, 5]]")
    monkeypatch.setenv("SONAR_RADAR_DASH_MAX_DISTANCE", "3")

    settings = Settings()
    game_map = settings.build_map()

    assert settings.dash_max_distance == 3
    assert game_map.size == 6
    assert game_map.obstacles == frozenset({Coordinate(0, 0), Coordinate(5, 5)})


def test_settings_with_obstacle_outside_map_fail_to_build() -> None:
    with pytest.raises(MapError):
        Settings(map_size=4, obstacles=[(4, 4)]).build_map()
