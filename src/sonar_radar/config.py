"""Runtime configuration for sonar-radar."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sonar_radar.board import DEFAULT_MAP_SIZE, DEFAULT_OBSTACLES, GameMap
from sonar_radar.trace import DASH_MAX_DISTANCE


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="SONAR_RADAR_", env_file=".env", extra="ignore")

    app_name: str = "sonar-radar"
    log_level: str = "WARNING"
    map_size: int = Field(default=DEFAULT_MAP_SIZE, ge=1, description="Side length of the square grid.")
    obstacles: list[tuple[int, int]] = Field(
        default_factory=lambda: list(DEFAULT_OBSTACLES),
        description="Obstacle cells as a JSON list of [x, y] pairs.",
    )
    dash_max_distance: int = Field(default=DASH_MAX_DISTANCE, ge=1, description="Longest possible dash, in cells.")

    def build_map(self) -> GameMap:
        return GameMap.from_pairs(self.map_size, self.obstacles)


settings = Settings()
