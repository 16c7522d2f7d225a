"""CLI entrypoint for sonar-radar."""

from __future__ import annotations

from dataclasses import asdict

import typer
from rich import print

from sonar_radar.board import GameMap
from sonar_radar.config import settings
from sonar_radar.exceptions import MapError, NotationError
from sonar_radar.geometry import Coordinate
from sonar_radar.notation import format_question
from sonar_radar.radar import Radar
from sonar_radar.session import TrackingSession
from sonar_radar.telemetry import configure_logging
from sonar_radar.wizard import IntelWizard

app = typer.Typer(help="Track a hidden target from its reported moves and clues")


def _build_map(size: int | None = None) -> GameMap:
    try:
        if size is not None:
            return GameMap(size=size)
        return settings.build_map()
    except MapError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _cells(coordinates: list[Coordinate]) -> list[tuple[int, int]]:
    return [(c.x, c.y) for c in coordinates]


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "map_size": settings.map_size,
            "obstacles": settings.obstacles,
            "dash_max_distance": settings.dash_max_distance,
        }
    )


@app.command()
def track(
    tokens: list[str] = typer.Argument(None, help="Moves and clues in order, e.g. n e dash q2 !q3 tl:q1,r4 undo"),
    size: int = typer.Option(None, help="Use an obstacle-free map of this size instead of the configured one"),
    show_starts: bool = typer.Option(False, help="List every possible starting cell"),
    show_positions: bool = typer.Option(False, help="List every possible current cell"),
) -> None:
    """Replay a trace and report how many candidate paths survive."""
    configure_logging(settings.log_level)
    radar = Radar(_build_map(size), dash_max_distance=settings.dash_max_distance)
    session = TrackingSession(radar)

    try:
        outcomes = session.apply_all(tokens or [])
    except NotationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    summary = session.summary()
    report = {
        "steps": [asdict(outcome) for outcome in outcomes],
        "trace_length": summary.trace_length,
        "dash_max_distance": radar.trace.dash_max_distance,
        "branch_count": summary.branch_count,
        "candidate_count": summary.candidate_count,
        "distinct_path_count": summary.distinct_path_count,
        "possible_start_count": len(summary.possible_starts),
        "possible_position_count": len(summary.possible_positions),
    }
    if show_starts:
        report["possible_starts"] = _cells(summary.possible_starts)
    if show_positions:
        report["possible_positions"] = _cells(summary.possible_positions)
    print(report)

    if summary.candidate_count == 0:
        raise typer.Exit(code=1)


@app.command()
def quadrant(
    x: int = typer.Argument(..., min=0, help="Column"),
    y: int = typer.Argument(..., min=0, help="Row"),
) -> None:
    """Show which quadrant a cell belongs to on the configured map."""
    game_map = _build_map()
    coordinate = Coordinate(x, y)
    found = game_map.quadrant_of(coordinate)
    print(
        {
            "cell": (x, y),
            "quadrant": found.value if found else None,
            "obstacle": coordinate in game_map.obstacles,
        }
    )
    if found is None:
        raise typer.Exit(code=1)


@app.command()
def clue() -> None:
    """Build a clue step by step and print it in track notation. An empty reply steps back."""
    wizard = IntelWizard()
    while not wizard.complete():
        reply = typer.prompt(wizard.prompt(), default="", show_default=False)
        if not reply.strip():
            if not wizard.back():
                print({"clue": None, "error": "Nothing to step back from"})
                raise typer.Exit(code=1)
            continue
        try:
            wizard.provide(reply)
        except NotationError as exc:
            print({"error": str(exc)})

    print({"clue": format_question(wizard.build())})


if __name__ == "__main__":
    app()
