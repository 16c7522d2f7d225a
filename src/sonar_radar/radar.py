"""Radar facade: combines the map and the trace into concrete candidate paths."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from sonar_radar.board import GameMap
from sonar_radar.geometry import Coordinate
from sonar_radar.intel import IntelQuestion, evaluate
from sonar_radar.moves import Move
from sonar_radar.trace import DASH_MAX_DISTANCE, Branch, Trace


@dataclass(frozen=True, slots=True)
class Candidate:
    """A full realization of the trace: where the target started and every cell it crossed."""

    origin: Coordinate
    path: tuple[Coordinate, ...]

    @property
    def position(self) -> Coordinate:
        return self.path[-1]


class Radar:
    """Tracks one hidden target on a fixed map."""

    def __init__(
        self,
        game_map: GameMap,
        *,
        dash_max_distance: int = DASH_MAX_DISTANCE,
        logger: logging.Logger | None = None,
    ) -> None:
        self._map = game_map
        self._logger = logger or logging.getLogger("sonar_radar.radar")
        self._trace = Trace(dash_max_distance=dash_max_distance)

    @property
    def map(self) -> GameMap:
        return self._map

    @property
    def trace(self) -> Trace:
        return self._trace

    def register_move(self, move: Move) -> None:
        """Record a reported move; raises :class:`SelfIntersectError` for an impossible step."""
        self._trace.register_move(move)

    def undo_trace(self) -> bool:
        return self._trace.undo_last()

    def add_intel(self, question: IntelQuestion) -> None:
        self._trace.add_intel(question)

    def candidates(self) -> Iterator[Candidate]:
        """Yield every (origin, branch) realization that fits the map and all clues.

        Different branches can realize the same cells; nothing is deduplicated.
        """
        branches = self._trace.paths()
        self._logger.debug("radar_candidates_requested", extra={"branch_count": len(branches)})
        for origin in self._map.free_cells():
            for branch in branches:
                path = self._realize(origin, branch)
                if path is not None:
                    yield Candidate(origin=origin, path=path)

    def get_possible_paths(self) -> Iterator[tuple[Coordinate, ...]]:
        for candidate in self.candidates():
            yield candidate.path

    def get_possible_starts(self) -> set[Coordinate]:
        return {candidate.origin for candidate in self.candidates()}

    def get_possible_positions(self) -> set[Coordinate]:
        """Cells the target may occupy right now."""
        return {candidate.position for candidate in self.candidates()}

    def _realize(self, origin: Coordinate, branch: Branch) -> tuple[Coordinate, ...] | None:
        path: list[Coordinate] = []
        for node in branch:
            coordinate = (origin + node.offset).to_coordinate()
            if coordinate is None or not self._map.is_free(coordinate):
                return None
            if not all(evaluate(clue, coordinate, self._map) for clue in node.clues):
                return None
            path.append(coordinate)
        return tuple(path)
