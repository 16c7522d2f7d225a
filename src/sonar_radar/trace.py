"""Append-only log of reported moves and clues, replayed into path branches."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from sonar_radar.exceptions import SelfIntersectError
from sonar_radar.geometry import Direction, Offset
from sonar_radar.intel import InQuadrant, IntelQuestion, TruthLie
from sonar_radar.moves import Dash, Directed, Move

DASH_MAX_DISTANCE = 4

TraceElement = Directed | Dash | InQuadrant | TruthLie


@dataclass(frozen=True, slots=True)
class BranchNode:
    """One visited position relative to the origin and the clues heard while there."""

    offset: Offset
    clues: tuple[IntelQuestion, ...] = ()


Branch = tuple[BranchNode, ...]


class Trace:
    """Chronological record of everything the tracked side has revealed.

    Branches are never stored: :meth:`paths` replays the whole log each time,
    so undo only has to drop the last element.
    """

    def __init__(self, *, dash_max_distance: int = DASH_MAX_DISTANCE, logger: logging.Logger | None = None) -> None:
        if dash_max_distance < 1:
            raise ValueError(f"dash_max_distance must be at least 1, got {dash_max_distance}")
        self._elements: list[TraceElement] = []
        self._dash_max_distance = dash_max_distance
        self._logger = logger or logging.getLogger("sonar_radar.trace")

    def __len__(self) -> int:
        return len(self._elements)

    @property
    def elements(self) -> tuple[TraceElement, ...]:
        return tuple(self._elements)

    @property
    def moves(self) -> tuple[Move, ...]:
        return tuple(e for e in self._elements if isinstance(e, (Directed, Dash)))

    @property
    def dash_max_distance(self) -> int:
        return self._dash_max_distance

    def register_move(self, move: Move) -> None:
        """Append ``move`` to the log.

        A directed move is refused with :class:`SelfIntersectError` when no
        live branch can take the step without revisiting one of its cells.
        """
        if isinstance(move, Directed):
            branches = self.paths()
            if not any(_can_step(branch, move.direction.delta) for branch in branches):
                self._logger.warning(
                    "trace_move_rejected",
                    extra={"direction": move.direction.value, "branch_count": len(branches)},
                )
                raise SelfIntersectError(
                    f"Moving {move.direction.value} would cross the path on all {len(branches)} branches"
                )
        elif not isinstance(move, Dash):
            raise TypeError(f"Unsupported move: {move!r}")

        self._elements.append(move)
        self._logger.info("trace_move_registered", extra={"move": move, "trace_length": len(self._elements)})

    def add_intel(self, question: IntelQuestion) -> None:
        if not isinstance(question, (InQuadrant, TruthLie)):
            raise TypeError(f"Unsupported intel question: {question!r}")
        self._elements.append(question)
        self._logger.info("trace_intel_added", extra={"question": question, "trace_length": len(self._elements)})

    def undo_last(self) -> bool:
        """Drop the newest element. Returns ``False`` when the log is already empty."""
        if not self._elements:
            return False
        removed = self._elements.pop()
        self._logger.info("trace_undo", extra={"removed": removed, "trace_length": len(self._elements)})
        return True

    def paths(self) -> list[Branch]:
        """Replay the log into every geometrically possible branch."""
        branches: list[Branch] = [(BranchNode(Offset.ZERO),)]
        for element in self._elements:
            match element:
                case Directed(direction=direction):
                    branches = [
                        branch + (BranchNode(branch[-1].offset + direction.delta),)
                        for branch in branches
                        if _can_step(branch, direction.delta)
                    ]
                case Dash():
                    branches = [extended for branch in branches for extended in self._dash_extensions(branch)]
                case InQuadrant() | TruthLie():
                    branches = [_attach(branch, element) for branch in branches]
        return branches

    def _dash_extensions(self, branch: Branch) -> list[Branch]:
        visited = {node.offset for node in branch}
        start = branch[-1].offset
        extensions: list[Branch] = []
        for direction in Direction:
            steps: list[BranchNode] = []
            for distance in range(1, self._dash_max_distance + 1):
                offset = start + direction.delta * distance
                if offset in visited:
                    break
                steps.append(BranchNode(offset))
                extensions.append(branch + tuple(steps))
        return extensions


def _can_step(branch: Branch, delta: Offset) -> bool:
    target = branch[-1].offset + delta
    return all(node.offset != target for node in branch)


def _attach(branch: Branch, question: IntelQuestion) -> Branch:
    last = branch[-1]
    return branch[:-1] + (replace(last, clues=last.clues + (question,)),)
