"""Session orchestration: apply notation tokens to a radar and summarize what is left."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from sonar_radar.exceptions import SelfIntersectError
from sonar_radar.geometry import Coordinate
from sonar_radar.intel import InQuadrant, TruthLie
from sonar_radar.moves import Dash, Directed
from sonar_radar.notation import Token, Undo, format_question, parse_token, parse_tokens
from sonar_radar.radar import Radar


@dataclass(slots=True)
class StepOutcome:
    token: str
    kind: str
    accepted: bool
    detail: str | None = None


@dataclass(slots=True)
class RadarSummary:
    trace_length: int
    branch_count: int
    candidate_count: int
    distinct_path_count: int
    possible_starts: list[Coordinate] = field(default_factory=list)
    possible_positions: list[Coordinate] = field(default_factory=list)


class TrackingSession:
    """Feeds reported moves and clues into a :class:`Radar`, one token at a time."""

    def __init__(self, radar: Radar, *, logger: logging.Logger | None = None) -> None:
        self._radar = radar
        self._logger = logger or logging.getLogger("sonar_radar.session")
        self._outcomes: list[StepOutcome] = []

    @property
    def radar(self) -> Radar:
        return self._radar

    @property
    def outcomes(self) -> list[StepOutcome]:
        return list(self._outcomes)

    def apply(self, token: str) -> StepOutcome:
        """Apply one token. Bad notation raises :class:`NotationError` before anything changes."""
        return self._apply_parsed(token, parse_token(token))

    def apply_all(self, tokens: Iterable[str]) -> list[StepOutcome]:
        """Apply tokens in order. Every token is parsed first, so bad notation anywhere changes nothing."""
        tokens = list(tokens)
        parsed = parse_tokens(tokens)
        return [self._apply_parsed(token, item) for token, item in zip(tokens, parsed)]

    def _apply_parsed(self, token: str, parsed: Token) -> StepOutcome:
        match parsed:
            case Directed(direction=direction):
                try:
                    self._radar.register_move(parsed)
                except SelfIntersectError as exc:
                    outcome = StepOutcome(token=token, kind="move", accepted=False, detail=str(exc))
                else:
                    outcome = StepOutcome(token=token, kind="move", accepted=True, detail=direction.value)
            case Dash():
                self._radar.register_move(parsed)
                outcome = StepOutcome(token=token, kind="dash", accepted=True)
            case InQuadrant() | TruthLie():
                self._radar.add_intel(parsed)
                outcome = StepOutcome(token=token, kind="intel", accepted=True, detail=format_question(parsed))
            case Undo():
                removed = self._radar.undo_trace()
                outcome = StepOutcome(
                    token=token,
                    kind="undo",
                    accepted=removed,
                    detail=None if removed else "Trace is already empty",
                )
            case _:
                raise TypeError(f"Unsupported token: {parsed!r}")

        self._outcomes.append(outcome)
        self._logger.info(
            "session_step_applied",
            extra={"token": token, "kind": outcome.kind, "accepted": outcome.accepted},
        )
        return outcome

    def summary(self) -> RadarSummary:
        candidates = list(self._radar.candidates())
        starts = {candidate.origin for candidate in candidates}
        positions = {candidate.position for candidate in candidates}
        return RadarSummary(
            trace_length=len(self._radar.trace),
            branch_count=len(self._radar.trace.paths()),
            candidate_count=len(candidates),
            distinct_path_count=len({candidate.path for candidate in candidates}),
            possible_starts=sorted(starts, key=lambda c: (c.x, c.y)),
            possible_positions=sorted(positions, key=lambda c: (c.x, c.y)),
        )
