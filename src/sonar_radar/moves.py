"""Movement commands as reported by the tracked side."""

from __future__ import annotations

from dataclasses import dataclass

from sonar_radar.geometry import Direction


@dataclass(frozen=True, slots=True)
class Directed:
    """A single announced step in a known direction."""

    direction: Direction


@dataclass(frozen=True, slots=True)
class Dash:
    """A long move of one to four cells whose heading and length stay hidden."""


Move = Directed | Dash
