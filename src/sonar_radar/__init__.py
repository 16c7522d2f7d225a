"""Deduction aid that tracks every path a hidden target may have taken."""

from .board import GameMap, Quadrant, default_map
from .exceptions import MapError, NotationError, RadarError, SelfIntersectError, WizardIncompleteError
from .geometry import Coordinate, Direction, Offset
from .intel import ColumnPiece, InQuadrant, QuadrantPiece, RowPiece, TruthLie, evaluate
from .moves import Dash, Directed
from .radar import Candidate, Radar
from .trace import BranchNode, Trace

__all__ = [
    "BranchNode",
    "Candidate",
    "ColumnPiece",
    "Coordinate",
    "Dash",
    "Direction",
    "Directed",
    "GameMap",
    "InQuadrant",
    "MapError",
    "NotationError",
    "Offset",
    "Quadrant",
    "QuadrantPiece",
    "Radar",
    "RadarError",
    "RowPiece",
    "SelfIntersectError",
    "Trace",
    "TruthLie",
    "WizardIncompleteError",
    "default_map",
    "evaluate",
]
