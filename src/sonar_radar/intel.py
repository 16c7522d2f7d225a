"""Clue vocabulary and the predicate that checks a clue against a cell."""

from __future__ import annotations

from dataclasses import dataclass

from sonar_radar.board import GameMap, Quadrant
from sonar_radar.geometry import Coordinate


@dataclass(frozen=True, slots=True)
class QuadrantPiece:
    quadrant: Quadrant


@dataclass(frozen=True, slots=True)
class RowPiece:
    index: int


@dataclass(frozen=True, slots=True)
class ColumnPiece:
    index: int


InformationPiece = QuadrantPiece | RowPiece | ColumnPiece


@dataclass(frozen=True, slots=True)
class InQuadrant:
    """Answer to "is the target in this quadrant?"."""

    quadrant: Quadrant
    answer: bool = True


@dataclass(frozen=True, slots=True)
class TruthLie:
    """Two facts about the same cell: exactly one is true, and the observer is not told which."""

    info1: InformationPiece
    info2: InformationPiece


IntelQuestion = InQuadrant | TruthLie


def piece_holds(piece: InformationPiece, coordinate: Coordinate, game_map: GameMap) -> bool:
    match piece:
        case QuadrantPiece(quadrant=quadrant):
            return game_map.quadrant_of(coordinate) == quadrant
        case RowPiece(index=index):
            return coordinate.y == index
        case ColumnPiece(index=index):
            return coordinate.x == index
    raise TypeError(f"Unsupported information piece: {piece!r}")


def evaluate(question: IntelQuestion, coordinate: Coordinate, game_map: GameMap) -> bool:
    """Return whether ``question`` is consistent with the target standing on ``coordinate``."""
    match question:
        case InQuadrant(quadrant=quadrant, answer=answer):
            return (game_map.quadrant_of(coordinate) == quadrant) == answer
        case TruthLie(info1=info1, info2=info2):
            return piece_holds(info1, coordinate, game_map) != piece_holds(info2, coordinate, game_map)
    raise TypeError(f"Unsupported intel question: {question!r}")
