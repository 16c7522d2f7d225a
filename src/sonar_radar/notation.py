"""Short text notation for moves and clues, e.g. ``n e dash q2 !q3 tl:q1,r4 undo``."""

from __future__ import annotations

import re
from dataclasses import dataclass

from sonar_radar.board import Quadrant
from sonar_radar.exceptions import NotationError
from sonar_radar.geometry import Direction
from sonar_radar.intel import (
    ColumnPiece,
    InformationPiece,
    InQuadrant,
    IntelQuestion,
    QuadrantPiece,
    RowPiece,
    TruthLie,
)
from sonar_radar.moves import Dash, Directed


@dataclass(frozen=True, slots=True)
class Undo:
    """Request to take back the newest trace element."""


Token = Directed | Dash | InQuadrant | TruthLie | Undo

_DIRECTION_WORDS: dict[str, Direction] = {
    "n": Direction.NORTH,
    "north": Direction.NORTH,
    "up": Direction.NORTH,
    "e": Direction.EAST,
    "east": Direction.EAST,
    "right": Direction.EAST,
    "s": Direction.SOUTH,
    "south": Direction.SOUTH,
    "down": Direction.SOUTH,
    "w": Direction.WEST,
    "west": Direction.WEST,
    "left": Direction.WEST,
}

_QUADRANT_RE = re.compile(r"^(?:q|quadrant\s*)([1-4])$")
_ROW_RE = re.compile(r"^(?:r|row\s*)(\d+)$")
_COLUMN_RE = re.compile(r"^(?:c|col\s*|column\s*)(\d+)$")
_IN_QUADRANT_RE = re.compile(r"^(!|not\s+)?q([1-4])$")
_TRUTH_LIE_RE = re.compile(r"^tl:\s*([^,]+?)\s*,\s*(.+?)$")

_YES = {"y", "yes", "true", "1"}
_NO = {"n", "no", "false", "0"}


def _normalize(text: str) -> str:
    return " ".join(text.strip().lower().split())


def parse_quadrant(text: str) -> Quadrant:
    normalized = _normalize(text)
    match = _QUADRANT_RE.match(normalized) or re.match(r"^([1-4])$", normalized)
    if not match:
        raise NotationError(f"Not a quadrant: {text!r} (expected q1..q4)")
    return Quadrant(int(match.group(1)))


def parse_piece(text: str) -> InformationPiece:
    normalized = _normalize(text)
    if match := _QUADRANT_RE.match(normalized):
        return QuadrantPiece(Quadrant(int(match.group(1))))
    if match := _ROW_RE.match(normalized):
        return RowPiece(int(match.group(1)))
    if match := _COLUMN_RE.match(normalized):
        return ColumnPiece(int(match.group(1)))
    raise NotationError(f"Not an information piece: {text!r} (expected q<1-4>, r<row> or c<column>)")


def parse_answer(text: str) -> bool:
    normalized = _normalize(text)
    if normalized in _YES:
        return True
    if normalized in _NO:
        return False
    raise NotationError(f"Not a yes/no answer: {text!r}")


def parse_token(token: str) -> Token:
    text = _normalize(token)
    if not text:
        raise NotationError("Empty token")

    if text in _DIRECTION_WORDS:
        return Directed(_DIRECTION_WORDS[text])
    if text == "dash":
        return Dash()
    if text == "undo":
        return Undo()

    if match := _IN_QUADRANT_RE.match(text):
        return InQuadrant(quadrant=Quadrant(int(match.group(2))), answer=match.group(1) is None)

    if match := _TRUTH_LIE_RE.match(text):
        return TruthLie(info1=parse_piece(match.group(1)), info2=parse_piece(match.group(2)))

    raise NotationError(f"Unknown token: {token!r}")


def parse_tokens(tokens: list[str]) -> list[Token]:
    return [parse_token(token) for token in tokens]


def format_question(question: IntelQuestion) -> str:
    """Inverse of :func:`parse_token` for clues."""
    match question:
        case InQuadrant(quadrant=quadrant, answer=answer):
            return f"{'' if answer else '!'}q{quadrant.value}"
        case TruthLie(info1=info1, info2=info2):
            return f"tl:{_format_piece(info1)},{_format_piece(info2)}"
    raise TypeError(f"Unsupported intel question: {question!r}")


def _format_piece(piece: InformationPiece) -> str:
    match piece:
        case QuadrantPiece(quadrant=quadrant):
            return f"q{quadrant.value}"
        case RowPiece(index=index):
            return f"r{index}"
        case ColumnPiece(index=index):
            return f"c{index}"
    raise TypeError(f"Unsupported information piece: {piece!r}")
