"""Step-by-step clue entry that ends in a completed intel question."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sonar_radar.exceptions import NotationError, WizardIncompleteError
from sonar_radar.intel import InQuadrant, IntelQuestion, TruthLie
from sonar_radar.notation import parse_answer, parse_piece, parse_quadrant

CLUE_SLOT_SCHEMA: dict[str, tuple[str, ...]] = {
    "in_quadrant": ("quadrant", "answer"),
    "truth_lie": ("info1", "info2"),
}


_SLOT_QUESTIONS: dict[str, str] = {
    "quadrant": "Which quadrant was asked about (q1-q4)?",
    "answer": "Was the answer yes or no?",
    "info1": "First piece of information (q<1-4>, r<row> or c<column>)?",
    "info2": "Second piece of information (q<1-4>, r<row> or c<column>)?",
}

_SLOT_PARSERS = {
    "quadrant": parse_quadrant,
    "answer": parse_answer,
    "info1": parse_piece,
    "info2": parse_piece,
}


def question_for_slot(slot: str) -> str:
    return _SLOT_QUESTIONS.get(slot, f"Please provide {slot}.")


@dataclass(slots=True)
class IntelWizard:
    """Collects the parts of a clue one answer at a time, with backspace."""

    kind: str | None = None
    collected_slots: dict[str, Any] = field(default_factory=dict)

    def begin(self, kind: str) -> None:
        if kind not in CLUE_SLOT_SCHEMA:
            raise NotationError(f"Unknown clue kind: {kind!r} (expected one of {sorted(CLUE_SLOT_SCHEMA)})")
        self.kind = kind
        self.collected_slots = {}

    def required_slots(self) -> tuple[str, ...]:
        return CLUE_SLOT_SCHEMA.get(self.kind, ()) if self.kind else ()

    def missing_slots(self) -> list[str]:
        return [slot for slot in self.required_slots() if slot not in self.collected_slots]

    def complete(self) -> bool:
        return bool(self.kind) and not self.missing_slots()

    def prompt(self) -> str | None:
        if self.kind is None:
            return f"Which kind of clue ({', '.join(CLUE_SLOT_SCHEMA)})?"
        missing = self.missing_slots()
        return question_for_slot(missing[0]) if missing else None

    def provide(self, text: str) -> None:
        """Fill the next missing slot; a value that does not parse leaves the wizard unchanged."""
        if self.kind is None:
            self.begin(text.strip().lower())
            return

        missing = self.missing_slots()
        if not missing:
            raise NotationError("All clue slots are already filled")
        slot = missing[0]
        self.collected_slots[slot] = _SLOT_PARSERS[slot](text)

    def back(self) -> bool:
        """Step back once: forget the newest slot, or the clue kind when no slot is filled."""
        if self.collected_slots:
            last_slot = next(reversed(self.collected_slots))
            del self.collected_slots[last_slot]
            return True
        if self.kind is not None:
            self.kind = None
            return True
        return False

    def build(self) -> IntelQuestion:
        if not self.complete():
            raise WizardIncompleteError(f"Clue is missing: {', '.join(self.missing_slots()) or 'kind'}")

        slots = self.collected_slots
        if self.kind == "in_quadrant":
            return InQuadrant(quadrant=slots["quadrant"], answer=slots["answer"])
        return TruthLie(info1=slots["info1"], info2=slots["info2"])

    def clear(self) -> None:
        self.kind = None
        self.collected_slots = {}
