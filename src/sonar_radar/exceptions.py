"""Exception hierarchy for radar tracking operations."""


class RadarError(Exception):
    """Base exception for radar tracking operations."""


class MapError(RadarError, ValueError):
    """Map definition is invalid (bad size or an obstacle outside the grid)."""


class SelfIntersectError(RadarError):
    """A directed move would revisit a cell on every live branch."""


class NotationError(RadarError, ValueError):
    """A move or clue token could not be parsed."""


class WizardIncompleteError(RadarError):
    """A clue was requested from the wizard before every slot was filled."""
