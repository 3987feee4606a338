from dataclasses import dataclass

from inscripta.insdc.exc import LocationException


@dataclass(frozen=True)
class Point:
    """A single 1-based coordinate on a sequence.

    ``uncertain`` marks a coordinate written with ``<`` or ``>``: the true position is at or before (or at or after)
    the stated value. ``unknown`` marks a coordinate that is entirely unspecified; no location syntax currently
    produces it.
    """

    position: int
    uncertain: bool = False
    unknown: bool = False

    def __post_init__(self):
        if self.position < 0:
            raise LocationException(f"Position must be non-negative, got {self.position}")

    def __str__(self):
        return str(self.position)

    def to_insdc(self, marker: str = "<") -> str:
        """Render this point as it appears in a location string. ``marker`` is the uncertainty symbol, which depends
        on whether this point is the start (``<``) or the end (``>``) of a range."""
        if self.uncertain:
            return f"{marker}{self.position}"
        return str(self.position)
