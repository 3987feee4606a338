from enum import Enum


class Strand(Enum):
    """Orientation of a location relative to its reference sequence.

    Parsed leaf locations are always PLUS or MINUS. UNSTRANDED only appears as the derived strand of a
    compound location whose members disagree.
    """

    PLUS = 1
    MINUS = -1
    UNSTRANDED = 0

    def __str__(self):
        return self.to_symbol()

    def to_symbol(self) -> str:
        if self is Strand.PLUS:
            return "+"
        if self is Strand.MINUS:
            return "-"
        return "."

    def reverse(self) -> "Strand":
        """Returns the opposite of this Strand. Reversing twice always gives back the original."""
        if self is Strand.PLUS:
            return Strand.MINUS
        if self is Strand.MINUS:
            return Strand.PLUS
        return Strand.UNSTRANDED

    @property
    def is_directional(self) -> bool:
        return self is not Strand.UNSTRANDED
