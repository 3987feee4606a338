"""
Location grammar constants. Records the structural delimiters, the composition keywords and the default limits used
by :class:`~inscripta.insdc.parser.InsdcParser`.
"""

from inscripta.insdc.util.enum import HasMemberMixin

# keyword that reverses the strand of everything inside its group instead of building a composite
COMPLEMENT = "complement"

GROUP_OPEN = "("
GROUP_CLOSE = ")"
SEPARATOR = ","

# deepest group nesting a parser accepts by default
DEFAULT_MAX_DEPTH = 100

# stack frames each nesting level costs while scanning
FRAMES_PER_GROUP = 2
# stack frames left free for callers of the parser
RECURSION_HEADROOM = 200


class JoinType(str, HasMemberMixin):
    """Composition keywords the default location builder understands."""

    JOIN = "join"
    ORDER = "order"
    BOND = "bond"
    ONE_OF = "one-of"
    GROUP = "group"
