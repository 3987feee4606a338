"""
Default construction of composite locations. :class:`~inscripta.insdc.parser.InsdcParser` hands every parenthesized
group that is not a ``complement`` to a builder with the signature ``(sub_locations, join_type) -> Location``. The
parser passes the keyword verbatim; deciding which keywords are valid is up to the builder.
"""
import warnings
from typing import List, Callable

from inscripta.insdc.constants import JoinType
from inscripta.insdc.exc import UnknownJoinTypeError, StructuralMismatchError, MixedStrandWarning
from inscripta.insdc.location.location import Location, CompoundLocation

LocationBuilder = Callable[[List[Location], str], Location]


def build_location(sub_locations: List[Location], join_type: str) -> Location:
    """Combine the locations found inside a group into one Location.

    A group with a single member is that member; ``join(1..4)`` is the same location as ``1..4``.

    Raises:
        UnknownJoinTypeError: if ``join_type`` is not one of :class:`~inscripta.insdc.constants.JoinType`.
        StructuralMismatchError: if the group is empty.
    """
    if not JoinType.has_value(join_type):
        raise UnknownJoinTypeError(
            f"Unknown join type '{join_type}'; expected one of {', '.join(JoinType.values())}", join_type
        )
    if not sub_locations:
        raise StructuralMismatchError(f"Group '{join_type}()' contains no locations", f"{join_type}()")
    if len(sub_locations) == 1:
        return sub_locations[0]

    location = CompoundLocation(sub_locations, join_type)
    if not location.strand.is_directional:
        warnings.warn(MixedStrandWarning(f"Members of {location} are on different strands"))
    return location
