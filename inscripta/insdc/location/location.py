from abc import ABC, abstractmethod
from typing import List, Optional, Tuple, Iterator, Dict, Any, Union

from Bio.SeqFeature import (
    FeatureLocation,
    CompoundLocation as BioCompoundLocation,
    ExactPosition,
    BeforePosition,
    AfterPosition,
    UnknownPosition,
    Position,
)
from methodtools import lru_cache

from inscripta.insdc.constants import COMPLEMENT
from inscripta.insdc.exc import LocationException
from inscripta.insdc.location.accession import AccessionID
from inscripta.insdc.location.point import Point
from inscripta.insdc.location.strand import Strand


class Location(ABC):
    """Abstract INSDC location. Either a :class:`SimpleLocation` (a single position or a contiguous range) or a
    :class:`CompoundLocation` (an ordered list of sub-locations under a join keyword)."""

    # The first position of this Location on its sequence, 1-based
    start: Point

    # The last position of this Location on its sequence, 1-based and inclusive
    end: Point

    # The strand of this Location with respect to its sequence
    strand: Strand

    # The sequence record this Location refers to, if it is not the record being annotated
    accession: Optional[AccessionID]

    @abstractmethod
    def __str__(self):
        """Returns the INSDC string representation of this Location"""

    @abstractmethod
    def __eq__(self, other):
        """Returns True iff this Location is equal to other object"""

    @abstractmethod
    def __hash__(self):
        """Returns a hash code satisfying location1 == location2 => hash(location1) == hash(location2)"""

    @abstractmethod
    def __repr__(self):
        """Returns the 'official' string representation of this Location"""

    @property
    @abstractmethod
    def is_complex(self) -> bool:
        """Does this Location contain sub-locations?"""

    @property
    @abstractmethod
    def sub_locations(self) -> Tuple["Location", ...]:
        """The direct children of this Location. Empty for a simple location."""

    @abstractmethod
    def leaves(self) -> Tuple["SimpleLocation", ...]:
        """All simple locations contained in this Location, in depth first order."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Returns a dictionary that can be loaded by :class:`~inscripta.insdc.io.models.LocationModel`"""

    @abstractmethod
    def to_biopython(self) -> Union[FeatureLocation, BioCompoundLocation]:
        """Convert to the equivalent BioPython location. Coordinates become 0-based and half-open."""

    def to_insdc(self) -> str:
        """Render this Location in INSDC syntax. Parsing the result gives back an equal Location."""
        return str(self)


class SimpleLocation(Location):
    """A single position, or a range between two positions, on one strand of one sequence"""

    def __init__(
        self,
        start: Point,
        end: Point,
        strand: Strand,
        accession: Optional[AccessionID] = None,
        between_bases: bool = False,
    ):
        """
        Parameters
        ----------
        start
            1-based first position
        end
            1-based last position. For a single position location this is the same Point as ``start``.
        strand
            Strand of this Location; must be PLUS or MINUS
        accession
            Sequence record the coordinates refer to, if not the current record
        between_bases
            True if the two positions denote the site between two adjacent bases (``3^4``) rather than
            a span covering both
        """
        if not strand.is_directional:
            raise LocationException(f"Simple locations must have a direction, got strand {strand.name}")
        self.start = start
        self.end = end
        self.strand = strand
        self.accession = accession
        self.between_bases = between_bases

    def __str__(self):
        if self.strand is Strand.MINUS:
            return f"{COMPLEMENT}({self._stranded_str()})"
        return self._stranded_str()

    def _stranded_str(self) -> str:
        prefix = f"{self.accession.id}:" if self.accession else ""
        if self.between_bases:
            return f"{prefix}{self.start.to_insdc('<')}^{self.end.to_insdc('>')}"
        if self.start == self.end:
            return f"{prefix}{self.start.to_insdc('<')}"
        return f"{prefix}{self.start.to_insdc('<')}..{self.end.to_insdc('>')}"

    def __repr__(self):
        return f"<SimpleLocation {str(self)}>"

    def __eq__(self, other):
        if type(other) is not SimpleLocation:
            return False
        if self.start != other.start:
            return False
        if self.end != other.end:
            return False
        if self.strand is not other.strand:
            return False
        if self.accession != other.accession:
            return False
        if self.between_bases != other.between_bases:
            return False
        return True

    def __hash__(self):
        return hash((self.start, self.end, self.strand, self.accession, self.between_bases))

    @property
    def is_complex(self) -> bool:
        return False

    @property
    def is_single_position(self) -> bool:
        return self.start == self.end and not self.between_bases

    @property
    def sub_locations(self) -> Tuple[Location, ...]:
        return tuple()

    def leaves(self) -> Tuple["SimpleLocation", ...]:
        return (self,)

    def to_dict(self) -> Dict[str, Any]:
        return dict(
            start=self.start.position,
            end=self.end.position,
            strand=self.strand.name,
            start_uncertain=self.start.uncertain,
            end_uncertain=self.end.uncertain,
            between_bases=self.between_bases,
            accession=self.accession.id if self.accession else None,
            data_source=self.accession.source.name if self.accession else None,
        )

    def to_feature_location(self) -> FeatureLocation:
        """Convert to a BioPython FeatureLocation."""
        if self.between_bases:
            start = end = self.start.position
        else:
            start = self.start.position - 1
            end = self.end.position
        if start < 0 or start > end:
            raise LocationException(f"Cannot convert {self} to a BioPython location")
        ref = self.accession.id if self.accession else None
        ref_db = self.accession.source.value if self.accession else None
        return FeatureLocation(
            _to_biopython_position(self.start, start, BeforePosition),
            _to_biopython_position(self.end, end, AfterPosition),
            self.strand.value,
            ref=ref,
            ref_db=ref_db,
        )

    def to_biopython(self) -> FeatureLocation:
        """Provide a shared function signature with other Locations"""
        return self.to_feature_location()


class CompoundLocation(Location):
    """An ordered list of two or more sub-locations combined under a keyword such as ``join`` or ``order``.

    The span, strand and accession are derived from the members: the span runs from the lowest start to the highest
    end, and strand and accession are only set if all members agree on them.
    """

    def __init__(self, sub_locations: List[Location], join_type: str):
        if len(sub_locations) < 2:
            raise LocationException(
                f"A compound location needs at least two sub-locations, got {len(sub_locations)}"
            )
        self._sub_locations = tuple(sub_locations)
        self.join_type = join_type
        self.start = min((sub.start for sub in self._sub_locations), key=lambda p: p.position)
        self.end = max((sub.end for sub in self._sub_locations), key=lambda p: p.position)

        strands = {sub.strand for sub in self._sub_locations}
        self.strand = strands.pop() if len(strands) == 1 else Strand.UNSTRANDED

        accessions = {sub.accession for sub in self._sub_locations}
        self.accession = accessions.pop() if len(accessions) == 1 else None

    def __str__(self):
        return f"{self.join_type}({','.join(str(sub) for sub in self._sub_locations)})"

    def __repr__(self):
        return f"<CompoundLocation {str(self)}>"

    def __eq__(self, other):
        if type(other) is not CompoundLocation:
            return False
        if self.join_type != other.join_type:
            return False
        return self._sub_locations == other._sub_locations

    def __hash__(self):
        return hash((self.join_type, self._sub_locations))

    def __len__(self):
        return len(self._sub_locations)

    def __iter__(self) -> Iterator[Location]:
        return iter(self._sub_locations)

    @property
    def is_complex(self) -> bool:
        return True

    @property
    def sub_locations(self) -> Tuple[Location, ...]:
        return self._sub_locations

    @property
    def is_circular(self) -> bool:
        """A plus strand compound location on a single sequence is circular if its members stop increasing, i.e.
        the location runs across the origin of a circular sequence."""
        if self.strand is not Strand.PLUS:
            return False
        if len({sub.accession for sub in self._sub_locations}) > 1:
            return False
        last_max = 0
        for sub in self._sub_locations:
            if sub.end.position <= last_max:
                return True
            last_max = sub.end.position
        return False

    @lru_cache(maxsize=1)
    def leaves(self) -> Tuple[SimpleLocation, ...]:
        return tuple(leaf for sub in self._sub_locations for leaf in sub.leaves())

    def to_dict(self) -> Dict[str, Any]:
        return dict(
            start=self.start.position,
            end=self.end.position,
            strand=self.strand.name,
            join_type=self.join_type,
            sub_locations=[sub.to_dict() for sub in self._sub_locations],
        )

    def to_compound_location(self) -> BioCompoundLocation:
        """Convert to a BioPython CompoundLocation. BioPython does not nest compound locations, so all leaves
        are flattened into a single list of parts."""
        return BioCompoundLocation([leaf.to_biopython() for leaf in self.leaves()], operator=self.join_type)

    def to_biopython(self) -> BioCompoundLocation:
        """Provide a shared function signature with other Locations"""
        return self.to_compound_location()


def _to_biopython_position(point: Point, position: int, uncertain_type: type) -> Position:
    if point.unknown:
        return UnknownPosition()
    if point.uncertain:
        return uncertain_type(position)
    return ExactPosition(position)
