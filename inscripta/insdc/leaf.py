"""
Matching of leaf segments: the delimiter-free pieces of a location string such as ``AB12345:<1..>40`` or ``3^4``.

Two grammars are recognized::

    range   [accession][:][<|>]digits operator [<|>]digits
    single  [accession][:][<|>]digits

``operator`` is a run of one or more ``.`` or exactly one ``^``. The accession is optional and consists of letters,
digits, dots and underscores. Because accessions may themselves end in digits and dots, the accession is taken to be
the *shortest* prefix for which the remainder of the segment matches the grammar. The range grammar is tried before
the single position grammar.

The grammars are matched by hand rather than with regular expressions, so that every way a segment can fail is
reported with a specific reason.
"""
import string
from typing import List, Optional, Tuple, NamedTuple

from inscripta.insdc.exc import MalformedLeafError
from inscripta.insdc.location.accession import AccessionID, DataSource
from inscripta.insdc.location.location import SimpleLocation
from inscripta.insdc.location.point import Point
from inscripta.insdc.location.strand import Strand

ACCESSION_CHARACTERS = frozenset(string.ascii_letters + string.digits + "._")
DIGITS = frozenset(string.digits)
UNCERTAINTY_MARKERS = frozenset("<>")
DOTS = frozenset(".")
OPERATOR_CHARACTERS = frozenset(".^")
ACCESSION_SEPARATOR = ":"
BETWEEN_BASES_OPERATOR = "^"


class LeafMatch(NamedTuple):
    """The pieces of a segment that matched one of the two grammars."""

    accession: str
    start: Point
    end: Point
    between_bases: bool


class _Failure(NamedTuple):
    offset: int
    reason: str
    # end of the segment text quoted after the reason, if any
    quote_end: Optional[int] = None

    def describe(self, segment: str) -> str:
        if self.quote_end is None:
            return self.reason
        return f"{self.reason} '{segment[self.offset:self.quote_end]}'"


class _PointSpan(NamedTuple):
    """Offsets of the digits of a position, before they are converted to a Point."""

    start: int
    end: int
    uncertain: bool


class _RawMatch(NamedTuple):
    start: _PointSpan
    end: _PointSpan
    between_bases: bool


def _run_ends(segment: str, characters: frozenset) -> List[int]:
    """For every offset, the offset just past the run of ``characters`` beginning there."""
    ends = [len(segment)] * (len(segment) + 1)
    for i in range(len(segment) - 1, -1, -1):
        ends[i] = ends[i + 1] if segment[i] in characters else i
    return ends


class _SegmentScanner:
    """Matches one segment at any accession split point. The runs of digits, dots and operator characters are found
    once up front, so trying every split point stays linear in the length of the segment."""

    def __init__(self, segment: str):
        self.segment = segment
        self.digit_ends = _run_ends(segment, DIGITS)
        self.dot_ends = _run_ends(segment, DOTS)
        self.operator_ends = _run_ends(segment, OPERATOR_CHARACTERS)

    def skip_separator(self, offset: int) -> int:
        if offset < len(self.segment) and self.segment[offset] == ACCESSION_SEPARATOR:
            return offset + 1
        return offset

    def scan_point(self, offset: int) -> Tuple[Optional[_PointSpan], int]:
        """Read an optional uncertainty marker followed by digits. Returns the digits (or None if there are none)
        and the offset just past what was consumed."""
        uncertain = offset < len(self.segment) and self.segment[offset] in UNCERTAINTY_MARKERS
        if uncertain:
            offset += 1
        end = self.digit_ends[offset]
        if end == offset:
            return None, offset
        return _PointSpan(offset, end, uncertain), end

    def match_range(self, split: int) -> Tuple[Optional[_RawMatch], _Failure]:
        start, offset = self.scan_point(self.skip_separator(split))
        if start is None:
            return None, _Failure(offset, "expected a position")

        operator_end = self.operator_ends[offset]
        if operator_end == offset:
            return None, _Failure(offset, "expected a range operator '..' or '^'")
        if operator_end == offset + 1 and self.segment[offset] == BETWEEN_BASES_OPERATOR:
            between_bases = True
        elif self.dot_ends[offset] == operator_end:
            between_bases = False
        else:
            return None, _Failure(offset, "unsupported range operator", operator_end)

        end, offset = self.scan_point(operator_end)
        if end is None:
            return None, _Failure(offset, "expected a position after the range operator")
        if offset != len(self.segment):
            return None, _Failure(offset, "unexpected text", len(self.segment))
        return _RawMatch(start, end, between_bases), _Failure(offset, "")

    def match_single(self, split: int) -> Tuple[Optional[_RawMatch], _Failure]:
        point, offset = self.scan_point(self.skip_separator(split))
        if point is None:
            return None, _Failure(offset, "expected a position")
        if offset != len(self.segment):
            return None, _Failure(offset, "unexpected text", len(self.segment))
        return _RawMatch(point, point, False), _Failure(offset, "")

    def to_point(self, span: _PointSpan) -> Point:
        try:
            position = int(self.segment[span.start:span.end])
        except ValueError as e:
            # int() refuses digit strings beyond the interpreter's conversion limit
            raise MalformedLeafError(
                f"Location '{self.segment}' has a position too large to parse at offset {span.start}", self.segment
            ) from e
        return Point(position, uncertain=span.uncertain)


def _accession_split_points(segment: str) -> range:
    """Offsets at which the accession may end, shortest accession first."""
    longest = 0
    while longest < len(segment) and segment[longest] in ACCESSION_CHARACTERS:
        longest += 1
    return range(0, longest + 1)


def match_segment(segment: str) -> LeafMatch:
    """Match a segment against the range grammar, then against the single position grammar.

    Raises:
        MalformedLeafError: if neither grammar matches, or a position has too many digits to convert. The message
            names the furthest point either grammar got to.
    """
    scanner = _SegmentScanner(segment)
    furthest = _Failure(0, "expected a position")
    progress = -1
    for matcher in (scanner.match_range, scanner.match_single):
        for split in _accession_split_points(segment):
            match, failure = matcher(split)
            if match is not None:
                start = scanner.to_point(match.start)
                end = start if match.end is match.start else scanner.to_point(match.end)
                return LeafMatch(segment[:split], start, end, match.between_bases)
            # how far the grammar itself got, not counting the accession
            if failure.offset - split > progress:
                furthest, progress = failure, failure.offset - split
    raise MalformedLeafError(
        f"Location '{segment}' is neither a single position nor a range: {furthest.describe(segment)} at offset "
        f"{furthest.offset}",
        segment,
    )


def match_leaf(segment: str, strand: Strand, data_source: DataSource = DataSource.ENA) -> SimpleLocation:
    """Build the :class:`~inscripta.insdc.location.location.SimpleLocation` a segment describes.

    Args:
        segment: Leaf text with all whitespace already removed, e.g. ``J00194.1:<100..202``.
        strand: Strand of the enclosing context.
        data_source: Database any accession in the segment belongs to.
    """
    match = match_segment(segment)
    accession = AccessionID(match.accession, data_source) if match.accession else None
    return SimpleLocation(match.start, match.end, strand, accession=accession, between_bases=match.between_bases)
