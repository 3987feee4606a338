"""
Parse INSDC style location strings, as found in the feature tables of GenBank, ENA and DDBJ records.

A location is either a leaf (``467``, ``340..565``, ``<345..500``, ``102.110``, ``123^124``, ``J00194.1:100..202``) or
a keyword applied to a comma separated group of locations (``join(12..78,134..202)``, ``order(...)``,
``complement(34..126)``). Groups nest arbitrarily: ``complement(join(2691..4571,4918..5163))``.

The string is read one character at a time, left to right, without lookahead. Whitespace is ignored everywhere.
``complement`` does not produce a location of its own; it reverses the strand of everything parsed inside it. Every
other keyword is handed, together with the locations found inside its group, to a location builder, by default
:func:`~inscripta.insdc.location.builder.build_location`.
"""
import io
import logging
import sys
from typing import List, TextIO, Tuple, Union

from inscripta.insdc.constants import (
    COMPLEMENT,
    GROUP_OPEN,
    GROUP_CLOSE,
    SEPARATOR,
    DEFAULT_MAX_DEPTH,
    FRAMES_PER_GROUP,
    RECURSION_HEADROOM,
)
from inscripta.insdc.exc import (
    CardinalityError,
    InsdcParserError,
    LocationStreamError,
    NestingDepthError,
    StructuralMismatchError,
)
from inscripta.insdc.leaf import match_leaf
from inscripta.insdc.location.accession import DataSource
from inscripta.insdc.location.builder import LocationBuilder, build_location
from inscripta.insdc.location.location import Location
from inscripta.insdc.location.strand import Strand

logger = logging.getLogger(__name__)


class _CharacterReader:
    """Reads a text stream one character at a time and keeps what was consumed, for error messages."""

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._consumed = []

    def read(self) -> str:
        """Returns the next character, or an empty string once the stream is exhausted."""
        try:
            char = self._stream.read(1)
        except (OSError, ValueError) as e:
            raise LocationStreamError(f"Failed to read location after '{self.consumed}'", self.consumed) from e
        if char:
            self._consumed.append(char)
        return char

    @property
    def consumed(self) -> str:
        return "".join(self._consumed)


def max_supported_depth() -> int:
    """Deepest nesting a parser can follow before exhausting the interpreter stack at the current recursion limit."""
    return (sys.getrecursionlimit() - RECURSION_HEADROOM) // FRAMES_PER_GROUP


class InsdcParser:
    """Parser for INSDC style locations. Supports the full range of location types generated by GenBank, INSDC
    and ENA.

    A parser holds no state between calls and can be reused for any number of sequential parses.
    """

    def __init__(
        self,
        data_source: DataSource = DataSource.ENA,
        max_depth: int = DEFAULT_MAX_DEPTH,
        location_builder: LocationBuilder = build_location,
    ):
        """
        Args:
            data_source: Database every accession parsed by this instance is assigned to.
            max_depth: Deepest group nesting accepted. ``complement(join(1..2,3..4))`` has a depth of 2.
                Must fit within the interpreter recursion limit, see :func:`max_supported_depth`.
            location_builder: Called with the locations inside each group and the group's keyword, for every
                keyword other than ``complement``.
        """
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        if max_depth > max_supported_depth():
            raise ValueError(
                f"max_depth {max_depth} exceeds {max_supported_depth()}, the deepest nesting the current recursion "
                f"limit of {sys.getrecursionlimit()} allows"
            )
        self._data_source = data_source
        self.max_depth = max_depth
        self.location_builder = location_builder

    @property
    def data_source(self) -> DataSource:
        return self._data_source

    def parse(self, location: Union[str, TextIO]) -> Location:
        """Parse a location string, or a stream holding one location string, into a single Location.

        Args:
            location: The location text. A stream is read to its end.

        Returns:
            The parsed Location. A bare comma separated list without an enclosing keyword is not a single
            location and is rejected.

        Raises:
            CardinalityError: if no location, or more than one location, was found.
            InsdcParserError: for any other parsing failure.
        """
        reader = _CharacterReader(io.StringIO(location) if isinstance(location, str) else location)
        locations = self._scan_top_level(reader, Strand.PLUS)
        if len(locations) > 1:
            raise CardinalityError(
                f"Too many locations parsed from '{reader.consumed}': {locations}", reader.consumed
            )
        if not locations:
            raise CardinalityError(f"No locations parsed from '{reader.consumed}'", reader.consumed)
        logger.debug(f"Parsed location '{reader.consumed}' to {locations[0]!r}")
        return locations[0]

    def scan(self, stream: Union[str, TextIO], strand: Strand = Strand.PLUS) -> List[Location]:
        """Parse every top level location in a stream, e.g. both locations in ``1..4,complement(6..10)``.

        Args:
            stream: The location text.
            strand: Strand of the context the text appears in. Leaves outside any ``complement`` get this strand.

        Returns:
            The locations in the order they appear. May be empty.

        Raises:
            ValueError: if ``strand`` is not PLUS or MINUS.
        """
        if not strand.is_directional:
            raise ValueError(f"Locations can only be scanned on a directional strand, got {strand.name}")
        reader = _CharacterReader(io.StringIO(stream) if isinstance(stream, str) else stream)
        return self._scan_top_level(reader, strand)

    def _scan_top_level(self, reader: _CharacterReader, strand: Strand) -> List[Location]:
        try:
            locations, closed = self._scan(reader, strand, 0)
        except InsdcParserError as e:
            logger.debug(f"Failed to parse location '{reader.consumed}': {e}")
            raise
        if closed:
            raise StructuralMismatchError(f"Unbalanced '{GROUP_CLOSE}' in '{reader.consumed}'", reader.consumed)
        return locations

    def _scan(self, reader: _CharacterReader, strand: Strand, depth: int) -> Tuple[List[Location], bool]:
        """Scan until the end of the stream or the ``)`` closing the current group.

        Returns:
            The locations found, and whether scanning stopped on a ``)``.
        """
        if depth > self.max_depth:
            raise NestingDepthError(
                f"Location is nested more than {self.max_depth} groups deep: '{reader.consumed}'", reader.consumed
            )
        buffer = []
        locations = []
        while True:
            char = reader.read()
            if not char:
                break
            if char == GROUP_OPEN:
                keyword = "".join(buffer)
                buffer.clear()
                locations.extend(self._scan_group(reader, keyword, strand, depth))
            elif char == SEPARATOR or char == GROUP_CLOSE:
                if buffer:
                    locations.append(match_leaf("".join(buffer), strand, self._data_source))
                    buffer.clear()
                if char == GROUP_CLOSE:
                    return locations, True
            elif not char.isspace():
                buffer.append(char)

        if buffer:
            locations.append(match_leaf("".join(buffer), strand, self._data_source))
        return locations, False

    def _scan_group(self, reader: _CharacterReader, keyword: str, strand: Strand, depth: int) -> List[Location]:
        """Parse the contents of a group whose ``(`` was just read."""
        if not keyword:
            raise StructuralMismatchError(
                f"Group opened without a keyword in '{reader.consumed}'", reader.consumed
            )
        is_complement = keyword == COMPLEMENT
        sub_locations, closed = self._scan(reader, strand.reverse() if is_complement else strand, depth + 1)
        if not closed:
            raise StructuralMismatchError(
                f"Group '{keyword}{GROUP_OPEN}' is never closed in '{reader.consumed}'", reader.consumed
            )
        if not is_complement:
            return [self.location_builder(sub_locations, keyword)]
        if not sub_locations:
            raise StructuralMismatchError(
                f"Group '{COMPLEMENT}{GROUP_OPEN}{GROUP_CLOSE}' contains no locations", reader.consumed
            )
        return sub_locations


def parse_location(location: Union[str, TextIO], data_source: DataSource = DataSource.ENA) -> Location:
    """Parse a single INSDC location string with a default :class:`InsdcParser`."""
    return InsdcParser(data_source=data_source).parse(location)
