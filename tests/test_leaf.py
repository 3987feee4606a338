import pytest

from inscripta.insdc.exc import MalformedLeafError
from inscripta.insdc.leaf import LeafMatch, match_leaf, match_segment
from inscripta.insdc.location import AccessionID, DataSource, Point, SimpleLocation, Strand


class TestMatchSegment:
    @pytest.mark.parametrize(
        "segment,expected",
        [
            ("5", LeafMatch("", Point(5), Point(5), False)),
            ("0", LeafMatch("", Point(0), Point(0), False)),
            ("<5", LeafMatch("", Point(5, uncertain=True), Point(5, uncertain=True), False)),
            (">5", LeafMatch("", Point(5, uncertain=True), Point(5, uncertain=True), False)),
            ("AB12345:5", LeafMatch("AB12345", Point(5), Point(5), False)),
            (":5", LeafMatch("", Point(5), Point(5), False)),
            ("X5", LeafMatch("X", Point(5), Point(5), False)),
            ("1..4", LeafMatch("", Point(1), Point(4), False)),
            ("1.4", LeafMatch("", Point(1), Point(4), False)),
            ("1...4", LeafMatch("", Point(1), Point(4), False)),
            ("3^4", LeafMatch("", Point(3), Point(4), True)),
            ("<3..>9", LeafMatch("", Point(3, uncertain=True), Point(9, uncertain=True), False)),
            ("1..>888", LeafMatch("", Point(1), Point(888, uncertain=True), False)),
            ("AB12345:1..4", LeafMatch("AB12345", Point(1), Point(4), False)),
            ("AB12345:3^4", LeafMatch("AB12345", Point(3), Point(4), True)),
            ("J00194.1:100..202", LeafMatch("J00194.1", Point(100), Point(202), False)),
            ("NC_000913.3:<1..5", LeafMatch("NC_000913.3", Point(1, uncertain=True), Point(5), False)),
        ],
    )
    def test_valid(self, segment, expected):
        assert match_segment(segment) == expected

    @pytest.mark.parametrize(
        "segment,reason",
        [
            ("1#4", "expected a range operator"),
            ("3^^4", "unsupported range operator '^^'"),
            ("3.^4", "unsupported range operator '.^'"),
            ("1..", "expected a position after the range operator"),
            ("abc", "expected a position"),
            ("<>5", "expected a position"),
            ("1..4x", "unexpected text 'x'"),
            ("AB:CD:5", "expected a position"),
            ("", "expected a position"),
            ("1" * 5000, "position too large"),
            ("1.." + "2" * 5000, "position too large"),
            ("1" * 5000 + "x", "expected a range operator"),
            ("1" + "." * 5000 + "^4", "unsupported range operator"),
        ],
    )
    def test_malformed(self, segment, reason):
        with pytest.raises(MalformedLeafError) as exc_info:
            match_segment(segment)
        assert exc_info.value.text == segment
        assert reason in str(exc_info.value)

    def test_long_segment_is_linear(self):
        # every accession split point is tried, so each attempt must not rescan the segment
        segment = "A" * 20000 + "1" * 20000 + "x"
        with pytest.raises(MalformedLeafError):
            match_segment(segment)

    def test_long_position(self):
        digits = "9" * 1000
        obs = match_segment(f"{digits}..{digits}0")
        assert obs.start == Point(int(digits))
        assert obs.end == Point(int(digits + "0"))


class TestMatchLeaf:
    def test_no_accession(self):
        assert match_leaf("1..4", Strand.MINUS) == SimpleLocation(Point(1), Point(4), Strand.MINUS)

    def test_single_position_shares_point(self):
        obs = match_leaf("<5", Strand.PLUS)
        assert obs.start is obs.end
        assert obs.is_single_position

    def test_accession_uses_data_source(self):
        obs = match_leaf("AB12345:1..4", Strand.PLUS, DataSource.GENBANK)
        assert obs.accession == AccessionID("AB12345", DataSource.GENBANK)

    def test_default_data_source(self):
        assert match_leaf("AB12345:1..4", Strand.PLUS).accession == AccessionID("AB12345", DataSource.ENA)

    def test_between_bases(self):
        obs = match_leaf("3^4", Strand.PLUS)
        assert obs.between_bases
        assert obs.start == Point(3)
        assert obs.end == Point(4)
