"""
Test importing and exporting LocationModel objects from JSON.
"""
import json

import pytest

from inscripta.insdc.exc import LocationException
from inscripta.insdc.io.models import LocationModel
from inscripta.insdc.location import AccessionID, CompoundLocation, DataSource, Point, SimpleLocation, Strand


class TestLocationModel:
    @pytest.mark.parametrize(
        "text",
        [
            "5",
            "<5",
            "AB12345:1..4",
            "AB12345:3^4",
            "<3..>9",
            "complement(5..8)",
            "join(1..4,6..10)",
            "complement(join(2691..4571,4918..5163))",
            "order(join(1..4,6..10),J00194.1:100..202)",
        ],
    )
    def test_json_round_trip(self, parser, text):
        location = parser.parse(text)
        model = LocationModel.from_location(location)
        dumped = json.dumps(LocationModel.Schema().dump(model))
        loaded = LocationModel.Schema().load(json.loads(dumped))
        assert loaded == model
        assert loaded.to_location() == location

    def test_simple_location_model(self):
        location = SimpleLocation(
            Point(3, uncertain=True), Point(9), Strand.MINUS, accession=AccessionID("AB1", DataSource.GENBANK)
        )
        model = LocationModel.from_location(location)
        assert model == LocationModel(
            start=3,
            end=9,
            strand=Strand.MINUS,
            start_uncertain=True,
            end_uncertain=False,
            between_bases=False,
            accession="AB1",
            data_source=DataSource.GENBANK,
        )
        assert model.to_location() == location

    def test_compound_location_model(self):
        location = CompoundLocation(
            [SimpleLocation(Point(1), Point(4), Strand.PLUS), SimpleLocation(Point(6), Point(10), Strand.PLUS)],
            "join",
        )
        model = LocationModel.from_location(location)
        assert model.join_type == "join"
        assert model.start == 1
        assert model.end == 10
        assert len(model.sub_locations) == 2
        assert model.sub_locations[1].start == 6

    def test_accession_defaults_to_ena(self):
        model = LocationModel(start=1, end=4, strand=Strand.PLUS, accession="AB1")
        assert model.to_location().accession == AccessionID("AB1", DataSource.ENA)

    def test_sub_locations_require_join_type(self):
        model = LocationModel(
            start=1,
            end=10,
            strand=Strand.PLUS,
            sub_locations=[
                LocationModel(start=1, end=4, strand=Strand.PLUS),
                LocationModel(start=6, end=10, strand=Strand.PLUS),
            ],
        )
        with pytest.raises(LocationException):
            model.to_location()
