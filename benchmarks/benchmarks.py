from inscripta.insdc.io.models import LocationModel
from inscripta.insdc.parser import InsdcParser

SIMPLE_LOCATIONS = ["467", "340..565", "<345..500", "1..>888", "123^124", "J00194.1:100..202"]

# a spliced gene with many exons, as found in eukaryotic GenBank records
MANY_EXONS = "complement(join({}))".format(",".join(f"{start}..{start + 50}" for start in range(1, 100000, 100)))

NESTED = "order(" * 50 + "1..2,3..4" + ")" * 50


class ParseSimpleLocations:
    def setup(self):
        self.parser = InsdcParser()

    def time_parse_simple_locations(self):
        for location in SIMPLE_LOCATIONS:
            self.parser.parse(location)


class ParseCompoundLocations:
    repeat = (1, 5, 20.0)

    def setup(self):
        self.parser = InsdcParser()

    def time_parse_many_exons(self):
        self.parser.parse(MANY_EXONS)

    def mem_parse_many_exons(self):
        return self.parser.parse(MANY_EXONS)

    def time_parse_nested(self):
        self.parser.parse(NESTED)


class SerializeLocations:
    def setup(self):
        self.location = InsdcParser().parse(MANY_EXONS)

    def time_dump_many_exons(self):
        LocationModel.Schema().dump(LocationModel.from_location(self.location))

    def time_render_many_exons(self):
        self.location.to_insdc()
