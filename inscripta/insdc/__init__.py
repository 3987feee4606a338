__version__ = "0.1.0"

from inscripta.insdc.location import (  # noqa F401
    AccessionID,
    CompoundLocation,
    DataSource,
    Location,
    Point,
    SimpleLocation,
    Strand,
)
from inscripta.insdc.parser import InsdcParser, parse_location  # noqa F401
