"""
:class:`Location` objects are the values produced by parsing an INSDC location string. A :class:`SimpleLocation`
is a single position or a range, a :class:`CompoundLocation` combines other locations under a keyword such as
``join``. Both are immutable.
"""

from inscripta.insdc.location.accession import AccessionID, DataSource  # noqa F401
from inscripta.insdc.location.point import Point  # noqa F401
from inscripta.insdc.location.strand import Strand  # noqa F401
from inscripta.insdc.location.location import Location, SimpleLocation, CompoundLocation  # noqa F401
