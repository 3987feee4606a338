"""
Data models. These models allow for validation of inputs to a :class:`~inscripta.insdc.location.Location`, acting as
a JSON schema for serializing and deserializing parsed locations.
"""
from typing import List, Optional, ClassVar, Type

from marshmallow import Schema  # noqa: F401
from marshmallow_dataclass import dataclass

from inscripta.insdc.exc import LocationException
from inscripta.insdc.location.accession import AccessionID, DataSource
from inscripta.insdc.location.location import Location, SimpleLocation, CompoundLocation
from inscripta.insdc.location.point import Point
from inscripta.insdc.location.strand import Strand


@dataclass
class BaseModel:
    """Base for all of the models."""

    Schema: ClassVar[Type[Schema]] = Schema  # noqa: F811

    class Meta:
        ordered = True


@dataclass
class LocationModel(BaseModel):
    """Data model that allows construction of a :class:`~inscripta.insdc.location.Location`.

    A model with ``sub_locations`` describes a :class:`~inscripta.insdc.location.CompoundLocation`; for those,
    ``start``, ``end`` and ``strand`` are informational only, as they are derived from the members. A model without
    ``sub_locations`` describes a :class:`~inscripta.insdc.location.SimpleLocation`.
    """

    start: int
    end: int
    strand: Strand
    start_uncertain: Optional[bool] = False
    end_uncertain: Optional[bool] = False
    between_bases: Optional[bool] = False
    accession: Optional[str] = None
    data_source: Optional[DataSource] = None
    join_type: Optional[str] = None
    sub_locations: Optional[List["LocationModel"]] = None

    def to_location(self) -> Location:
        """Construct a :class:`~inscripta.insdc.location.Location` from a :class:`LocationModel`."""
        if self.sub_locations:
            if not self.join_type:
                raise LocationException("A location model with sub-locations must have a join type")
            return CompoundLocation([sub.to_location() for sub in self.sub_locations], self.join_type)

        start = Point(self.start, uncertain=bool(self.start_uncertain))
        end = Point(self.end, uncertain=bool(self.end_uncertain))
        if self.accession:
            accession = AccessionID(self.accession, self.data_source if self.data_source else DataSource.ENA)
        else:
            accession = None
        return SimpleLocation(start, end, self.strand, accession=accession, between_bases=bool(self.between_bases))

    @staticmethod
    def from_location(location: Location) -> "LocationModel":
        """Convert a :class:`~inscripta.insdc.location.Location` to a :class:`LocationModel`"""
        return LocationModel.Schema().load(location.to_dict())
