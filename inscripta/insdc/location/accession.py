"""
Accessions tie a location to a sequence record other than the one currently being annotated, e.g. the ``J00194.1``
in ``J00194.1:100..202``. Every accession is qualified by the database it comes from.
"""
from dataclasses import dataclass

from inscripta.insdc.util.enum import HasMemberMixin


class DataSource(str, HasMemberMixin):
    """Sequence databases an accession can belong to."""

    ENA = "ENA"
    GENBANK = "GenBank"
    DDBJ = "DDBJ"
    REFSEQ = "RefSeq"
    UNIPROT = "UniProt"
    PDB = "PDB"
    ENSEMBL = "Ensembl"
    LOCAL = "local"


@dataclass(frozen=True)
class AccessionID:
    """An identifier plus the :class:`DataSource` it is defined in. Two accessions are equal only if both match."""

    id: str
    source: DataSource = DataSource.ENA

    def __str__(self):
        return self.id
