import pytest

from inscripta.insdc.parser import InsdcParser


@pytest.fixture
def parser() -> InsdcParser:
    return InsdcParser()
