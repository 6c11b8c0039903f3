import pytest

from leasecheck import LeaseCheckEngine
from leasecheck.config import load_settings
from leasecheck.instrument_types import InstrumentTypeResolver

TRACT_KEY = "1S-2W Sec 14"
TRACT = {"trs": "1S-2W", "sec": "14"}
OTHER_TRACT = {"trs": "3N-4E", "sec": "22"}


def make_event(**overrides):
    """Extracted event on the test tract, as the extraction step emits it"""
    event = {
        "doc_id": "DOC-1",
        "instrument_type": "WD",
        "recorded": "2010-01-01",
        "grantors": ["A"],
        "grantees": ["B"],
        "tracts": [TRACT],
        "conveys_all_interest": False,
    }
    event.update(overrides)
    return event


def seed_event(owner="A", fraction="1/1", recorded="1950-01-01", doc_id="SEED"):
    """Grant from nobody, used to give a party a starting interest"""
    return make_event(
        doc_id=doc_id,
        instrument_type="Patent",
        recorded=recorded,
        grantors=[],
        grantees=[owner],
        fraction_whole=fraction,
    )


@pytest.fixture(scope="session")
def settings():
    return load_settings()


@pytest.fixture(scope="session")
def engine(settings):
    return LeaseCheckEngine(settings=settings)


@pytest.fixture(scope="session")
def resolver(settings):
    return InstrumentTypeResolver(
        settings.instrument_type_aliases,
        fuzzy_threshold=settings.fuzzy_type_threshold
    )
