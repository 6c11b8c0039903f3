import pytest

from leasecheck.instrument_types import InstrumentTypeResolver
from leasecheck.models import InstrumentType


@pytest.mark.parametrize("raw, expected", [
    ("WD", InstrumentType.WARRANTY_DEED),
    ("Warranty Deed", InstrumentType.WARRANTY_DEED),
    ("WarrantyDeed", InstrumentType.WARRANTY_DEED),
    ("qcd", InstrumentType.QUIT_CLAIM_DEED),
    ("QUIT_CLAIM_DEED", InstrumentType.QUIT_CLAIM_DEED),
    ("easement", InstrumentType.EASEMENT),
    ("Mortgage", InstrumentType.MORTGAGE),
    ("surfaceonly", InstrumentType.SURFACE_ONLY),
    ("OGL", InstrumentType.OIL_GAS_LEASE),
    ("Oil & Gas Lease", InstrumentType.OIL_GAS_LEASE),
    ("lifeestate", InstrumentType.LIFE_ESTATE),
    ("prmd", InstrumentType.PERSONAL_REPRESENTATIVE_DEED),
    ("person-representative", InstrumentType.PERSONAL_REPRESENTATIVE_DEED),
    ("trustdeed", InstrumentType.TRUST_DEED),
    ("deed", InstrumentType.DEED),
    ("Mineral Deed", InstrumentType.DEED),
])
def test_known_labels(resolver, raw, expected):
    assert resolver.resolve(raw) is expected


def test_lease_wording_maps_to_oil_gas_lease(resolver):
    assert resolver.resolve("Paid-Up Oil and Gas Lease") is InstrumentType.OIL_GAS_LEASE
    assert resolver.resolve("Memorandum of Lease") is InstrumentType.OIL_GAS_LEASE


def test_release_is_not_a_lease(resolver):
    assert resolver.resolve("Release") is InstrumentType.OTHER


def test_close_misspelling_is_accepted(resolver):
    assert resolver.resolve("Warrenty Deed") is InstrumentType.WARRANTY_DEED


@pytest.mark.parametrize("raw", ["", None, "Affidavit of Heirship", "Assignment"])
def test_unrecognized_is_other(resolver, raw):
    assert resolver.resolve(raw) is InstrumentType.OTHER


def test_enum_member_passes_through(resolver):
    assert resolver.resolve(InstrumentType.TRUST_DEED) is InstrumentType.TRUST_DEED


def test_fuzzy_threshold_is_respected():
    strict = InstrumentTypeResolver({"warranty deed": InstrumentType.WARRANTY_DEED}, fuzzy_threshold=99)
    assert strict.resolve("Warrenty Deed") is InstrumentType.OTHER


@pytest.mark.parametrize("raw, expected", [
    ("Other", (InstrumentType.OTHER, True)),
    ("WD", (InstrumentType.WARRANTY_DEED, True)),
    ("Affidavit of Heirship", (InstrumentType.OTHER, False)),
    ("", (InstrumentType.OTHER, False)),
])
def test_match_reports_whether_label_was_recognized(resolver, raw, expected):
    assert resolver.match(raw) == expected
