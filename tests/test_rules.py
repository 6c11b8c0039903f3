from fractions import Fraction

import pytest

from leasecheck.ledger import OwnershipLedger
from leasecheck.models import (
    InstrumentRecord,
    InstrumentType,
    LifeEstate,
    MineralReservation,
)
from leasecheck.rules import (
    LIFE_ESTATE_NOTE,
    RuleOutcome,
    apply_instrument,
    unknown_share_note,
)


def deed(instrument_type=InstrumentType.WARRANTY_DEED, **kwargs):
    fields = {"document_id": "D1", "grantors": ["A"], "grantees": ["B"]}
    fields.update(kwargs)
    return InstrumentRecord(instrument_type=instrument_type, **fields)


def ledger_with(**balances):
    ledger = OwnershipLedger()
    for party, value in balances.items():
        ledger.set_balance(party, Fraction(value))
    return ledger


def test_conveys_all_interest_splits_equally_among_grantees():
    ledger = ledger_with(A=Fraction(1, 3))
    flags = []

    outcome = apply_instrument(deed(grantees=["B", "C"], conveys_all_interest=True), ledger, flags)

    assert outcome is RuleOutcome.CONVEYED_ALL
    assert ledger.balance("A") == 0
    assert ledger.balance("B") == Fraction(1, 6)
    assert ledger.balance("C") == Fraction(1, 6)
    assert ledger.total() == Fraction(1, 3)
    assert flags == []


def test_conveys_all_with_unknown_grantor_share_is_flagged():
    ledger = ledger_with(B=Fraction(1, 2))
    flags = []

    apply_instrument(deed(conveys_all_interest=True), ledger, flags)

    assert [f.note for f in flags] == [unknown_share_note("A")]
    assert flags[0].doc == "D1"
    assert ledger.as_dict() == {"B": Fraction(1, 2)}


def test_conveys_all_flags_each_grantor_without_share():
    ledger = ledger_with(A=1)
    flags = []

    apply_instrument(deed(grantors=["A", "X"], grantees=["B"], conveys_all_interest=True), ledger, flags)

    assert ledger.balance("B") == 1
    assert ledger.balance("A") == 0
    assert [f.note for f in flags] == [unknown_share_note("X")]


def test_conveys_all_with_no_grantees_is_flagged():
    ledger = ledger_with(A=1)
    flags = []

    apply_instrument(deed(grantees=[], conveys_all_interest=True), ledger, flags)

    assert ledger.balance("A") == 1
    assert len(flags) == 1


def test_negative_grantor_balance_is_flagged_not_conveyed():
    ledger = ledger_with(A=Fraction(-1, 4))
    flags = []

    apply_instrument(deed(conveys_all_interest=True), ledger, flags)

    assert ledger.balance("A") == Fraction(-1, 4)
    assert "B" not in ledger
    assert len(flags) == 1


def test_fraction_moves_fixed_share_of_tract():
    ledger = ledger_with(A=Fraction(1, 8))
    flags = []

    outcome = apply_instrument(
        deed(grantors=["A", "Z"], grantees=["B", "C"], fraction_conveyed="1/2"), ledger, flags
    )

    assert outcome is RuleOutcome.CONVEYED_FRACTION
    assert ledger.balance("A") == Fraction(1, 8) - Fraction(1, 4)
    assert ledger.balance("Z") == Fraction(-1, 4)
    assert ledger.balance("B") == Fraction(1, 4)
    assert ledger.balance("C") == Fraction(1, 4)
    assert flags == []


def test_fraction_without_grantors_only_credits_grantees():
    ledger = OwnershipLedger()
    apply_instrument(deed(grantors=[], grantees=["A"], fraction_conveyed="1/1"), ledger, [])
    assert ledger.as_dict() == {"A": Fraction(1)}


def test_conveys_all_takes_precedence_over_fraction():
    ledger = ledger_with(A=1)
    apply_instrument(deed(conveys_all_interest=True, fraction_conveyed="1/4"), ledger, [])
    assert ledger.as_dict() == {"A": 0, "B": 1}


@pytest.mark.parametrize("instrument_type", [
    InstrumentType.EASEMENT,
    InstrumentType.MORTGAGE,
    InstrumentType.SURFACE_ONLY,
    InstrumentType.OIL_GAS_LEASE,
])
def test_non_conveying_types_leave_ledger_alone(instrument_type):
    ledger = ledger_with(A=1)
    flags = []

    outcome = apply_instrument(
        deed(instrument_type, conveys_all_interest=True, fraction_conveyed="1/2"), ledger, flags
    )

    assert outcome is RuleOutcome.SKIPPED
    assert ledger.as_dict() == {"A": 1}
    assert flags == []


def test_life_estate_is_flagged_and_skipped():
    ledger = ledger_with(A=1)
    flags = []

    outcome = apply_instrument(
        deed(life_estate=LifeEstate(present=True), conveys_all_interest=True), ledger, flags
    )

    assert outcome is RuleOutcome.FLAGGED
    assert ledger.as_dict() == {"A": 1}
    assert len(flags) == 1
    assert flags[0].note == LIFE_ESTATE_NOTE
    assert flags[0].doc == "D1"


def test_life_estate_type_is_flagged():
    flags = []
    apply_instrument(deed(InstrumentType.LIFE_ESTATE, fraction_conveyed="1/2"), OwnershipLedger(), flags)
    assert [f.note for f in flags] == [LIFE_ESTATE_NOTE]


@pytest.mark.parametrize("instrument_type", [
    InstrumentType.WARRANTY_DEED,
    InstrumentType.QUIT_CLAIM_DEED,
    InstrumentType.PERSONAL_REPRESENTATIVE_DEED,
    InstrumentType.TRUST_DEED,
    InstrumentType.DEED,
])
def test_deed_with_mineral_reservation_is_skipped(instrument_type):
    ledger = ledger_with(A=1)
    flags = []

    outcome = apply_instrument(
        deed(instrument_type, mineral_reservation=MineralReservation(reserved=True), conveys_all_interest=True),
        ledger,
        flags
    )

    assert outcome is RuleOutcome.SKIPPED
    assert ledger.as_dict() == {"A": 1}
    assert flags == []


def test_reservation_on_other_type_does_not_skip():
    ledger = ledger_with(A=1)
    apply_instrument(
        deed(InstrumentType.OTHER, mineral_reservation=MineralReservation(reserved=True), conveys_all_interest=True),
        ledger,
        []
    )
    assert ledger.balance("B") == 1


def test_no_rule_leaves_ledger_alone_without_flag():
    ledger = ledger_with(A=1)
    flags = []

    outcome = apply_instrument(deed(fraction_conveyed="an undivided interest"), ledger, flags)

    assert outcome is RuleOutcome.NO_RULE
    assert ledger.as_dict() == {"A": 1}
    assert flags == []


def test_unrecognized_type_is_flagged_and_still_replayed():
    ledger = ledger_with(A=1)
    flags = []

    apply_instrument(
        deed(InstrumentType.OTHER, raw_instrument_type="Affidavit of Heirship", unrecognized_type=True,
             conveys_all_interest=True),
        ledger,
        flags
    )

    assert ledger.balance("B") == 1
    assert len(flags) == 1
    assert "Affidavit of Heirship" in flags[0].note
