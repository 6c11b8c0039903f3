"""
Transfer rules: how one instrument changes the ownership ledger.
"""

from enum import Enum
from fractions import Fraction
from typing import List

from loguru import logger

from .fraction_parser import parse_fraction
from .ledger import OwnershipLedger
from .models import DEED_TYPES, Flag, InstrumentRecord, InstrumentType

LIFE_ESTATE_NOTE = "Life estate detected; confirm termination status"

# Instruments that never touch mineral/fee ownership
NON_CONVEYING_TYPES = frozenset({
    InstrumentType.EASEMENT,
    InstrumentType.MORTGAGE,
    InstrumentType.SURFACE_ONLY,
    InstrumentType.OIL_GAS_LEASE,
})


class RuleOutcome(str, Enum):
    SKIPPED = "skipped"
    FLAGGED = "flagged"
    CONVEYED_ALL = "conveyed_all"
    CONVEYED_FRACTION = "conveyed_fraction"
    NO_RULE = "no_rule"


def unknown_share_note(grantor: str) -> str:
    return f"Conveys all interest but unknown grantor share for {grantor}"


def unrecognized_type_note(raw_type: str) -> str:
    return f"Unrecognized instrument type '{raw_type}'; treated as Other"


def convey_all_interest(record: InstrumentRecord, ledger: OwnershipLedger, flags: List[Flag]):
    """Move each grantor's whole balance to the grantees in equal shares"""
    grantees = record.grantees
    for grantor in record.grantors:
        grantor_share = ledger.balance(grantor)
        if grantor_share > 0 and grantees:
            share = grantor_share / len(grantees)
            ledger.set_balance(grantor, Fraction(0))
            for grantee in grantees:
                ledger.credit(grantee, share)
        else:
            flags.append(Flag(doc=record.document_id, note=unknown_share_note(grantor)))


def convey_fraction(record: InstrumentRecord, fraction: Fraction, ledger: OwnershipLedger):
    """
    Move a fixed fraction of the whole tract from the grantors to the grantees.

    The fraction is independent of what the grantors currently hold, so a
    grantor balance can go negative here.
    """
    if record.grantors:
        per_grantor = fraction / len(record.grantors)
        for grantor in record.grantors:
            ledger.debit(grantor, per_grantor)
    if record.grantees:
        per_grantee = fraction / len(record.grantees)
        for grantee in record.grantees:
            ledger.credit(grantee, per_grantee)


def apply_instrument(record: InstrumentRecord, ledger: OwnershipLedger, flags: List[Flag]) -> RuleOutcome:
    """
    Apply one instrument to the ledger.

    Args:
        record: Instrument to replay
        ledger: Ledger for the current run (mutated)
        flags: Flag list for the current run (appended to)

    Returns:
        RuleOutcome describing what happened
    """
    instrument_type = record.instrument_type

    if instrument_type in NON_CONVEYING_TYPES:
        logger.debug(f"Skipping {instrument_type.value} {record.document_id or ''}")
        return RuleOutcome.SKIPPED

    if record.has_life_estate:
        flags.append(Flag(doc=record.document_id, note=LIFE_ESTATE_NOTE))
        return RuleOutcome.FLAGGED

    if instrument_type in DEED_TYPES and record.mineral_reserved:
        logger.debug(f"Skipping {instrument_type.value} {record.document_id or ''}: minerals reserved")
        return RuleOutcome.SKIPPED

    if record.unrecognized_type and record.raw_instrument_type.strip():
        flags.append(Flag(doc=record.document_id, note=unrecognized_type_note(record.raw_instrument_type)))

    if record.conveys_all_interest:
        convey_all_interest(record, ledger, flags)
        return RuleOutcome.CONVEYED_ALL

    fraction = parse_fraction(record.fraction_conveyed)
    if fraction is not None:
        convey_fraction(record, fraction, ledger)
        return RuleOutcome.CONVEYED_FRACTION

    # Neither "all interest" nor a parseable fraction: left for review upstream
    logger.debug(f"No transfer rule for {record.document_id or record.date_key}")
    return RuleOutcome.NO_RULE
