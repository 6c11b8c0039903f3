"""
Rendering of the final ledger into ownership rows.
"""

from fractions import Fraction
from typing import List

from .ledger import OwnershipLedger
from .models import Flag, OwnershipReport, OwnershipRow


def build_rows(ledger: OwnershipLedger, total_acres: float, status: str) -> List[OwnershipRow]:
    """
    One row per ledger entry, largest net acreage first.

    Negative balances are clamped to zero. sorted() is stable, so equal
    acreages keep the ledger's first-seen order.
    """
    acres = Fraction(total_acres)
    rows = []
    for owner, balance in ledger.items():
        share = max(Fraction(0), balance)
        net_acres = share * acres
        rows.append(OwnershipRow(
            owner=owner,
            percent=float(net_acres / acres * 100),
            net_acres=float(net_acres),
            status=status
        ))
    return sorted(rows, key=lambda row: row.net_acres, reverse=True)


def build_report(
    ledger: OwnershipLedger,
    flags: List[Flag],
    total_acres: float,
    status: str,
    events_count: int,
    as_of: str
) -> OwnershipReport:
    return OwnershipReport(
        events_count=events_count,
        as_of=as_of,
        owners=build_rows(ledger, total_acres, status),
        flags=list(flags)
    )
