"""
Chronological ordering of instruments.
"""

from typing import Iterable, List

from .models import InstrumentRecord


def sequence_instruments(records: Iterable[InstrumentRecord]) -> List[InstrumentRecord]:
    """
    Order instruments by recorded date, falling back to executed date.

    sorted() is stable, so instruments with equal keys (including two
    undated instruments) keep their input order.
    """
    return sorted(records, key=lambda record: record.date_key)
