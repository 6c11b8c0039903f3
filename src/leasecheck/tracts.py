"""
Tract matching: does an instrument touch the tract under analysis?
"""

from .models import InstrumentRecord, TractDescriptor


def descriptor_matches(tract: TractDescriptor, tract_key: str) -> bool:
    """Township/range must appear in the key (any case) and so must the section"""
    trs = (tract.trs or '').lower()
    section = tract.section or ''
    if not trs or not section:
        return False
    return trs in tract_key.lower() and section in tract_key


def tract_matches(record: InstrumentRecord, tract_key: str) -> bool:
    """True if any of the record's tracts matches the tract key"""
    return any(descriptor_matches(tract, tract_key) for tract in record.affected_tracts)
