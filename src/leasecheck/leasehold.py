"""
Leasehold status label for a run.

Without reviewer overrides the label comes straight from the HBP input. With
overrides, the tract's lease instruments are checked for production, top
leases and Pugh clauses.
"""

from typing import Dict, List, Optional, Set

from .config import StatusLabels
from .models import InstrumentRecord, InstrumentType, LeaseOverride
from .sequencer import sequence_instruments


def grantor_signature(record: InstrumentRecord) -> str:
    return '|'.join(record.grantors).lower().strip()


def expired_lease_keys(leases: List[InstrumentRecord], overrides: Dict[str, LeaseOverride]) -> Set[str]:
    """
    Leases superseded by a later lease from the same grantors.

    When the latest lease of a grantor group is marked as not being a top
    lease, every earlier lease in that group is taken as expired.
    """
    by_grantor: Dict[str, List[InstrumentRecord]] = {}
    for lease in leases:
        by_grantor.setdefault(grantor_signature(lease), []).append(lease)

    expired = set()
    for group in by_grantor.values():
        group = sequence_instruments(group)
        latest = overrides.get(group[-1].lease_key)
        if latest is not None and latest.top_lease is False:
            expired.update(lease.lease_key for lease in group[:-1])
    return expired


def determine_status(
    records: List[InstrumentRecord],
    hbp: bool,
    labels: StatusLabels,
    lease_overrides: Optional[Dict[str, LeaseOverride]] = None
) -> str:
    """
    Work out the leasehold status applied to every ownership row.

    Args:
        records: Tract-matching instruments in chronological order
        hbp: Caller's held-by-production answer, used when there are no overrides
        labels: Status label texts
        lease_overrides: Reviewer answers keyed by lease document id

    Returns:
        Status label
    """
    if not lease_overrides:
        return labels.leased if hbp else labels.open

    leases = [r for r in records if r.instrument_type is InstrumentType.OIL_GAS_LEASE]
    expired = expired_lease_keys(leases, lease_overrides)

    active_production = False
    pugh_limited = False
    for lease in leases:
        key = lease.lease_key
        if key in expired:
            continue
        override = lease_overrides.get(key)
        if override is not None and override.production_present:
            active_production = True
            if override.boundary_pugh or override.depth_pugh:
                pugh_limited = True

    if not active_production:
        return labels.open
    return labels.leased_pugh_limited if pugh_limited else labels.leased
