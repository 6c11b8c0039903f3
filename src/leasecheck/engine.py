"""
Lease check engine: replays a tract's recorded instruments into an ownership report.
"""

from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from loguru import logger

from .config import Settings, load_settings
from .exceptions import InvalidRequestError
from .instrument_types import InstrumentTypeResolver
from .leasehold import determine_status
from .ledger import OwnershipLedger
from .models import Flag, InstrumentRecord, LeaseOverride, OwnershipReport
from .records import parse_records
from .report import build_report
from .rules import apply_instrument
from .sequencer import sequence_instruments
from .tracts import tract_matches


class LeaseCheckEngine:
    """Computes tract ownership from extracted instrument records"""

    def __init__(self, config_file: Optional[str] = None, settings: Optional[Settings] = None):
        """
        Initialize the engine.

        Args:
            config_file: Path to settings YAML (default: packaged leasecheck.yaml)
            settings: Ready-made settings; takes precedence over config_file
        """
        self.settings = settings or load_settings(config_file)
        self.resolver = InstrumentTypeResolver(
            self.settings.instrument_type_aliases,
            fuzzy_threshold=self.settings.fuzzy_type_threshold
        )

    def _validate_request(self, events: Any, tract_key: Any, total_acres: Any) -> float:
        if not isinstance(events, (list, tuple)) or not events:
            raise InvalidRequestError("events[] and tract_key are required")
        if not isinstance(tract_key, str) or not tract_key.strip():
            raise InvalidRequestError("events[] and tract_key are required")

        if total_acres is None:
            return self.settings.default_total_acres
        if isinstance(total_acres, bool) or not isinstance(total_acres, (int, float)):
            raise InvalidRequestError(f"total_acres must be a number, got {total_acres!r}")
        if total_acres <= 0:
            raise InvalidRequestError(f"total_acres must be positive, got {total_acres}")
        return total_acres

    @staticmethod
    def _parse_overrides(lease_overrides: Optional[Mapping[str, Any]]) -> Dict[str, LeaseOverride]:
        if not lease_overrides:
            return {}
        if not isinstance(lease_overrides, Mapping):
            raise InvalidRequestError("lease_overrides must be an object keyed by document id")

        overrides = {}
        for doc_id, value in lease_overrides.items():
            if isinstance(value, LeaseOverride):
                overrides[doc_id] = value
            elif isinstance(value, Mapping):
                overrides[doc_id] = LeaseOverride(
                    production_present=bool(value.get('production_present')),
                    top_lease=bool(value.get('top_lease')),
                    boundary_pugh=bool(value.get('boundary_pugh')),
                    depth_pugh=bool(value.get('depth_pugh'))
                )
            else:
                raise InvalidRequestError(f"lease_overrides['{doc_id}'] must be an object")
        return overrides

    def replay(self, records: List[InstrumentRecord]) -> tuple:
        """
        Replay instruments in the given order on a fresh ledger.

        Returns:
            Tuple of (OwnershipLedger, list of Flag)
        """
        ledger = OwnershipLedger()
        flags: List[Flag] = []
        for record in records:
            outcome = apply_instrument(record, ledger, flags)
            logger.debug(f"{record.date_key or 'undated'} {record.instrument_type.value}: {outcome.value}")
        ledger.prune(self.settings.zero_epsilon)
        return ledger, flags

    def run(
        self,
        events: List[Any],
        tract_key: str,
        as_of: Optional[str] = None,
        hbp: bool = False,
        total_acres: Optional[float] = None,
        lease_overrides: Optional[Mapping[str, Any]] = None
    ) -> OwnershipReport:
        """
        Compute current ownership of a tract.

        Args:
            events: Extracted instrument records (dicts or InstrumentRecord)
            tract_key: Township/range and section of the tract, e.g. "1S-2W 14"
            as_of: ISO date of the check (default: today); echoed in the report
            hbp: Held-by-production answer used for the status label
            total_acres: Gross acres in the tract (default from settings)
            lease_overrides: Reviewer answers for lease instruments, keyed by
                document id

        Returns:
            OwnershipReport

        Raises:
            InvalidRequestError: If events or tract_key are missing
            MalformedRecordError: If an event cannot be read
        """
        acres = self._validate_request(events, tract_key, total_acres)
        overrides = self._parse_overrides(lease_overrides)
        as_of = as_of or date.today().isoformat()

        logger.info(f"Running lease check on {len(events)} events for tract '{tract_key}'")

        records = parse_records(list(events), self.resolver)
        matching = [record for record in records if tract_matches(record, tract_key)]
        ordered = sequence_instruments(matching)

        ledger, flags = self.replay(ordered)
        status = determine_status(ordered, bool(hbp), self.settings.status_labels, overrides)

        logger.info(
            f"Lease check complete: {len(matching)} matching instruments, "
            f"{len(ledger)} owners, {len(flags)} flags"
        )
        return build_report(
            ledger,
            flags,
            total_acres=acres,
            status=status,
            events_count=len(events),
            as_of=as_of
        )
