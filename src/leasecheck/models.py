"""
Data models for lease check runs.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Any


class InstrumentType(str, Enum):
    """Closed set of instrument types the transfer rules understand"""
    WARRANTY_DEED = "WarrantyDeed"
    QUIT_CLAIM_DEED = "QuitClaimDeed"
    EASEMENT = "Easement"
    MORTGAGE = "Mortgage"
    SURFACE_ONLY = "SurfaceOnly"
    OIL_GAS_LEASE = "OilGasLease"
    LIFE_ESTATE = "LifeEstate"
    PERSONAL_REPRESENTATIVE_DEED = "PersonalRepresentativeDeed"
    TRUST_DEED = "TrustDeed"
    DEED = "Deed"
    OTHER = "Other"


DEED_TYPES = frozenset({
    InstrumentType.WARRANTY_DEED,
    InstrumentType.QUIT_CLAIM_DEED,
    InstrumentType.PERSONAL_REPRESENTATIVE_DEED,
    InstrumentType.TRUST_DEED,
    InstrumentType.DEED,
})


@dataclass(frozen=True)
class TractDescriptor:
    """Township/range plus section of one tract an instrument covers"""
    trs: str
    section: str


@dataclass(frozen=True)
class MineralReservation:
    reserved: bool = False


@dataclass(frozen=True)
class LifeEstate:
    present: bool = False


@dataclass
class InstrumentRecord:
    """One recorded instrument as supplied by the extraction step"""
    instrument_type: InstrumentType
    grantors: List[str] = field(default_factory=list)
    grantees: List[str] = field(default_factory=list)
    affected_tracts: List[TractDescriptor] = field(default_factory=list)
    document_id: Optional[str] = None
    raw_instrument_type: str = ""
    unrecognized_type: bool = False
    recorded_date: str = ""
    executed_date: str = ""
    conveys_all_interest: bool = False
    fraction_conveyed: Optional[str] = None
    mineral_reservation: Optional[MineralReservation] = None
    life_estate: Optional[LifeEstate] = None

    @property
    def date_key(self) -> str:
        """Recorded date, falling back to the executed date"""
        return self.recorded_date or self.executed_date or ""

    @property
    def lease_key(self) -> str:
        """Key used to look up lease overrides for this instrument"""
        return self.document_id or f"{self.executed_date}-{self.recorded_date}"

    @property
    def mineral_reserved(self) -> bool:
        return bool(self.mineral_reservation and self.mineral_reservation.reserved)

    @property
    def has_life_estate(self) -> bool:
        return self.instrument_type is InstrumentType.LIFE_ESTATE or bool(
            self.life_estate and self.life_estate.present
        )


@dataclass(frozen=True)
class Flag:
    """An instrument the engine could not resolve and defers to a reviewer"""
    note: str
    doc: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'doc': self.doc, 'note': self.note}


@dataclass(frozen=True)
class LeaseOverride:
    """Reviewer answers for one lease instrument"""
    production_present: bool = False
    top_lease: bool = False
    boundary_pugh: bool = False
    depth_pugh: bool = False


@dataclass(frozen=True)
class OwnershipRow:
    owner: str
    percent: float
    net_acres: float
    status: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'owner': self.owner,
            'percent': self.percent,
            'net_acres': self.net_acres,
            'status': self.status
        }


@dataclass
class OwnershipReport:
    """Result of one lease check run"""
    events_count: int
    as_of: str
    owners: List[OwnershipRow] = field(default_factory=list)
    flags: List[Flag] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'events_count': self.events_count,
            'as_of': self.as_of,
            'owners': [row.to_dict() for row in self.owners],
            'flags': [flag.to_dict() for flag in self.flags]
        }
