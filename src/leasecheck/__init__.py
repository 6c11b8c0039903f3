"""
Lease Check Package

Replays the recorded instruments affecting a tract to compute each party's
fractional ownership, net acres and leasehold status, flagging the
instruments that need a human reviewer.
"""

from .exceptions import (
    LeaseCheckError,
    InvalidRequestError,
    MalformedRecordError,
    ConfigurationError
)
from .models import (
    InstrumentType,
    InstrumentRecord,
    TractDescriptor,
    Flag,
    LeaseOverride,
    OwnershipRow,
    OwnershipReport
)
from .config import Settings, load_settings
from .engine import LeaseCheckEngine

__version__ = "1.0.0"
__all__ = [
    "LeaseCheckError",
    "InvalidRequestError",
    "MalformedRecordError",
    "ConfigurationError",
    "InstrumentType",
    "InstrumentRecord",
    "TractDescriptor",
    "Flag",
    "LeaseOverride",
    "OwnershipRow",
    "OwnershipReport",
    "Settings",
    "load_settings",
    "LeaseCheckEngine",
]
