"""
Ingestion of extracted instrument dicts into InstrumentRecord objects.

The extraction step emits its own field names (doc_id, recorded, dated,
tracts, sec, fraction_whole, ...). Those names, the canonical snake_case
names and their camelCase forms (documentId, affectedTracts, ...) are all
accepted here.
"""

from typing import Any, List, Mapping, Optional

from .exceptions import MalformedRecordError
from .instrument_types import InstrumentTypeResolver
from .models import (
    InstrumentRecord,
    LifeEstate,
    MineralReservation,
    TractDescriptor,
)


def _first(data: Mapping, *keys: str) -> Any:
    """First non-empty value among the given keys"""
    for key in keys:
        value = data.get(key)
        if value not in (None, ''):
            return value
    return None


def _text(value: Any) -> str:
    if value is None:
        return ''
    return str(value).strip()


def _parties(value: Any, field_name: str) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if not isinstance(value, (list, tuple)):
        raise MalformedRecordError(f"'{field_name}' must be a list of names, got {type(value).__name__}")
    names = []
    for name in value:
        if name is None:
            continue
        if isinstance(name, (dict, list, tuple)):
            raise MalformedRecordError(f"'{field_name}' entries must be names")
        names.append(str(name))
    return names


def _tracts(value: Any) -> List[TractDescriptor]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise MalformedRecordError(f"'tracts' must be a list, got {type(value).__name__}")
    tracts = []
    for entry in value:
        if isinstance(entry, TractDescriptor):
            tracts.append(entry)
            continue
        if not isinstance(entry, Mapping):
            raise MalformedRecordError("'tracts' entries must be objects with trs and sec")
        tracts.append(TractDescriptor(
            trs=_text(_first(entry, 'trs', 'township_range', 'townshipRange')),
            section=_text(_first(entry, 'sec', 'section')),
        ))
    return tracts


def _flag_object(value: Any, key: str) -> Optional[bool]:
    """Read {key: bool} sub-objects, also accepting a bare boolean"""
    if value is None:
        return None
    if isinstance(value, Mapping):
        return bool(value.get(key))
    if isinstance(value, bool):
        return value
    raise MalformedRecordError(f"Expected an object with '{key}', got {type(value).__name__}")


def parse_record(data: Any, resolver: InstrumentTypeResolver) -> InstrumentRecord:
    """
    Build an InstrumentRecord from one extracted event.

    Args:
        data: Event dict from the extraction step (or an InstrumentRecord)
        resolver: Instrument type resolver

    Returns:
        InstrumentRecord

    Raises:
        MalformedRecordError: If the event is not an object or a field has an
            unusable shape
    """
    if isinstance(data, InstrumentRecord):
        return data
    if not isinstance(data, Mapping):
        raise MalformedRecordError(f"Instrument record must be an object, got {type(data).__name__}")

    raw_type = _text(_first(data, 'instrument_type', 'instrumentType', 'type'))
    instrument_type, recognized = resolver.match(raw_type)
    document_id = _first(data, 'document_id', 'documentId', 'doc_id', 'recording', 'id')

    reserved = _flag_object(_first(data, 'mineral_reservation', 'mineralReservation'), 'reserved')
    life_estate = _flag_object(_first(data, 'life_estate', 'lifeEstate'), 'present')
    fraction = _first(data, 'fraction_conveyed', 'fractionConveyed', 'fraction_whole')

    return InstrumentRecord(
        instrument_type=instrument_type,
        raw_instrument_type=raw_type,
        unrecognized_type=bool(raw_type) and not recognized,
        document_id=_text(document_id) or None,
        recorded_date=_text(_first(data, 'recorded_date', 'recordedDate', 'recorded')),
        executed_date=_text(_first(data, 'executed_date', 'executedDate', 'dated')),
        grantors=_parties(data.get('grantors'), 'grantors'),
        grantees=_parties(data.get('grantees'), 'grantees'),
        affected_tracts=_tracts(_first(data, 'affected_tracts', 'affectedTracts', 'tracts')),
        conveys_all_interest=bool(_first(data, 'conveys_all_interest', 'conveysAllInterest')),
        fraction_conveyed=None if fraction is None else str(fraction),
        mineral_reservation=None if reserved is None else MineralReservation(reserved=reserved),
        life_estate=None if life_estate is None else LifeEstate(present=life_estate),
    )


def parse_records(events: List[Any], resolver: InstrumentTypeResolver) -> List[InstrumentRecord]:
    records = []
    for index, event in enumerate(events):
        try:
            records.append(parse_record(event, resolver))
        except MalformedRecordError as e:
            raise MalformedRecordError(f"Event {index}: {e}") from e
    return records
