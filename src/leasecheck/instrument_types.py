"""
Normalization of free-text instrument types into the closed InstrumentType set.
"""

import re
from typing import Dict, Optional, Tuple

from loguru import logger
from rapidfuzz import fuzz, process

from .models import InstrumentType

_LEASE_PATTERN = re.compile(r'\blease\b|ogl|oil\s*(?:and|&)\s*gas')

_COMPACT_NAMES = {
    re.sub(r'[^a-z]', '', member.value.lower()): member for member in InstrumentType
}
_COMPACT_NAMES.update({
    re.sub(r'[^a-z]', '', member.name.lower()): member for member in InstrumentType
})


def _clean(text: str) -> str:
    return re.sub(r'\s+', ' ', text.strip().lower())


class InstrumentTypeResolver:
    """Maps extractor labels such as 'WD' or 'Oil & Gas Lease' to InstrumentType"""

    def __init__(self, aliases: Dict[str, InstrumentType], fuzzy_threshold: float = 90):
        self.aliases = {_clean(label): type_ for label, type_ in aliases.items()}
        self.fuzzy_threshold = fuzzy_threshold

    def match(self, raw_type: Optional[str]) -> Tuple[InstrumentType, bool]:
        """
        Resolve a raw instrument type label.

        Lookup order: alias table, enum names, lease wording, then a
        rapidfuzz ratio match against the alias labels. Anything left over
        is InstrumentType.OTHER.

        Args:
            raw_type: Instrument type text from the extraction step

        Returns:
            Tuple of (InstrumentType member, whether the label was recognized)
        """
        if isinstance(raw_type, InstrumentType):
            return raw_type, True

        text = _clean(str(raw_type or ''))
        if not text:
            return InstrumentType.OTHER, False

        if text in self.aliases:
            return self.aliases[text], True

        compact = re.sub(r'[^a-z]', '', text)
        if compact in _COMPACT_NAMES:
            return _COMPACT_NAMES[compact], True

        if _LEASE_PATTERN.search(text):
            return InstrumentType.OIL_GAS_LEASE, True

        if self.aliases:
            found = process.extractOne(
                text,
                self.aliases.keys(),
                scorer=fuzz.ratio,
                score_cutoff=self.fuzzy_threshold
            )
            if found:
                label, score, _ = found
                logger.debug(f"Instrument type '{raw_type}' matched alias '{label}' ({score:.0f})")
                return self.aliases[label], True

        logger.warning(f"Unrecognized instrument type '{raw_type}', treating as Other")
        return InstrumentType.OTHER, False

    def resolve(self, raw_type: Optional[str]) -> InstrumentType:
        return self.match(raw_type)[0]
