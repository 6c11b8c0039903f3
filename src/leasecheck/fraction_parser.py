"""
Parsing of fractional interest text such as "1/2" into exact rationals.
"""

import re
from fractions import Fraction
from typing import Any, Optional

_FRACTION_PATTERN = re.compile(r'^(\d+)/(\d+)$')


def parse_fraction(text: Any) -> Optional[Fraction]:
    """
    Parse "<numerator>/<denominator>" into a Fraction.

    Args:
        text: Fraction text, e.g. "3/16"

    Returns:
        Fraction, or None when the text is empty, does not match the
        pattern, or has a zero denominator
    """
    if text is None:
        return None

    match = _FRACTION_PATTERN.match(str(text).strip())
    if not match:
        return None

    numerator, denominator = int(match.group(1)), int(match.group(2))
    if denominator == 0:
        return None
    return Fraction(numerator, denominator)
