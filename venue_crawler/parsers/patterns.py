"""
Regex Fallback Extractor

Last-resort phone lookup over the raw page text.

Matches 123-456-7890, 123.456.7890, 1234567890 and (123)456-7890, with
"-", "." or nothing between the groups. Spaces are not separators, so
(123) 456-7890 does not match. The match starts on a word boundary, so an
opening parenthesis or a leading "+" is left out of the returned text
("(303)555-0100" gives "303)555-0100", "+1-303-555-0100" gives
"1-303-555-0100"). A bare 10-digit run anywhere in the markup also
matches, so IDs or prices can produce false positives.
"""

import re
from typing import Dict, Optional

PHONE_PATTERN = re.compile(
    r'\b(?:\+?1[-.]?)?\(?([0-9]{3})\)?[-.]?([0-9]{3})[-.]?([0-9]{4})\b'
)


def find_phone(text: str) -> Optional[str]:
    """Return the first phone-like match in text, or None."""
    if not text:
        return None
    match = PHONE_PATTERN.search(text)
    return match.group(0) if match else None


def extract_phone_pattern(html: str, soup=None) -> Optional[Dict[str, Optional[str]]]:
    """Phone-only extraction over the raw markup. Returns None when no number is found."""
    phone = find_phone(html)
    if not phone:
        return None
    return {'phone': phone, 'website': None, 'address': None}
