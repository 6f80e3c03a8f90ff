"""
Content Extractor

Runs the page extractors in order of reliability and returns the first
one that finds anything:

    1. Schema.org JSON-LD      (ExtractionMethod.STRUCTURED_DATA)
    2. Meta tags               (ExtractionMethod.EMBEDDED_METADATA)
    3. Phone regex             (ExtractionMethod.PATTERN_MATCH)

Later extractors are not run once an earlier one succeeds. The markup is
parsed once with BeautifulSoup; the phone regex still scans the raw text.
"""

import logging
from typing import Callable, Dict, Optional, Sequence, Tuple

from bs4 import BeautifulSoup

from ..models import ExtractionMethod, ExtractionResult
from .metadata import extract_meta_tags
from .patterns import extract_phone_pattern
from .structured import extract_schema_org

logger = logging.getLogger(__name__)

# (raw markup, parsed markup) -> fields or None
Extractor = Callable[[str, BeautifulSoup], Optional[Dict[str, Optional[str]]]]

STRATEGIES: Sequence[Tuple[ExtractionMethod, Extractor]] = (
    (ExtractionMethod.STRUCTURED_DATA, extract_schema_org),
    (ExtractionMethod.EMBEDDED_METADATA, extract_meta_tags),
    (ExtractionMethod.PATTERN_MATCH, extract_phone_pattern),
)


def extract_contact_data(html: str, source_url: str = None) -> Optional[ExtractionResult]:
    """
    Extract venue contact data from page markup.

    Args:
        html: Raw page markup (may be empty or malformed)
        source_url: URL the markup was fetched from, copied onto the result

    Returns:
        ExtractionResult tagged with the winning method, or None if no
        extractor found anything
    """
    if not html:
        return None

    soup = BeautifulSoup(html, 'html.parser')
    for method, extractor in STRATEGIES:
        data = extractor(html, soup)
        if data is None:
            continue

        logger.info("Extraction successful (%s): %s", method.value, data)
        return ExtractionResult(
            method=method,
            source_url=source_url,
            phone=data.get('phone'),
            website=data.get('website'),
            address=data.get('address'),
            name=data.get('name'),
        )

    logger.info("No data extracted from %s", source_url or "page")
    return None
