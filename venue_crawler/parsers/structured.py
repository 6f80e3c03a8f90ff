"""
Schema.org Extractor

Reads business data from JSON-LD script blocks.

A page may carry several blocks; each is parsed independently and a block
with invalid JSON is skipped. The first item whose @type names a business
type wins:
    telephone               -> phone
    url                     -> website
    address.streetAddress   -> address
    name                    -> name
"""

import json
import logging
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

# Substring match, so "FastFoodRestaurant" or "ClothingStore" qualify
BUSINESS_TYPES = ('LocalBusiness', 'Restaurant', 'Organization', 'Store')


def is_business_type(declared: Any) -> bool:
    """Check a declared @type (string or list of strings) against BUSINESS_TYPES."""
    if isinstance(declared, str):
        return any(t in declared for t in BUSINESS_TYPES)
    if isinstance(declared, list):
        return any(isinstance(d, str) and is_business_type(d) for d in declared)
    return False


def _text(value: Any) -> Optional[str]:
    if value is None or value == '':
        return None
    return value if isinstance(value, str) else str(value)


def _street_address(address: Any) -> Optional[str]:
    if isinstance(address, dict):
        return _text(address.get('streetAddress'))
    return None


def extract_schema_org(html: str, soup: BeautifulSoup = None) -> Optional[Dict[str, Optional[str]]]:
    """
    Extract business fields from the first qualifying JSON-LD item.

    Args:
        html: Raw page markup
        soup: Optional pre-parsed BeautifulSoup object of the same markup

    Returns:
        Dict with phone, website, address and name (each may be None),
        or None if no block describes a business
    """
    if soup is None:
        if not html:
            return None
        soup = BeautifulSoup(html, 'html.parser')

    for block_num, script in enumerate(soup.find_all('script', type='application/ld+json')):
        try:
            data = json.loads(script.string or '')
        except ValueError:
            logger.debug("Skipping invalid JSON-LD block #%d", block_num)
            continue

        items = data if isinstance(data, list) else [data]

        for item in items:
            if not isinstance(item, dict):
                continue
            if not is_business_type(item.get('@type')):
                continue

            return {
                'phone': _text(item.get('telephone')),
                'website': _text(item.get('url')),
                'address': _street_address(item.get('address')),
                'name': _text(item.get('name')),
            }

    return None
