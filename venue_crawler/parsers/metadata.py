"""
Meta Tag Extractor

Reads single-value business annotations from <meta> tags.

Each field has an ordered list of selectors; the first selector that
matches a tag with non-empty content fills the field. Fields are searched
independently. Attribute order inside the tag does not matter.
"""

from typing import Dict, Optional, Sequence

from bs4 import BeautifulSoup

PHONE_META_SELECTORS = (
    'meta[property="business:contact_data:phone_number" i]',
    'meta[name="telephone" i]',
    'meta[itemprop="telephone" i]',
)

WEBSITE_META_SELECTORS = (
    'meta[property="og:url" i]',
    'meta[itemprop="url" i]',
)

ADDRESS_META_SELECTORS = (
    'meta[property="business:contact_data:street_address" i]',
    'meta[itemprop="streetAddress" i]',
)


def first_meta_content(soup: BeautifulSoup, selectors: Sequence[str]) -> Optional[str]:
    """Return the content of the first tag matched by the selectors, else None."""
    for selector in selectors:
        for tag in soup.select(selector):
            content = tag.get('content')
            if content:
                return content
    return None


def extract_meta_tags(html: str, soup: BeautifulSoup = None) -> Optional[Dict[str, Optional[str]]]:
    """
    Extract phone, website and address from meta tags.

    Args:
        html: Raw page markup
        soup: Optional pre-parsed BeautifulSoup object of the same markup

    Returns:
        Dict with phone, website and address, or None if all three are missing
    """
    if soup is None:
        if not html:
            return None
        soup = BeautifulSoup(html, 'html.parser')

    data = {
        'phone': first_meta_content(soup, PHONE_META_SELECTORS),
        'website': first_meta_content(soup, WEBSITE_META_SELECTORS),
        'address': first_meta_content(soup, ADDRESS_META_SELECTORS),
    }

    if not any(data.values()):
        return None
    return data
