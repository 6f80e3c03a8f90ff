"""
Search Result Parser

Finds the first organic result in a search results page.

Organic results are rendered as redirect links of the form
``<a href="/url?q=<target>&...">``; the target is percent-decoded.
"""

import re
from typing import Optional
from urllib.parse import unquote

RESULT_LINK_PATTERN = re.compile(
    r'<a[^>]*href=["\']/url\?q=([^"\'&]+)[&"\']',
    re.IGNORECASE,
)


def extract_first_result_url(html: str) -> Optional[str]:
    """
    Extract the first organic result URL.

    Args:
        html: Search results page markup

    Returns:
        Decoded target URL, or None if the page has no result links
    """
    if not html:
        return None
    match = RESULT_LINK_PATTERN.search(html)
    if not match:
        return None
    return unquote(match.group(1)) or None
