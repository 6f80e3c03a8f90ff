"""
Parsers module for extracting venue data from fetched pages.

- structured.py: Schema.org JSON-LD blocks
- metadata.py: Open Graph / microdata meta tags
- patterns.py: Phone-number regex fallback
- content.py: Strategy chain over the three extractors
- search_results.py: First organic result link from a search page
"""

from .structured import extract_schema_org, BUSINESS_TYPES
from .metadata import extract_meta_tags
from .patterns import extract_phone_pattern, PHONE_PATTERN
from .content import extract_contact_data
from .search_results import extract_first_result_url
