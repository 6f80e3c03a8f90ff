"""
Search Query Builder

Builds the web search query used to find a venue's website.

The venue name is used as-is, typos included; the search engine does the
fuzzy correction. A category hint and the city/state narrow the results.
"""

from typing import Mapping, Optional, Sequence

from ..config import CATEGORY_HINTS


def get_category_hint(category: str, hints: Mapping[str, str] = CATEGORY_HINTS) -> str:
    """Search hint for an editor category, or '' if there is none."""
    return hints.get(category, '')


def build_search_query(
    venue_name: str,
    categories: Sequence[str],
    city_name: Optional[str],
    state_abbr: Optional[str],
    hints: Mapping[str, str] = CATEGORY_HINTS,
) -> str:
    """
    Build a search query for a venue.

    Args:
        venue_name: Name of venue (may have typos)
        categories: Venue categories; only the first one is used for the hint
        city_name: City of the current map view
        state_abbr: State abbreviation (CO, CA, etc.)
        hints: Category -> hint table

    Returns:
        "<name> [<hint>] [<city> <state>]"
    """
    parts = [venue_name or '']

    if categories:
        hint = get_category_hint(categories[0], hints)
        if hint:
            parts.append(hint)

    # Location only when both halves are known
    if city_name and state_abbr:
        parts.append(f"{city_name} {state_abbr}")

    return ' '.join(parts)
