"""
Host Environment

Contracts the editor host must satisfy, plus a snapshot-backed host for
running the crawler outside the editor.

Snapshot format (JSON export of the editor model):
    {
        "venues": [{"id": ..., "type": "venue", "name": ..., "phone": ...,
                    "url": ..., "streetName": ..., "categories": [...]}],
        "cities": [{"name": "Denver", "stateID": 6}],
        "states": [{"id": 6, "name": "Colorado", "abbreviation": "CO"}]
    }
"""

import json
import logging
from typing import Any, Dict, List, Optional, Protocol

from .exceptions import HostNotReadyError
from .models import LocationContext, VenueRecord

logger = logging.getLogger(__name__)


class VenueSource(Protocol):
    def venues(self) -> Optional[List[VenueRecord]]:
        """Loaded venues, or None if the model is not ready."""
        ...


class LocationSource(Protocol):
    def location_context(self) -> LocationContext:
        """City/state of the current view; empty strings when unknown."""
        ...


def derive_location(cities: List[Dict[str, Any]], states: List[Dict[str, Any]]) -> LocationContext:
    """
    Location of the current view from the editor's loaded cities.

    The editor is queried instead of the venue itself because venue data
    is exactly what may be incomplete. The first loaded city is used; its
    state is looked up by id.
    """
    if not cities:
        logger.warning("No cities loaded in current view")
        return LocationContext()

    city = cities[0] or {}
    city_name = city.get('name') or ''

    state = None
    state_id = city.get('stateID')
    if state_id is not None:
        for candidate in states or []:
            if candidate.get('id') == state_id:
                state = candidate
                break

    location = LocationContext(
        city_name=city_name,
        state_name=(state or {}).get('name') or '',
        state_abbr=(state or {}).get('abbreviation') or '',
    )
    logger.info("Location context: %s, %s", location.city_name, location.state_abbr)
    return location


class SnapshotHost:
    """Host backed by a parsed editor snapshot dictionary."""

    def __init__(self, data: Dict[str, Any]):
        self.data = data or {}

    @classmethod
    def from_file(cls, path: str) -> 'SnapshotHost':
        """Load a snapshot JSON file.

        Raises:
            HostNotReadyError: If the file is missing or not valid JSON
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise HostNotReadyError(f"Cannot read snapshot {path}: {e}") from e
        except ValueError as e:
            raise HostNotReadyError(f"Snapshot {path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise HostNotReadyError(f"Snapshot {path} must contain a JSON object")
        return cls(data)

    def venues(self) -> Optional[List[VenueRecord]]:
        raw = self.data.get('venues')
        if raw is None:
            return None

        records = []
        for item in raw:
            if not isinstance(item, dict):
                continue
            try:
                records.append(VenueRecord.from_dict(item))
            except ValueError as e:
                logger.warning("Ignoring venue record: %s", e)
        return records

    def location_context(self) -> LocationContext:
        if 'location' in self.data:
            return LocationContext.from_dict(self.data['location'])
        return derive_location(self.data.get('cities') or [], self.data.get('states') or [])
