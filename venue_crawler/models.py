"""
Data Model

Typed records passed between the host environment, the scan collector,
the analyzer and the extraction orchestrator.

- VenueRecord: read-only venue attributes taken from the editor model
- LocationContext: city/state of the current map view
- AnalysisResult: severity and missing fields for one venue
- ExtractionResult: outcome of one website lookup attempt
- ScanEntry: per-venue unit stored in the scan result set
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional, Tuple


class Severity(IntEnum):
    """Data-completeness severity, ordered from best to worst."""
    COMPLETE = 0    # All checked fields present
    MINOR = 1       # One field missing, has contact info
    MAJOR = 2       # Two or more fields missing, has contact info
    CRITICAL = 3    # No phone and no website


class ExtractionMethod(Enum):
    """Which content-extraction strategy produced a result."""
    STRUCTURED_DATA = "Schema.org"
    EMBEDDED_METADATA = "Microdata"
    PATTERN_MATCH = "Regex"
    NONE = "None"


@dataclass(frozen=True)
class LocationContext:
    """Best-effort location of the current map view. Empty strings when unknown."""
    city_name: str = ""
    state_name: str = ""
    state_abbr: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'LocationContext':
        data = data or {}
        return cls(
            city_name=data.get('city_name') or '',
            state_name=data.get('state_name') or '',
            state_abbr=data.get('state_abbr') or '',
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            'city_name': self.city_name,
            'state_name': self.state_name,
            'state_abbr': self.state_abbr,
        }


def _optional_text(value: Any) -> Optional[str]:
    # Snapshot exports may carry numbers where the editor holds strings
    if value is None or isinstance(value, str):
        return value
    return str(value)


@dataclass(frozen=True)
class VenueRecord:
    """A venue as exposed by the host editor model."""
    venue_id: str
    name: Optional[str] = None
    phone: Optional[str] = None
    url: Optional[str] = None
    street: Optional[str] = None
    categories: Tuple[str, ...] = ()
    object_type: str = "venue"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VenueRecord':
        """Build a record from a host attribute dictionary.

        Accepts both editor attribute names (``id``, ``streetName``, ``type``)
        and the snake_case names used by this package.
        """
        venue_id = data.get('venue_id', data.get('id'))
        if venue_id is None:
            raise ValueError("venue record has no id")
        street = data.get('street')
        if street is None:
            street = data.get('streetName')
        return cls(
            venue_id=str(venue_id),
            name=_optional_text(data.get('name')),
            phone=_optional_text(data.get('phone')),
            url=_optional_text(data.get('url')),
            street=_optional_text(street),
            categories=tuple(data.get('categories') or ()),
            object_type=data.get('object_type') or data.get('type') or 'venue',
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'venue_id': self.venue_id,
            'name': self.name,
            'phone': self.phone,
            'url': self.url,
            'street': self.street,
            'categories': list(self.categories),
            'object_type': self.object_type,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Severity classification for a single venue."""
    severity: Severity
    missing: Tuple[str, ...]
    has_contact_info: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            'severity': self.severity.name,
            'missing': list(self.missing),
            'has_contact_info': self.has_contact_info,
        }


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of one lookup attempt for a venue.

    Either an error record (``error`` set, optionally with the candidate
    ``website_url`` found before the failure) or a success record carrying
    the strategy ``method`` and whichever fields it recovered.
    """
    search_query: str = ""
    error: Optional[str] = None
    website_url: Optional[str] = None
    method: Optional[ExtractionMethod] = None
    source_url: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def failure(cls, reason: str, search_query: str, website_url: str = None) -> 'ExtractionResult':
        return cls(search_query=search_query, error=reason, website_url=website_url)

    @classmethod
    def nothing_found(cls, source_url: str, search_query: str = "") -> 'ExtractionResult':
        return cls(search_query=search_query, method=ExtractionMethod.NONE, source_url=source_url)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, Any]:
        if self.is_error:
            data = {'error': self.error, 'search_query': self.search_query}
            if self.website_url:
                data['website_url'] = self.website_url
            return data
        return {
            'method': self.method.value if self.method else None,
            'source_url': self.source_url,
            'phone': self.phone,
            'website': self.website,
            'address': self.address,
            'name': self.name,
            'search_query': self.search_query,
        }


@dataclass
class ScanEntry:
    """Per-venue classification plus the latest extraction outcome."""
    venue: VenueRecord
    analysis: AnalysisResult
    location: LocationContext
    name: str = ""
    phone: str = ""
    url: str = ""
    address: str = ""
    categories: List[str] = field(default_factory=list)
    extracted: Optional[ExtractionResult] = None

    @property
    def venue_id(self) -> str:
        return self.venue.venue_id

    @property
    def severity(self) -> Severity:
        return self.analysis.severity

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'venue_id': self.venue_id,
            'name': self.name,
            'phone': self.phone,
            'url': self.url,
            'address': self.address,
            'categories': list(self.categories),
            'location': self.location.to_dict(),
        }
        data.update(self.analysis.to_dict())
        data['extracted'] = self.extracted.to_dict() if self.extracted else None
        return data


@dataclass
class ScanReport:
    """Counts returned by one scan."""
    scanned: int = 0
    skipped: int = 0
    available: bool = True
    scanned_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'scanned': self.scanned,
            'skipped': self.skipped,
            'available': self.available,
            'scanned_at': self.scanned_at.isoformat() if self.scanned_at else None,
        }
