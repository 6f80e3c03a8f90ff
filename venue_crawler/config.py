"""
Default configuration for the Venue Data Crawler.

Module-level defaults used by the search provider, page fetcher, scan
collector and API server. Proxy credentials are read from environment
variables. Per-session overrides go through config_manager.CrawlerConfig.
"""

import os

# Proxy Configuration
# Use environment variables or CrawlerConfig(proxy_url="...") to configure
PROXY_HOST_ENV = "VENUE_CRAWLER_PROXY_HOST"
PROXY_USER_ENV = "VENUE_CRAWLER_PROXY_USER"
PROXY_PASS_ENV = "VENUE_CRAWLER_PROXY_PASS"


def get_proxy_url():
    """Get proxy URL from the environment. Returns single URL string for httpx."""
    host = os.environ.get(PROXY_HOST_ENV, "")
    user = os.environ.get(PROXY_USER_ENV, "")
    passwd = os.environ.get(PROXY_PASS_ENV, "")
    if host and user and passwd:
        return f"http://{user}:{passwd}@{host}"
    return None


# API Server
API_HOST = "127.0.0.1"
API_PORT = 8000

# Network
SEARCH_URL = "https://www.google.com/search"
REQUEST_TIMEOUT = 10.0  # seconds per request, covering connect through full body
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/143.0.0.0 Safari/537.36"
)
DEFAULT_HEADERS = {
    'User-Agent': USER_AGENT,
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
    'Accept-Language': 'en-US,en;q=0.9',
}

# Venue record type accepted by the scan collector
VENUE_OBJECT_TYPE = "venue"

# Categories that never carry business contact data (residential places,
# natural features, road structures, water bodies)
EXCLUDED_CATEGORIES = (
    'RESIDENCE_HOME',
    'NATURAL_FEATURES',
    'SCENIC_LOOKOUT_VIEW_POINT',
    'PARK',
    'JUNCTION_INTERCHANGE',
    'BRIDGE',
    'TUNNEL',
    'ISLAND',
    'SEA_LAKE_POOL',
    'RIVER_STREAM',
    'CANAL',
    'FOREST_GROVE',
)

# Category -> search hint appended to the venue name
CATEGORY_HINTS = {
    'SCHOOL': 'school',
    'CAFE': 'cafe',
    'COFFEE_SHOP': 'coffee',
    'FOOD_AND_DRINK': 'restaurant',
    'RESTAURANT': 'restaurant',
    'FAST_FOOD': 'restaurant',
    'GAS_STATION': 'gas station',
    'CONVENIENCE_STORE': 'convenience store',
    'DOCTOR_CLINIC': 'medical clinic',
    'HOSPITAL_MEDICAL_CARE': 'hospital',
    'PHARMACY': 'pharmacy',
    'GARAGE_AUTOMOTIVE_SHOP': 'auto repair',
    'CAR_WASH': 'car wash',
    'SHOPPING_AND_SERVICES': 'store',
    'DEPARTMENT_STORE': 'store',
    'GROCERY_STORE': 'grocery',
    'HOTEL': 'hotel',
    'BANK_FINANCIAL': 'bank',
    'POST_OFFICE': 'post office',
    'LIBRARY': 'library',
    'GYM_FITNESS': 'gym',
    'OUTDOORS': 'outdoor recreation',
    'PET_STORE_VETERINARIAN_SERVICES': 'veterinary',
    'OFFICES': 'office',
}
