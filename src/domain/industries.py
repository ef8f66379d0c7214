"""
Canonical Sector → Service Type Taxonomy

Authoritative rules:
- Sector codes are the 2-digit NAICS prefix, compared as strings
- Service types are the labels written to the `serviceType` key
- Unknown sectors fall back to DEFAULT_SERVICE_TYPE (never an error)
"""

# ------------------------------------------------------------------
# SERVICE-PROVIDING SECTORS
# ------------------------------------------------------------------
# NAICS sectors 42, 44-45, 48-49, 51-92 are service-providing.

SERVICE_SECTORS: list[str] = [
    "42", "44", "45", "48", "49",
    "51", "52", "53", "54", "55", "56",
    "61", "62",
    "71", "72",
    "81",
    "92",
]

# ------------------------------------------------------------------
# SECTOR → SERVICE TYPE
# ------------------------------------------------------------------

DEFAULT_SERVICE_TYPE = "Professional Service"

SERVICE_TYPE_BY_SECTOR: dict[str, str] = {
    "54": "Professional Service",
    "62": "Healthcare Service",
    "61": "Educational Service",
    "52": "Financial Service",
    "72": "Hospitality Service",
    "81": "Personal Service",
    "51": "Information Service",
    "48": "Transportation Service",
    "49": "Transportation Service",
    "56": "Support Service",
}

# ------------------------------------------------------------------
# GROUPING DEFAULTS
# ------------------------------------------------------------------

UNCATEGORIZED = "Uncategorized"
DEFAULT_SUBCATEGORY = "General"


# ------------------------------------------------------------------
# HELPERS (USE THESE)
# ------------------------------------------------------------------

def service_type_for_sector(sector_code: str | None) -> str:
    return SERVICE_TYPE_BY_SECTOR.get(sector_code or "", DEFAULT_SERVICE_TYPE)


def is_service_sector(sector_code: str | None) -> bool:
    return sector_code in SERVICE_SECTORS
