"""District identifier library.

Public API:
    - DISTRICT_IDENTIFIERS: Immutable display-name to identifier table
    - resolve_district_id: Display name to identifier (lowercase fallback)
    - resolve_district_name: Identifier to display name (passthrough fallback)
    - is_known_district: Membership test against the closed set
    - list_districts: All (display_name, identifier) pairs
"""

from drt_dashboard.lib.districts.identifiers import (
    DISTRICT_IDENTIFIERS,
    is_known_district,
    list_districts,
    resolve_district_id,
    resolve_district_name,
)

__all__ = [
    "DISTRICT_IDENTIFIERS",
    "is_known_district",
    "list_districts",
    "resolve_district_id",
    "resolve_district_name",
]
