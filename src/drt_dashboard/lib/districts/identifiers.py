"""Seoul district (gu) display names and their ASCII identifiers.

Identifiers are the stable keys used in dashboard routes and backend
resource paths; display names are what the boundary dataset and the
analytics backend use.
"""

from collections.abc import Mapping
from types import MappingProxyType

DISTRICT_IDENTIFIERS: Mapping[str, str] = MappingProxyType(
    {
        "종로구": "jongno",
        "중구": "jung",
        "용산구": "yongsan",
        "성동구": "seongdong",
        "광진구": "gwangjin",
        "동대문구": "dongdaemun",
        "중랑구": "jungnang",
        "성북구": "seongbuk",
        "강북구": "gangbuk",
        "도봉구": "dobong",
        "노원구": "nowon",
        "은평구": "eunpyeong",
        "서대문구": "seodaemun",
        "마포구": "mapo",
        "양천구": "yangcheon",
        "강서구": "gangseo",
        "구로구": "guro",
        "금천구": "geumcheon",
        "영등포구": "yeongdeungpo",
        "동작구": "dongjak",
        "관악구": "gwanak",
        "서초구": "seocho",
        "강남구": "gangnam",
        "송파구": "songpa",
        "강동구": "gangdong",
    }
)

_NAMES_BY_IDENTIFIER: Mapping[str, str] = MappingProxyType(
    {identifier: name for name, identifier in DISTRICT_IDENTIFIERS.items()}
)


def resolve_district_id(display_name: str) -> str:
    """Return the identifier for a district display name.

    Unknown names fall back to their lowercased form, so this never fails.
    """
    return DISTRICT_IDENTIFIERS.get(display_name, display_name.lower())


def resolve_district_name(identifier: str) -> str:
    """Return the display name for a district identifier, or the input unchanged."""
    return _NAMES_BY_IDENTIFIER.get(identifier, identifier)


def is_known_district(display_name: str) -> bool:
    return display_name in DISTRICT_IDENTIFIERS


def list_districts() -> list[tuple[str, str]]:
    """Return ``(display_name, identifier)`` pairs in table order."""
    return list(DISTRICT_IDENTIFIERS.items())
