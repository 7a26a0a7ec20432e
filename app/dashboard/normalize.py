"""
Domain normaliser — raw field values into canonical forms.

Every function here is total: malformed input yields an empty / zero /
``None`` result, never an exception.  The recommendation and session
logic relies on that to degrade per-record instead of per-request.
"""

from __future__ import annotations

import datetime
import math
import re
from typing import Optional

# ======================================================================
# Scalars
# ======================================================================

_PRICE_STRIP_RE = re.compile(r"[£$€,\s]")


def parse_price(text: object) -> float:
    """Parse a currency string such as ``'£1,250.50'``.

    Returns ``0.0`` for empty or unparseable input.
    """
    if text is None:
        return 0.0
    cleaned = _PRICE_STRIP_RE.sub("", str(text))
    if not cleaned:
        return 0.0
    try:
        value = float(cleaned)
    except ValueError:
        return 0.0
    # NaN / inf are not prices.
    if value != value or value in (float("inf"), float("-inf")):
        return 0.0
    return value


def parse_list(text: Optional[str]) -> list[str]:
    """Split a comma-separated value, trimming tokens and dropping empties."""
    if not text:
        return []
    return [token.strip() for token in str(text).split(",") if token.strip()]


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with ties upwards (``2.5 -> 3``), unlike :func:`round`."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


# ======================================================================
# Dates
# ======================================================================

_DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%Y/%m/%d", "%d-%m-%Y", "%d %B %Y", "%d %b %Y", "%A %d %B %Y",
                 "%a %d %b %Y", )

# Trailing clock time after any date form: "18:00", "6:30 pm", "18:00:00".
_TRAILING_TIME_RE = re.compile(r"[,\s]+\d{1,2}[:.]\d{2}(:\d{2})?\s*([ap]\.?m\.?)?$", re.IGNORECASE)

WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def parse_date(text: Optional[str]) -> Optional[datetime.date]:
    """Parse a calendar date, ignoring any trailing time component.

    Accepts ISO dates, UK style ``dd/mm/yyyy`` and long-form English
    dates, each optionally followed by a clock time.  Returns ``None``
    when nothing matches.
    """
    if not text:
        return None
    raw = str(text).strip()
    if not raw:
        return None

    # ISO datetimes: keep the date part only.
    iso = re.match(r"^(\d{4}-\d{2}-\d{2})[T ]", raw)
    if iso:
        raw = iso.group(1)
    else:
        raw = _TRAILING_TIME_RE.sub("", raw)

    for fmt in _DATE_FORMATS:
        try:
            return datetime.datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    return None


def day_of_week(date: Optional[str]) -> Optional[str]:
    """English weekday name of *date*, or ``None`` if unparseable."""
    parsed = parse_date(date)
    if parsed is None:
        return None
    return WEEKDAYS[parsed.weekday()]


# ======================================================================
# Geography
# ======================================================================

# Longer names first so that "Kensington and Chelsea" wins over "Kensington".
LONDON_BOROUGHS: list[str] = ["Barking and Dagenham", "Hammersmith and Fulham", "Kensington and Chelsea",
                              "Kingston upon Thames", "Richmond upon Thames", "City of London", "Tower Hamlets",
                              "Waltham Forest", "Westminster", "Wandsworth", "Hillingdon", "Greenwich",
                              "Haringey", "Havering", "Hounslow", "Islington", "Lewisham", "Redbridge",
                              "Southwark", "Barnet", "Bexley", "Bromley", "Camden", "Croydon", "Ealing",
                              "Enfield", "Hackney", "Harrow", "Lambeth", "Merton", "Newham", "Sutton", "Brent",
                              "Hammersmith", "Kensington", "Kingston", "Richmond", ]

_COUNTRY_SEGMENTS = {"uk", "u.k.", "united kingdom", "england", "gb", "great britain", }

# Full or outward-only UK postcodes: "E8 3PH", "SW1A 1AA", "N1".
_POSTCODE_RE = re.compile(r"^[a-z]{1,2}\d[a-z\d]?(\s*\d[a-z]{2})?$", re.IGNORECASE)

_MIN_SEGMENT_LENGTH = 3


def _is_meaningful_segment(segment: str) -> bool:
    if len(segment) < _MIN_SEGMENT_LENGTH:
        return False
    if segment.lower() in _COUNTRY_SEGMENTS:
        return False
    if _POSTCODE_RE.match(segment):
        return False
    return True


def extract_borough(location_text: Optional[str]) -> str:
    """Best-effort borough extraction from a free-text venue string.

    1. Case-insensitive substring match against :data:`LONDON_BOROUGHS`.
    2. Otherwise split on commas and take the second-to-last meaningful
       segment (not trivially short, not a country, not a postcode).
    3. Otherwise the last meaningful segment, otherwise the first raw
       segment, otherwise ``''``.
    """
    if not location_text:
        return ""
    text = str(location_text)
    lowered = text.lower()

    for borough in LONDON_BOROUGHS:
        if borough.lower() in lowered:
            return borough

    segments = [s.strip() for s in text.split(",") if s.strip()]
    meaningful = [s for s in segments if _is_meaningful_segment(s)]

    if len(meaningful) >= 2:
        return meaningful[-2]
    if meaningful:
        return meaningful[-1]
    if segments:
        return segments[0]
    return ""


REGIONS: dict[str, list[str]] = {
    "Central": ["City of London", "Westminster", "Camden", "Islington", "Kensington and Chelsea", "Kensington", ],
    "East": ["Tower Hamlets", "Hackney", "Newham", "Waltham Forest", "Redbridge", "Barking and Dagenham",
             "Havering", ],
    "North": ["Haringey", "Enfield", "Barnet"],
    "West": ["Hammersmith and Fulham", "Hammersmith", "Ealing", "Hounslow", "Hillingdon", "Brent", "Harrow",
             "Richmond upon Thames", "Richmond", ],
    "South": ["Lambeth", "Southwark", "Lewisham", "Greenwich", "Bexley", "Bromley", "Croydon", "Sutton", "Merton",
              "Wandsworth", "Kingston upon Thames", "Kingston", ],
}


def borough_region(borough: Optional[str]) -> Optional[str]:
    """Classify a borough into East / West / North / South / Central.

    Returns ``None`` for empty or unknown boroughs.
    """
    if not borough:
        return None
    key = borough.strip().lower()
    if not key:
        return None
    for region, members in REGIONS.items():
        for member in members:
            if member.lower() == key:
                return region
    return None


# ======================================================================
# Audience
# ======================================================================

CHILDREN_KEYWORDS: list[str] = ["kids", "children", "child", "youth", "junior", "juniors", "under-16", "under 16",
                                "u16", "u-16", "under-18", "under 18", "u18", "u-18", "under-14", "under 14", "u14",
                                "u-14", "under-12", "under 12", "u12", "u-12", "under-10", "under 10", "u10", "u-10",
                                "primary school", "secondary school", "school-age", "school age", "school kids", ]


def mentions_children(text: Optional[str]) -> bool:
    """``True`` if *text* contains any children / youth keyword."""
    if not text:
        return False
    lowered = text.lower()
    return any(keyword in lowered for keyword in CHILDREN_KEYWORDS)
