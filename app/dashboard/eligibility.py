"""
Eligibility filter — which events may be recommended at all.

Every rule is a hard exclusion.  An event is a *candidate* only if it is

1. dated today or later (date-only granularity),
2. active,
3. not already booked by the user,
4. not a children / youth session,
5. not gender-incompatible with the user.

Events whose date cannot be parsed fail rule 1 and are dropped.
"""

from __future__ import annotations

import datetime
from typing import Iterable, NamedTuple, Optional

from app.dashboard.normalize import mentions_children, parse_date
from app.schemas.event import Event
from app.schemas.profile import UserProfile

_ACTIVE_VALUES = {"true", "yes"}

_FEMALE = {"female", "woman", "f"}
_MALE = {"male", "man", "m"}


class GenderCompatibility(NamedTuple):
    """Outcome of matching an event's gender target against a user."""

    compatible: bool
    bonus: bool


# ======================================================================
# Individual rules
# ======================================================================


def is_active(event: Event) -> bool:
    return event.active.strip().lower() in _ACTIVE_VALUES


def is_children_session(event: Event) -> bool:
    """Name or category mentions kids, juniors, under-N, school-age, ..."""
    return mentions_children(f"{event.event_name} {event.category}")


def is_future_or_today(event: Event, today: datetime.date) -> bool:
    event_date = parse_date(event.date)
    return event_date is not None and event_date >= today


def gender_compatibility(gender_target: Optional[str], user_gender: Optional[str]) -> GenderCompatibility:
    """Match an event's gender target against a user's gender.

    - Either side empty: compatible, no bonus.
    - Target contains ``"women only"``: bonus for women, incompatible
      for men.
    - Target is ``"men"`` / ``"men only"`` or contains ``"men only"``:
      bonus for men, incompatible for women.
    - Anything else (mixed, open, unrecognised): compatible, no bonus.
    """
    target = (gender_target or "").strip().lower()
    gender = (user_gender or "").strip().lower()

    if not target or not gender:
        return GenderCompatibility(True, False)

    # "women only" contains "men only": test it first.
    if "women only" in target:
        if gender in _FEMALE:
            return GenderCompatibility(True, True)
        if gender in _MALE:
            return GenderCompatibility(False, False)
        return GenderCompatibility(True, False)

    if target in ("men", "men only") or "men only" in target:
        if gender in _MALE:
            return GenderCompatibility(True, True)
        if gender in _FEMALE:
            return GenderCompatibility(False, False)
        return GenderCompatibility(True, False)

    return GenderCompatibility(True, False)


# ======================================================================
# Main entry point
# ======================================================================


def filter_candidates(events: Iterable[Event], booked_event_ids: set[str], now: datetime.datetime | datetime.date,
                      profile: Optional[UserProfile], ) -> list[Event]:
    """Return the recommendable events, in catalog order.

    Args:
        events: Full event catalog.
        booked_event_ids: Ids of events the user already booked.
        now: Reference moment; only its date is used.
        profile: The user's profile (``None`` disables the gender rule).
    """
    today = now.date() if isinstance(now, datetime.datetime) else now
    user_gender = profile.gender if profile is not None else ""

    candidates = []
    for event in events:
        if not is_future_or_today(event, today):
            continue
        if not is_active(event):
            continue
        if event.event_id in booked_event_ids:
            continue
        if is_children_session(event):
            continue
        if not gender_compatibility(event.gender_target, user_gender).compatible:
            continue
        candidates.append(event)
    return candidates
