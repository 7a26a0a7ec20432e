"""
Football (soccer) matcher.

"Football" is ambiguous in event listings: American football, Aussie
rules, flag football and gridiron sessions all carry the word.  Those
are rejected first; what remains must mention football, soccer or an
N-a-side format.
"""

import re

from app.schemas.event import Event
from app.sports.base import SportMatcher

NON_SOCCER_KEYWORDS: list[str] = ["american football", "australian rules", "australian football", "aussie rules",
                                  "afl", "flag football", "gridiron", "nfl", ]

_SOCCER_RE = re.compile(r"\b(football|soccer|futsal|\d+\s*-?\s*a\s*-?\s*side)\b", re.IGNORECASE)


class FootballMatcher(SportMatcher):
    """Association football, including small-sided formats."""

    @property
    def sport_names(self) -> tuple[str, ...]:
        return ("football", "soccer")

    @property
    def display_name(self) -> str:
        return "Football"

    def matches(self, event: Event) -> bool:
        text = self.event_text(event)
        if any(re.search(rf"\b{re.escape(kw)}\b", text) for kw in NON_SOCCER_KEYWORDS):
            return False
        return _SOCCER_RE.search(text) is not None
