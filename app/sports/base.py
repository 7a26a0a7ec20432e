"""
Abstract base class for sport matchers.

Most sports are matched against an event by a plain word-boundary
search over its category and name.  Sports whose names are ambiguous
("football" also names American football, "boxing" also names kids'
boxing classes) ship a dedicated matcher.  A matcher defines:

- The lowercase sport names it answers for
- A display name
- A match predicate over an event's category and name
"""

import re
from abc import ABC, abstractmethod

from app.schemas.event import Event


def word_boundary_search(term: str, text: str) -> bool:
    """Case-insensitive ``\\bterm\\b`` search."""
    if not term or not text:
        return False
    return re.search(rf"\b{re.escape(term)}\b", text, re.IGNORECASE) is not None


class SportMatcher(ABC):
    """Abstract base class for sport-specific category matching."""

    @property
    @abstractmethod
    def sport_names(self) -> tuple[str, ...]:
        """Lowercase preferred-sport names handled, e.g. ``('football', 'soccer')``."""
        ...

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable name, e.g. ``'Football'``."""
        ...

    @abstractmethod
    def matches(self, event: Event) -> bool:
        """Whether *event* is a session of this sport."""
        ...

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def event_text(event: Event) -> str:
        """Category and name joined, lowercased."""
        return f"{event.category} {event.event_name}".lower()
