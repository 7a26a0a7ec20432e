"""
Sport matcher registry.

Central registry for the sport matchers.  Matchers are registered at
import time via :func:`SportMatcherRegistry.register`.  The registry
answers the single question the scorer asks: does a user's preferred
sport match this event?
"""

from __future__ import annotations

from typing import Optional

from app.schemas.event import Event
from app.sports.base import SportMatcher, word_boundary_search


class SportMatcherRegistry:
    """Singleton registry of sport-specific matchers."""

    _matchers: dict[str, SportMatcher] = {}

    @classmethod
    def register(cls, matcher: SportMatcher) -> None:
        """Register a matcher under each of its sport names.

        Raises :class:`ValueError` if a name is already taken.
        """
        for name in matcher.sport_names:
            if name in cls._matchers:
                raise ValueError(f"Sport '{name}' already registered")
        for name in matcher.sport_names:
            cls._matchers[name] = matcher

    @classmethod
    def get(cls, sport: str) -> Optional[SportMatcher]:
        """Get the matcher for *sport*.  Returns ``None`` if not found."""
        return cls._matchers.get(sport.strip().lower())

    @classmethod
    def available_sports(cls) -> list[str]:
        """Return sorted list of all sport names with a dedicated matcher."""
        return sorted(cls._matchers.keys())

    @classmethod
    def clear(cls) -> None:
        """Remove all matchers.  Useful for testing."""
        cls._matchers.clear()

    @classmethod
    def matches(cls, sport: str, event: Event) -> bool:
        """Whether the preferred *sport* matches *event*.

        Exact case-insensitive category equality always wins.  Otherwise
        a dedicated matcher decides if one is registered, else a
        word-boundary search over the category, then the name.
        """
        name = (sport or "").strip()
        if not name:
            return False

        if name.lower() == event.category.strip().lower():
            return True

        matcher = cls.get(name)
        if matcher is not None:
            return matcher.matches(event)

        return word_boundary_search(name, event.category) or word_boundary_search(name, event.event_name)
