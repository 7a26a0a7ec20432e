"""
Boxing matcher.

Adult boxing fans are not matched to children's boxing classes.
"""

from app.dashboard.normalize import mentions_children
from app.schemas.event import Event
from app.sports.base import SportMatcher, word_boundary_search


class BoxingMatcher(SportMatcher):
    """Boxing sessions, excluding children's classes."""

    @property
    def sport_names(self) -> tuple[str, ...]:
        return ("boxing",)

    @property
    def display_name(self) -> str:
        return "Boxing"

    def matches(self, event: Event) -> bool:
        text = self.event_text(event)
        if mentions_children(text):
            return False
        return word_boundary_search("boxing", text)
