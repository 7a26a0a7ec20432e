"""
Sport matcher system.

Import this module to register all sport-specific matchers.
New ambiguous sports are handled by:
  1. Creating a matcher class implementing :class:`SportMatcher`
  2. Adding a registration line below
"""

from app.sports.boxing import BoxingMatcher
from app.sports.football import FootballMatcher
from app.sports.registry import SportMatcherRegistry

# Register all built-in matchers
SportMatcherRegistry.register(FootballMatcher())
SportMatcherRegistry.register(BoxingMatcher())

__all__ = ["SportMatcherRegistry"]
