"""Resolves free-text route queries to route identifiers."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ferry_departures.domain.models.route import Route

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteMatchRule:
    """Match when every required word is present and no excluded word is."""

    route_id: str
    all_of: tuple[str, ...]
    none_of: tuple[str, ...] = ()

    def matches(self, query: str) -> bool:
        return all(word in query for word in self.all_of) and not any(
            word in query for word in self.none_of
        )


def build_rules(routes: Sequence[Route]) -> list[RouteMatchRule]:
    """Build the ordered rule table: slugs and terminal pairs first, then single keywords."""
    rules: list[RouteMatchRule] = []
    for route in routes:
        rules.append(RouteMatchRule(route.id, (route.id.lower(),)))
        for pair in route.match_pairs:
            rules.append(RouteMatchRule(route.id, tuple(word.lower() for word in pair)))

    for route in routes:
        exclusions = tuple(word.lower() for word in route.keyword_exclusions)
        for keyword in route.keywords:
            rules.append(RouteMatchRule(route.id, (keyword.lower(),), exclusions))

    return rules


class RouteResolver:
    """Maps natural-language or slug queries to a known route id. Never fails."""

    def __init__(self, routes: Sequence[Route], default_route_id: str) -> None:
        self._rules = build_rules(routes)
        self._default_route_id = default_route_id

    def resolve(self, query: str | None) -> str:
        normalized = (query or "").strip().lower()
        if not normalized:
            return self._default_route_id

        for rule in self._rules:
            if rule.matches(normalized):
                return rule.route_id

        logger.debug(f"No route matched '{query}', using default {self._default_route_id}")
        return self._default_route_id
