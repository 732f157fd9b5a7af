"""Cross-record summaries over the catalog."""

import logging
from typing import Optional
from retrieval.catalog import Catalog
from schemas.agent import Agent
from schemas.results import (
    CategoryCount,
    CategorySummary,
    ComparisonResult,
    ComparisonStatus,
    LookupResult,
)
from .comparator import AgentComparator

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 3


class CatalogAggregator:
    """
    Derives category counts, slug lookups with suggestions, comparisons
    and the MCP-capable listing from a read-only catalog.
    """

    def __init__(self, catalog: Catalog, comparator: Optional[AgentComparator] = None):
        """
        Initialize aggregator.

        Args:
            catalog: Catalog instance
            comparator: Comparator used once all slugs resolve
        """
        self.catalog = catalog
        self.comparator = comparator or AgentComparator()

    def count_by_category(self) -> CategorySummary:
        """Agents per primary category, every known category included."""
        counts = {key: 0 for key in self.catalog.category_labels}
        for agent in self.catalog:
            counts[agent.primary_category] = counts.get(agent.primary_category, 0) + 1

        categories = [
            CategoryCount(key=key, label=label, count=counts[key])
            for key, label in self.catalog.category_labels.items()
        ]
        return CategorySummary(categories=categories, total_agents=len(self.catalog))

    def lookup(self, slug: str) -> LookupResult:
        """
        Exact slug lookup with did-you-mean suggestions on a miss.

        A candidate is suggested when its slug contains the requested slug,
        or its name contains it case-insensitively.
        """
        agent = self.catalog.get(slug)
        if agent is not None:
            return LookupResult(slug=slug, agent=agent)

        needle = slug.lower()
        suggestions = [
            candidate.slug
            for candidate in self.catalog
            if slug in candidate.slug or needle in candidate.name.lower()
        ][:MAX_SUGGESTIONS]

        logger.info(f"Agent {slug!r} not found, suggestions: {suggestions}")
        return LookupResult(slug=slug, suggestions=suggestions)

    def compare(self, slugs: list[str]) -> ComparisonResult:
        """
        Resolve slugs and compare the agents.

        Any unresolved slug aborts the comparison; all of them are reported.
        """
        agents: list[Agent] = []
        missing: list[str] = []

        for slug in slugs:
            agent = self.catalog.get(slug)
            if agent is not None:
                agents.append(agent)
            else:
                missing.append(slug)

        if missing:
            logger.info(f"Comparison aborted, unresolved slugs: {missing}")
            return ComparisonResult(
                status=ComparisonStatus.MISSING_AGENTS,
                requested=list(slugs),
                missing=missing,
            )

        return self.comparator.compare(agents)

    def list_mcp_enabled(self) -> list[Agent]:
        """Agents with MCP support and a launch config, catalog order."""
        return [agent for agent in self.catalog if agent.has_mcp_config]
