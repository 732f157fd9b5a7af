"""Main orchestrator for the YAGOO agent directory."""

import logging
from typing import Optional

from config.settings import Settings

# Catalog
from retrieval.catalog import Catalog
from retrieval.catalog_loader import CatalogLoader

# Engine
from engine.scorer import AgentScorer
from engine.filters import filter_agents
from engine.ranker import AgentRanker
from engine.aggregator import CatalogAggregator
from engine.composer import ResponseComposer

logger = logging.getLogger(__name__)


class DirectoryOrchestrator:
    """Answers directory requests against a read-only catalog."""

    def __init__(self, settings: Optional[Settings] = None, catalog: Optional[Catalog] = None):
        """
        Initialize orchestrator.

        Args:
            settings: Application settings
            catalog: Preloaded catalog (loaded from settings.catalog_path when omitted)

        Raises:
            CatalogLoadError: If the catalog cannot be loaded
        """
        self.settings = settings or Settings()

        if catalog is None:
            logger.info(f"Using catalog data source: {self.settings.catalog_path}")
            catalog = CatalogLoader().load(self.settings.catalog_path)
        self.catalog = catalog

        logger.info(
            f"{len(self.catalog)} agents loaded across "
            f"{len(self.catalog.category_labels)} categories"
        )

        self._init_engine()

    def _init_engine(self):
        """Initialize scoring, aggregation and composition components."""
        labels = self.catalog.category_labels
        self.scorer = AgentScorer(labels)
        self.ranker = AgentRanker(self.scorer)
        self.aggregator = CatalogAggregator(self.catalog)
        self.composer = ResponseComposer(labels)

    def search(
        self,
        query: str,
        category: Optional[str] = None,
        pricing: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> str:
        """
        Search the directory for agents matching a natural-language query.

        Args:
            query: What the caller needs an agent for
            category: Optional category filter (primary or secondary)
            pricing: Optional pricing model filter
            limit: Maximum number of results (settings default when omitted, capped at settings.max_limit)

        Returns:
            Ranked results, or a zero-results message naming the query
        """
        if limit is None:
            limit = self.settings.default_limit
        limit = min(limit, self.settings.max_limit)

        candidates = filter_agents(self.catalog, category=category, pricing=pricing)
        results = self.ranker.rank(candidates, query, limit=limit)

        logger.info(
            f"Search {query!r} (category={category}, pricing={pricing}): "
            f"{len(candidates)} candidates, {len(results)} results"
        )
        return self.composer.compose_search_results(query, results)

    def get_agent(self, slug: str) -> str:
        """Full profile for a slug, or a not-found message with suggestions."""
        lookup = self.aggregator.lookup(slug)
        return self.composer.compose_lookup(lookup)

    def list_categories(self) -> str:
        """Every category with its label and agent count."""
        summary = self.aggregator.count_by_category()
        return self.composer.compose_categories(summary)

    def compare(self, slugs: list[str]) -> str:
        """Side-by-side comparison, or the list of unresolved slugs."""
        comparison = self.aggregator.compare(slugs)
        return self.composer.compose_comparison(comparison)

    def list_mcp(self) -> str:
        """All MCP-capable agents with connection configuration."""
        agents = self.aggregator.list_mcp_enabled()
        return self.composer.compose_mcp_listing(agents)
