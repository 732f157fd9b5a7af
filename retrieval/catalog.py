"""Immutable in-memory agent catalog."""

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional
from schemas.agent import Agent


class CatalogLoadError(ValueError):
    """Raised when catalog data violates its invariants or cannot be read."""


class Catalog:
    """
    Read-only collection of agents plus the ordered category-label mapping.

    Built once at startup and passed by reference to every component.
    Iteration order of the agents and of the labels is the order they were
    given in, and is the canonical order for every listing.
    """

    def __init__(self, agents: Iterable[Agent], category_labels: Mapping[str, str]):
        """
        Initialize catalog.

        Args:
            agents: Agent records in catalog order
            category_labels: Ordered mapping of category key to display label

        Raises:
            CatalogLoadError: If a slug repeats or a primary category is unknown
        """
        self._agents = tuple(agents)
        self._labels = MappingProxyType(dict(category_labels))
        self._by_slug: dict[str, Agent] = {}

        for agent in self._agents:
            if agent.slug in self._by_slug:
                raise CatalogLoadError(f"Duplicate agent slug: {agent.slug}")
            if agent.primary_category not in self._labels:
                raise CatalogLoadError(
                    f"Agent {agent.slug} has unknown primary category: {agent.primary_category}"
                )
            self._by_slug[agent.slug] = agent

    @property
    def agents(self) -> tuple[Agent, ...]:
        return self._agents

    @property
    def category_labels(self) -> Mapping[str, str]:
        return self._labels

    def get(self, slug: str) -> Optional[Agent]:
        """Exact slug lookup."""
        return self._by_slug.get(slug)

    def __len__(self) -> int:
        return len(self._agents)

    def __iter__(self) -> Iterator[Agent]:
        return iter(self._agents)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug
