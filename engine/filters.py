"""Catalog filters applied before scoring."""

from typing import Iterable, Optional
from schemas.agent import Agent


def matches_category(agent: Agent, category: str) -> bool:
    """Primary or secondary category match."""
    return agent.primary_category == category or category in agent.secondary_categories


def matches_pricing(agent: Agent, pricing: str) -> bool:
    return agent.pricing_model.value == pricing


def filter_agents(
    agents: Iterable[Agent],
    category: Optional[str] = None,
    pricing: Optional[str] = None,
) -> tuple[Agent, ...]:
    """
    Narrow agents by category and/or pricing model.

    Filters compose with AND. Unknown values simply match nothing.

    Args:
        agents: Agents in catalog order
        category: Optional category key
        pricing: Optional pricing model value

    Returns:
        Matching agents, catalog order preserved
    """
    filtered = tuple(agents)

    if category:
        filtered = tuple(agent for agent in filtered if matches_category(agent, category))

    if pricing:
        filtered = tuple(agent for agent in filtered if matches_pricing(agent, pricing))

    return filtered
