"""Ranking and aggregation engine for the agent directory."""

from .scorer import AgentScorer, ScoringRule, MatchMode, SCORING_RULES
from .filters import filter_agents
from .ranker import AgentRanker
from .comparator import AgentComparator
from .aggregator import CatalogAggregator
from .composer import ResponseComposer

__all__ = [
    "AgentScorer",
    "ScoringRule",
    "MatchMode",
    "SCORING_RULES",
    "filter_agents",
    "AgentRanker",
    "AgentComparator",
    "CatalogAggregator",
    "ResponseComposer",
]
