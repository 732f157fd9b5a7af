"""Pydantic schemas for the YAGOO agent directory."""

from .agent import Agent, MCPConfig, PricingModel, AutonomyLevel, BUDGET_PRICING
from .results import (
    ScoredAgent,
    CategoryCount,
    CategorySummary,
    LookupResult,
    ComparisonStatus,
    ComparisonRow,
    QuickRecommendations,
    ComparisonResult,
)
from .inputs import SearchInput, GetAgentInput, CompareInput, NoInput

__all__ = [
    "Agent",
    "MCPConfig",
    "PricingModel",
    "AutonomyLevel",
    "BUDGET_PRICING",
    "ScoredAgent",
    "CategoryCount",
    "CategorySummary",
    "LookupResult",
    "ComparisonStatus",
    "ComparisonRow",
    "QuickRecommendations",
    "ComparisonResult",
    "SearchInput",
    "GetAgentInput",
    "CompareInput",
    "NoInput",
]
