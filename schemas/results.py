"""Result schemas produced by the ranking and aggregation engine."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field
from .agent import Agent


class ScoredAgent(BaseModel):
    """An agent paired with its relevance score for a query."""
    agent: Agent
    score: int


class CategoryCount(BaseModel):
    """Number of agents whose primary category is `key`."""
    key: str
    label: str
    count: int = 0


class CategorySummary(BaseModel):
    """Category breakdown across the whole catalog."""
    categories: list[CategoryCount] = Field(default_factory=list)
    total_agents: int = 0

    @property
    def populated_categories(self) -> int:
        """Categories with at least one agent."""
        return sum(1 for category in self.categories if category.count > 0)

    def as_dict(self) -> dict[str, int]:
        """Counts keyed by category, in label order."""
        return {category.key: category.count for category in self.categories}


class LookupResult(BaseModel):
    """Outcome of an exact slug lookup."""
    slug: str
    agent: Optional[Agent] = None
    suggestions: list[str] = Field(default_factory=list, description="Did-you-mean slugs")

    @property
    def found(self) -> bool:
        return self.agent is not None


class ComparisonStatus(str, Enum):
    """Comparison outcome."""
    COMPLETE = "complete"
    MISSING_AGENTS = "missing_agents"
    TOO_FEW_AGENTS = "too_few_agents"


class ComparisonRow(BaseModel):
    """Per-agent column of a comparison table."""
    slug: str
    name: str
    pricing_model: str
    pricing_details: str
    autonomy_level: str
    best_for: list[str] = Field(default_factory=list)
    limitations: list[str] = Field(default_factory=list)


class QuickRecommendations(BaseModel):
    """Optional picks derived from the compared agents, in input order."""
    budget_friendly: Optional[Agent] = None
    autonomous: Optional[Agent] = None
    mcp_integration: Optional[Agent] = None


class ComparisonResult(BaseModel):
    """Side-by-side comparison, or the reason none was produced."""
    status: ComparisonStatus
    requested: list[str] = Field(default_factory=list)
    agents: list[Agent] = Field(default_factory=list)
    rows: list[ComparisonRow] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    recommendations: Optional[QuickRecommendations] = None
