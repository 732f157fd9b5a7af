"""Side-by-side agent comparison."""

from typing import Optional
from schemas.agent import Agent, AutonomyLevel, BUDGET_PRICING
from schemas.results import (
    ComparisonResult,
    ComparisonRow,
    ComparisonStatus,
    QuickRecommendations,
)

BEST_FOR_SHOWN = 3
LIMITATIONS_SHOWN = 2
MIN_AGENTS = 2


class AgentComparator:
    """Builds comparison tables and quick picks for resolved agents."""

    def compare(self, agents: list[Agent]) -> ComparisonResult:
        """
        Compare agents across pricing, autonomy, strengths and limitations.

        Args:
            agents: Resolved agents, in the order the caller asked for them

        Returns:
            ComparisonResult (TOO_FEW_AGENTS when fewer than two are given)
        """
        requested = [agent.slug for agent in agents]

        if len(agents) < MIN_AGENTS:
            return ComparisonResult(
                status=ComparisonStatus.TOO_FEW_AGENTS,
                requested=requested,
                agents=list(agents),
            )

        rows = [self._build_row(agent) for agent in agents]

        return ComparisonResult(
            status=ComparisonStatus.COMPLETE,
            requested=requested,
            agents=list(agents),
            rows=rows,
            recommendations=self.recommend(agents),
        )

    def recommend(self, agents: list[Agent]) -> QuickRecommendations:
        """First qualifying agent (input order) for each pick."""
        return QuickRecommendations(
            budget_friendly=self._first(agents, lambda a: a.pricing_model in BUDGET_PRICING),
            autonomous=self._first(agents, lambda a: a.autonomy_level == AutonomyLevel.FULLY_AUTONOMOUS),
            mcp_integration=self._first(agents, lambda a: a.mcp_support),
        )

    def _build_row(self, agent: Agent) -> ComparisonRow:
        return ComparisonRow(
            slug=agent.slug,
            name=agent.name,
            pricing_model=agent.pricing_model.value,
            pricing_details=agent.pricing_details,
            autonomy_level=agent.autonomy_level.value,
            best_for=list(agent.best_for[:BEST_FOR_SHOWN]),
            limitations=list(agent.limitations[:LIMITATIONS_SHOWN]),
        )

    @staticmethod
    def _first(agents: list[Agent], predicate) -> Optional[Agent]:
        return next((agent for agent in agents if predicate(agent)), None)
