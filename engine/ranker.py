"""Ranking of scored agents."""

from typing import Iterable
from schemas.agent import Agent
from schemas.results import ScoredAgent
from .scorer import AgentScorer


class AgentRanker:
    """Scores a candidate set and keeps the best positive matches."""

    def __init__(self, scorer: AgentScorer):
        self.scorer = scorer

    def rank(self, agents: Iterable[Agent], query: str, limit: int = 5) -> list[ScoredAgent]:
        """
        Rank agents for a query.

        Args:
            agents: Candidate agents in catalog order
            query: Raw query text
            limit: Maximum number of results

        Returns:
            Agents with score > 0, highest first, ties in catalog order
        """
        scored = []
        for agent in agents:
            score = self.scorer.score(agent, query)
            if score > 0:
                scored.append(ScoredAgent(agent=agent, score=score))

        # sorted() is stable, reverse=True included
        scored = sorted(scored, key=lambda item: item.score, reverse=True)
        return scored[:limit]
