"""Tests for the ranker."""

from engine.ranker import AgentRanker
from engine.scorer import AgentScorer
from agent_factory import CATEGORY_LABELS, make_agent, sample_agents


class TestAgentRanker:
    """Test ordering, truncation and the positive-score cut."""

    def setup_method(self):
        """Set up test fixtures."""
        self.ranker = AgentRanker(AgentScorer(CATEGORY_LABELS))
        self.agents = sample_agents()

    def test_only_positive_scores_returned(self):
        """Test agents scoring zero or less are dropped."""
        results = self.ranker.rank(self.agents, "coding", limit=10)

        assert [r.agent.slug for r in results] == ["cursor", "cursor-rules"]
        assert all(r.score > 0 for r in results)

    def test_results_sorted_descending(self):
        """Test results are ordered by score, highest first."""
        agents = [
            make_agent("low", primary_category="creative_design", tags=["scraper"]),
            make_agent("high", name="Scraper", primary_category="creative_design", tags=["scraper"]),
        ]
        results = self.ranker.rank(agents, "scraper", limit=5)

        assert [r.agent.slug for r in results] == ["high", "low"]
        scores = [r.score for r in results]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_catalog_order(self):
        """Test equal scores keep their input order."""
        forward = self.ranker.rank(self.agents, "coding", limit=5)
        backward = self.ranker.rank(list(reversed(self.agents)), "coding", limit=5)

        assert forward[0].score == forward[1].score
        assert [r.agent.slug for r in forward] == ["cursor", "cursor-rules"]
        assert [r.agent.slug for r in backward] == ["cursor-rules", "cursor"]

    def test_limit_truncates(self):
        """Test no more than `limit` results are returned."""
        assert len(self.ranker.rank(self.agents, "coding", limit=1)) == 1

    def test_never_more_than_candidates(self):
        """Test a large limit is bounded by the candidate count."""
        results = self.ranker.rank(self.agents[:1], "coding", limit=20)
        assert len(results) <= 1

    def test_no_matches_is_empty(self):
        """Test an unmatched query returns an empty list."""
        assert self.ranker.rank(self.agents, "quantum chemistry", limit=5) == []

    def test_negative_scores_excluded(self):
        """Test an agent driven negative by not-ideal-for is excluded."""
        agent = make_agent("x", primary_category="creative_design", not_ideal_for=["Scraping websites"])
        assert self.ranker.rank([agent], "websites", limit=5) == []
