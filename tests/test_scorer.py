"""Tests for the relevance scorer."""

import pytest
from engine.scorer import AgentScorer, SCORING_RULES, query_words
from agent_factory import CATEGORY_LABELS, make_agent, sample_agents


def neutral_agent(**overrides):
    """Agent in a category whose label shares no words with the test queries."""
    overrides.setdefault("primary_category", "creative_design")
    return make_agent("x", **overrides)


class TestAgentScorer:
    """Test additive weights of the scoring table."""

    def setup_method(self):
        """Set up test fixtures."""
        self.scorer = AgentScorer(CATEGORY_LABELS)

    def test_name_contains_query(self):
        """Test full query in name adds 50."""
        agent = neutral_agent(name="Firecrawl Pro")
        assert self.scorer.score(agent, "Firecrawl") == 50

    def test_tagline_contains_query(self):
        """Test full query in tagline adds 30."""
        agent = neutral_agent(tagline="Scrape the web quickly")
        assert self.scorer.score(agent, "scrape") == 30

    def test_query_contains_tag(self):
        """Test tag inside query adds 20, plus 10 for the word match."""
        agent = neutral_agent(tags=["web-scraping"])
        assert self.scorer.explain(agent, "web-scraping tools") == {"tag": 20, "tag_word": 10}

    def test_tag_contains_query(self):
        """Test query inside tag adds 20, plus 10 for the word match."""
        agent = neutral_agent(tags=["web-scraping"])
        assert self.scorer.score(agent, "scraping") == 30

    def test_tag_words_count_per_pair(self):
        """Test word-level tag matches count once per (tag, word) pair."""
        agent = neutral_agent(tags=["web-scraping", "scraping-api"])
        # "web" and "scraping" both hit the first tag, only "scraping" the second
        assert self.scorer.explain(agent, "web scraping") == {"tag_word": 30}

    def test_short_words_ignored(self):
        """Test tokens of two characters or fewer never match word-level."""
        agent = neutral_agent(tags=["ai"])
        assert query_words("ai is ok") == []
        # The whole query still matches the tag in either direction
        assert self.scorer.explain(agent, "ai") == {"tag": 20}

    def test_capability_weights(self):
        """Test full capability match adds 15 and each word adds 5."""
        agent = neutral_agent(capabilities=["Inline code completion"])
        assert self.scorer.explain(agent, "code completion") == {
            "capability": 15,
            "capability_word": 10,
        }

    def test_best_for_weights(self):
        """Test full best-for match adds 25 and each word adds 8."""
        agent = neutral_agent(best_for=["Scraping websites at scale"])
        assert self.scorer.score(agent, "scraping websites") == 25 + 8 + 8

    def test_not_ideal_for_is_negative(self):
        """Test not-ideal-for word matches subtract 5 each."""
        agent = neutral_agent(not_ideal_for=["Large websites", "Websites behind logins"])
        assert self.scorer.score(agent, "websites") == -10

    def test_category_label_word_match(self):
        """Test query words found in the primary category label add 10."""
        agent = make_agent("x", primary_category="coding_development")
        assert self.scorer.explain(agent, "development tools") == {"category_label_word": 10}

    def test_category_label_is_substring_only(self):
        """Test no stemming: 'code' does not match 'Coding'."""
        agent = make_agent("x", primary_category="coding_development")
        assert self.scorer.score(agent, "code") == 0
        assert self.scorer.score(agent, "velop") == 10

    def test_secondary_categories_not_scored(self):
        """Test only the primary category label contributes."""
        agent = neutral_agent(secondary_categories=["coding_development"])
        assert self.scorer.score(agent, "development") == 0

    def test_query_is_case_insensitive(self):
        """Test query and field text are compared lowercased."""
        agent = neutral_agent(capabilities=["Inline Code Completion"])
        assert self.scorer.score(agent, "CODE COMPLETION") == self.scorer.score(agent, "code completion")

    def test_all_signals_are_additive(self):
        """Test every matching rule contributes independently."""
        agent = neutral_agent(
            name="Crawler",
            tagline="Crawler for docs",
            tags=["crawler"],
            capabilities=["Crawler scheduling"],
            best_for=["Crawler pipelines"],
            not_ideal_for=["Crawler farms"],
        )
        # name 50 + tagline 30 + tag 20+10 + capability 15+5 + best_for 25+8 - 5
        assert self.scorer.score(agent, "crawler") == 158

    def test_explain_sums_to_score(self):
        """Test the breakdown adds up to the score."""
        for agent in sample_agents():
            breakdown = self.scorer.explain(agent, "coding websites at scale")
            assert sum(breakdown.values()) == self.scorer.score(agent, "coding websites at scale")

    def test_score_is_deterministic(self):
        """Test repeated calls give the same score."""
        agent = sample_agents()[0]
        scores = {self.scorer.score(agent, "code editor for coding") for _ in range(5)}
        assert len(scores) == 1

    def test_scrape_websites_query(self):
        """Test the web scraping agent scores positively through best-for words."""
        firecrawl = sample_agents()[2]
        breakdown = self.scorer.explain(firecrawl, "scrape websites")

        assert self.scorer.score(firecrawl, "scrape websites") > 0
        assert breakdown["best_for_word"] == 8

    def test_unrelated_agent_scores_zero(self):
        """Test an agent with no overlapping signals scores nothing."""
        support_bot = sample_agents()[3]
        assert self.scorer.score(support_bot, "scrape websites") <= 0

    @pytest.mark.parametrize("rule_name", [rule.name for rule in SCORING_RULES])
    def test_rule_names_unique(self, rule_name):
        """Test every rule in the weight table has a distinct name."""
        assert [rule.name for rule in SCORING_RULES].count(rule_name) == 1
