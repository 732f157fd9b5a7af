"""Tests for catalog aggregations."""

from engine.aggregator import CatalogAggregator
from schemas.results import ComparisonStatus
from agent_factory import CATEGORY_LABELS, build_catalog, make_agent, sample_agents


class TestCategoryCounts:
    """Test category count derivation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.catalog = build_catalog(*sample_agents())
        self.aggregator = CatalogAggregator(self.catalog)

    def test_counts_primary_category_only(self):
        """Test secondary categories are not counted."""
        counts = self.aggregator.count_by_category().as_dict()

        assert counts == {
            "coding_development": 2,
            "data_extraction": 1,
            "creative_design": 0,
            "customer_support": 1,
        }

    def test_every_category_present_in_label_order(self):
        """Test empty categories appear and order follows the labels."""
        summary = self.aggregator.count_by_category()
        assert [c.key for c in summary.categories] == list(CATEGORY_LABELS)
        assert [c.label for c in summary.categories] == list(CATEGORY_LABELS.values())

    def test_counts_sum_to_catalog_size(self):
        """Test category counts add up to the number of agents."""
        summary = self.aggregator.count_by_category()

        assert sum(c.count for c in summary.categories) == len(self.catalog)
        assert summary.total_agents == len(self.catalog)
        assert summary.populated_categories == 3


class TestLookup:
    """Test slug lookup and suggestions."""

    def setup_method(self):
        """Set up test fixtures."""
        self.aggregator = CatalogAggregator(build_catalog(*sample_agents()))

    def test_exact_match(self):
        """Test exact slug returns the record."""
        result = self.aggregator.lookup("cursor")

        assert result.found
        assert result.agent.slug == "cursor"
        assert result.suggestions == []

    def test_miss_suggests_by_slug(self):
        """Test a partial slug suggests agents containing it, catalog order."""
        result = self.aggregator.lookup("curso")

        assert not result.found
        assert result.suggestions == ["cursor", "cursor-rules"]

    def test_miss_suggests_by_name_case_insensitive(self):
        """Test names are matched case-insensitively."""
        result = self.aggregator.lookup("HELPER")
        assert result.suggestions == ["cursor-rules"]

    def test_slug_match_is_case_sensitive(self):
        """Test slug containment does not fold case."""
        catalog = build_catalog(make_agent("abc-tool", name="Unrelated"))
        result = CatalogAggregator(catalog).lookup("ABC")
        assert result.suggestions == []

    def test_suggestions_capped_at_three(self):
        """Test at most three suggestions, first three in catalog order."""
        catalog = build_catalog(*[make_agent(f"tool-{i}") for i in range(5)])
        result = CatalogAggregator(catalog).lookup("tool")
        assert result.suggestions == ["tool-0", "tool-1", "tool-2"]

    def test_no_suggestions(self):
        """Test a miss with nothing similar has no suggestions."""
        result = self.aggregator.lookup("zzz")
        assert not result.found
        assert result.suggestions == []


class TestCompare:
    """Test comparison resolution."""

    def setup_method(self):
        """Set up test fixtures."""
        self.aggregator = CatalogAggregator(build_catalog(*sample_agents()))

    def test_missing_slug_aborts_comparison(self):
        """Test one unresolved slug means no comparison at all."""
        result = self.aggregator.compare(["cursor", "missing"])

        assert result.status == ComparisonStatus.MISSING_AGENTS
        assert result.missing == ["missing"]
        assert result.rows == []
        assert result.recommendations is None

    def test_all_missing_slugs_reported(self):
        """Test every unresolved slug is reported, in input order."""
        result = self.aggregator.compare(["nope-1", "cursor", "nope-2"])
        assert result.missing == ["nope-1", "nope-2"]

    def test_complete_comparison_in_input_order(self):
        """Test resolved comparisons keep the caller's order."""
        result = self.aggregator.compare(["firecrawl", "cursor"])

        assert result.status == ComparisonStatus.COMPLETE
        assert [row.slug for row in result.rows] == ["firecrawl", "cursor"]
        assert result.requested == ["firecrawl", "cursor"]


class TestMCPListing:
    """Test MCP-capable listing."""

    def test_requires_support_and_config(self):
        """Test agents flagged without a config are left out."""
        aggregator = CatalogAggregator(build_catalog(*sample_agents()))
        assert [a.slug for a in aggregator.list_mcp_enabled()] == ["firecrawl"]

    def test_config_without_support_flag_excluded(self):
        """Test a config alone does not make an agent MCP-capable."""
        agent = make_agent("x", mcp_support=False, mcp_config={"command": "npx", "args": ["x"]})
        aggregator = CatalogAggregator(build_catalog(agent))
        assert aggregator.list_mcp_enabled() == []
