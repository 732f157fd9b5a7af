"""Composer for markdown responses."""

import json
from typing import Mapping
from schemas.agent import Agent, MCPConfig
from schemas.results import (
    CategorySummary,
    ComparisonResult,
    ComparisonStatus,
    LookupResult,
    ScoredAgent,
)

SEARCH_FOOTER = "*Use yagoo_get_agent with slug for full details. Use yagoo_compare to compare options.*"
CATEGORIES_FOOTER = "*Use yagoo_search with category filter to explore specific categories.*"
MCP_FOOTER = "*Add to Claude Code: `claude mcp add <name> -- <command> <args>`*"


def plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


class ResponseComposer:
    """
    Renders ranker and aggregator outputs as markdown text.

    Formatting only: scores, ordering and filtering decisions are taken
    as given.
    """

    def __init__(self, category_labels: Mapping[str, str]):
        """
        Initialize composer.

        Args:
            category_labels: Category key to display label mapping
        """
        self.category_labels = category_labels

    def compose_search_results(self, query: str, results: list[ScoredAgent]) -> str:
        """Ranked list view, or the zero-results message."""
        if not results:
            return self.compose_no_results(query)

        lines = [
            f'# YAGOO Search Results: "{query}"',
            f"Found {plural(len(results), 'matching agent')}",
            "",
        ]

        for i, result in enumerate(results, 1):
            agent = result.agent
            lines.append(f"## {i}. {agent.name}")
            lines.append(f"*{agent.tagline}*")
            lines.append("")
            lines.append(f"**Why it fits:** {'; '.join(agent.best_for[:2])}")
            lines.append(f"**Watch out for:** {agent.limitations[0] if agent.limitations else 'No major limitations noted'}")
            lines.append(f"**Pricing:** {agent.pricing_model.value} — {agent.pricing_details}")
            lines.append(f"**URL:** {agent.url}")
            if agent.has_mcp_config:
                lines.append(f"**MCP:** `{agent.mcp_config.launch_command()}`")
            lines.append("")

        lines.append("---")
        lines.append(SEARCH_FOOTER)
        return "\n".join(lines)

    def compose_no_results(self, query: str) -> str:
        return (
            f'No agents found matching "{query}". '
            "Try different keywords or browse by category using yagoo_list_categories."
        )

    def compose_lookup(self, lookup: LookupResult) -> str:
        """Full profile on a hit, not-found message with suggestions on a miss."""
        if lookup.found:
            return self.compose_agent_detail(lookup.agent)

        if lookup.suggestions:
            hint = f" Did you mean: {', '.join(lookup.suggestions)}?"
        else:
            hint = " Use yagoo_search to find agents."
        return f'Agent "{lookup.slug}" not found.{hint}'

    def compose_agent_detail(self, agent: Agent) -> str:
        """Full profile with every catalog field."""
        repo = f" ({agent.repo_url})" if agent.repo_url else ""
        lines = [
            f"# {agent.name}",
            f"*{agent.tagline}*",
            "",
            f"**Slug:** {agent.slug}",
            f"**URL:** {agent.url}",
            f"**Category:** {self._label(agent.primary_category)}",
        ]
        if agent.secondary_categories:
            also_in = ", ".join(self._label(c) for c in agent.secondary_categories)
            lines.append(f"**Also in:** {also_in}")
        lines.extend([
            f"**Pricing:** {agent.pricing_model.value} — {agent.pricing_details}",
            f"**Autonomy Level:** {agent.autonomy_level.value}",
            f"**Open Source:** {'Yes' if agent.open_source else 'No'}{repo}",
            f"**MCP Support:** {'Yes' if agent.mcp_support else 'No'}",
        ])
        if agent.tags:
            lines.append(f"**Tags:** {', '.join(agent.tags)}")

        if agent.has_mcp_config:
            lines.append("")
            lines.append("## MCP Server Configuration")
            lines.extend(self._connection_block(agent.mcp_config))
            if agent.mcp_config.description:
                lines.append(f"*{agent.mcp_config.description}*")

        lines.extend([
            "",
            "## Description",
            agent.description,
            "",
            "## Best For",
            *[f"- {item}" for item in agent.best_for],
            "",
            "## Capabilities",
            *[f"- {item}" for item in agent.capabilities],
            "",
            "## Limitations",
            *[f"- {item}" for item in agent.limitations],
            "",
            "## Not Ideal For",
            *[f"- {item}" for item in agent.not_ideal_for],
            "",
            "## Reliability",
            agent.reliability_notes,
            "",
            "## Access Methods",
            ", ".join(agent.access_methods),
            "",
            "## Integrations",
            ", ".join(agent.integrates_with) if agent.integrates_with else "None listed",
        ])
        return "\n".join(lines)

    def compose_categories(self, summary: CategorySummary) -> str:
        """Category listing in label order."""
        lines = [
            "# YAGOO Agent Categories",
            "",
            f"Total: {summary.total_agents} agents across {summary.populated_categories} categories",
            "",
        ]
        for category in summary.categories:
            lines.append(f"- **{category.label}** ({category.key}): {plural(category.count, 'agent')}")

        lines.append("")
        lines.append(CATEGORIES_FOOTER)
        return "\n".join(lines)

    def compose_comparison(self, comparison: ComparisonResult) -> str:
        """Comparison tables, or the reason no comparison was made."""
        if comparison.status == ComparisonStatus.MISSING_AGENTS:
            return (
                f"Agents not found: {', '.join(comparison.missing)}. "
                "Use yagoo_search to find valid agent slugs."
            )
        if comparison.status == ComparisonStatus.TOO_FEW_AGENTS:
            return "Need at least 2 valid agents to compare."

        lines = [
            f"# Agent Comparison: {' vs '.join(row.name for row in comparison.rows)}",
            "",
            "## Pricing",
        ]
        for row in comparison.rows:
            lines.append(f"- **{row.name}**: {row.pricing_model} — {row.pricing_details}")
        lines.append("")

        lines.append("## Autonomy Level")
        for row in comparison.rows:
            lines.append(f"- **{row.name}**: {row.autonomy_level}")
        lines.append("")

        lines.append("## Best For")
        for row in comparison.rows:
            lines.append(f"**{row.name}:**")
            lines.extend(f"  - {item}" for item in row.best_for)
        lines.append("")

        lines.append("## Watch Out For")
        for row in comparison.rows:
            lines.append(f"**{row.name}:**")
            lines.extend(f"  - {item}" for item in row.limitations)
        lines.append("")

        lines.append("## Quick Recommendations")
        picks = comparison.recommendations
        if picks is not None:
            if picks.budget_friendly:
                lines.append(f"- **Budget-friendly**: {picks.budget_friendly.name}")
            if picks.autonomous:
                lines.append(f"- **For autonomous operation**: {picks.autonomous.name}")
            if picks.mcp_integration:
                lines.append(f"- **MCP integration**: {picks.mcp_integration.name}")

        return "\n".join(lines)

    def compose_mcp_listing(self, agents: list[Agent]) -> str:
        """MCP-capable agents with ready-to-use connection blocks."""
        lines = [
            "# MCP-Enabled Agents",
            "",
            f"{len(agents)} agents with MCP server support:",
            "",
        ]
        for agent in agents:
            lines.append(f"## {agent.name}")
            lines.append(f"*{agent.tagline}*")
            lines.append("")
            lines.append("**Connection:**")
            lines.extend(self._connection_block(agent.mcp_config))
            if agent.mcp_config.description:
                lines.append(agent.mcp_config.description)
            lines.append("")

        lines.append("---")
        lines.append(MCP_FOOTER)
        return "\n".join(lines)

    def _connection_block(self, config: MCPConfig) -> list[str]:
        return ["```json", json.dumps(config.connection_block(), indent=2), "```"]

    def _label(self, category: str) -> str:
        return self.category_labels.get(category, category)
