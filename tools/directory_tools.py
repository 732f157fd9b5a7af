"""Directory tools exposing the orchestrator operations."""

from schemas.inputs import CompareInput, GetAgentInput, NoInput, SearchInput
from .base import Tool

STRICT_EMPTY_SCHEMA = {"type": "object", "properties": {}, "additionalProperties": False}


class SearchAgentsTool(Tool):
    """Tool for searching the directory."""

    name = "yagoo_search"
    title = "Search YAGOO Directory"
    input_model = SearchInput

    parameters = {
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "minLength": 2,
                "maxLength": 500,
                "description": "Natural language description of what you need an agent for"
            },
            "category": {
                "type": "string",
                "description": "Filter by category (e.g., 'coding_development', 'creative_design')"
            },
            "pricing": {
                "type": "string",
                "description": "Filter by pricing model: 'free', 'freemium', 'paid', 'enterprise', 'open_source'"
            },
            "limit": {
                "type": "integer",
                "minimum": 1,
                "maximum": 20,
                "default": 5,
                "description": "Maximum number of results to return"
            }
        },
        "required": ["query"],
        "additionalProperties": False
    }

    def __init__(self, orchestrator):
        """
        Initialize search tool.

        Args:
            orchestrator: DirectoryOrchestrator instance
        """
        self.orchestrator = orchestrator
        self.max_limit = orchestrator.settings.max_limit
        limit_schema = dict(self.parameters["properties"]["limit"])
        limit_schema["maximum"] = min(limit_schema["maximum"], self.max_limit)
        limit_schema["default"] = orchestrator.settings.default_limit
        self.parameters = {
            **self.parameters,
            "properties": {**self.parameters["properties"], "limit": limit_schema},
        }

        catalog = orchestrator.catalog
        self.description = f"""Search the YAGOO agent directory to find the right AI agent for a task.

Currently indexes {len(catalog)} agents across {len(catalog.category_labels)} categories.

Use this tool when you need to:
- Recommend an agent for a specific task
- Find alternatives to a known agent
- Discover what agents exist for a category

Returns a ranked list of matching agents with recommendations."""

    def run(self, params: SearchInput) -> str:
        if params.limit is not None and params.limit > self.max_limit:
            raise ValueError(f"limit: must be at most {self.max_limit}")
        return self.orchestrator.search(
            params.query,
            category=params.category,
            pricing=params.pricing,
            limit=params.limit,
        )


class GetAgentTool(Tool):
    """Tool for getting a full agent profile."""

    name = "yagoo_get_agent"
    title = "Get Agent Details"
    description = """Get full details for a specific agent from the YAGOO directory.
Returns the complete profile including capabilities, limitations, pricing, and MCP configuration."""
    input_model = GetAgentInput

    parameters = {
        "type": "object",
        "properties": {
            "slug": {
                "type": "string",
                "minLength": 1,
                "description": "The agent slug (e.g., 'claude-code', 'cursor', 'midjourney')"
            }
        },
        "required": ["slug"],
        "additionalProperties": False
    }

    def __init__(self, orchestrator):
        self.orchestrator = orchestrator

    def run(self, params: GetAgentInput) -> str:
        return self.orchestrator.get_agent(params.slug)


class ListCategoriesTool(Tool):
    """Tool for listing categories with counts."""

    name = "yagoo_list_categories"
    title = "List Agent Categories"
    input_model = NoInput
    parameters = STRICT_EMPTY_SCHEMA

    def __init__(self, orchestrator):
        self.orchestrator = orchestrator
        count = len(orchestrator.catalog.category_labels)
        self.description = f"""List all agent categories in the YAGOO directory with counts.
Returns all {count} categories with the number of agents in each."""

    def run(self, params: NoInput) -> str:
        return self.orchestrator.list_categories()


class CompareAgentsTool(Tool):
    """Tool for comparing agents side by side."""

    name = "yagoo_compare"
    title = "Compare Agents"
    description = """Compare multiple agents side-by-side.
Use this when the user needs to choose between options.
Returns pricing, autonomy, strengths, limitations and quick recommendations."""
    input_model = CompareInput

    parameters = {
        "type": "object",
        "properties": {
            "slugs": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Array of agent slugs to compare",
                "minItems": 2,
                "maxItems": 5
            }
        },
        "required": ["slugs"],
        "additionalProperties": False
    }

    def __init__(self, orchestrator):
        self.orchestrator = orchestrator

    def run(self, params: CompareInput) -> str:
        return self.orchestrator.compare(params.slugs)


class ListMCPTool(Tool):
    """Tool for listing MCP-enabled agents."""

    name = "yagoo_list_mcp"
    title = "List MCP-Enabled Agents"
    description = """List all agents with MCP server support and their connection configs.
Returns every agent that can be connected via MCP, with ready-to-use configuration."""
    input_model = NoInput
    parameters = STRICT_EMPTY_SCHEMA

    def __init__(self, orchestrator):
        self.orchestrator = orchestrator

    def run(self, params: NoInput) -> str:
        return self.orchestrator.list_mcp()


def build_directory_tools(orchestrator) -> dict[str, Tool]:
    """All directory tools keyed by name."""
    tools = [
        SearchAgentsTool(orchestrator),
        GetAgentTool(orchestrator),
        ListCategoriesTool(orchestrator),
        CompareAgentsTool(orchestrator),
        ListMCPTool(orchestrator),
    ]
    return {tool.name: tool for tool in tools}
