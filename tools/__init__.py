"""Transport-agnostic tools for the agent directory."""

from .base import Tool, ToolResult
from .directory_tools import (
    SearchAgentsTool,
    GetAgentTool,
    ListCategoriesTool,
    CompareAgentsTool,
    ListMCPTool,
    build_directory_tools,
)

__all__ = [
    "Tool",
    "ToolResult",
    "SearchAgentsTool",
    "GetAgentTool",
    "ListCategoriesTool",
    "CompareAgentsTool",
    "ListMCPTool",
    "build_directory_tools",
]
