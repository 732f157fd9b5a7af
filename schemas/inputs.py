"""Input schemas for the directory tools."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class SearchInput(BaseModel):
    """Arguments for yagoo_search."""
    model_config = ConfigDict(extra="forbid", strict=True)

    query: str = Field(
        min_length=2,
        max_length=500,
        description="Natural language description of what you need an agent for",
    )
    category: Optional[str] = Field(
        None,
        description="Filter by category (e.g., 'coding_development', 'creative_design')",
    )
    pricing: Optional[str] = Field(
        None,
        description="Filter by pricing model: 'free', 'freemium', 'paid', 'enterprise', 'open_source'",
    )
    limit: Optional[int] = Field(
        None,
        ge=1,
        le=20,
        description="Maximum number of results to return (default: 5)",
    )


class GetAgentInput(BaseModel):
    """Arguments for yagoo_get_agent."""
    model_config = ConfigDict(extra="forbid", strict=True)

    slug: str = Field(
        min_length=1,
        description="The agent slug (e.g., 'claude-code', 'cursor', 'midjourney')",
    )


class CompareInput(BaseModel):
    """Arguments for yagoo_compare."""
    model_config = ConfigDict(extra="forbid", strict=True)

    slugs: list[str] = Field(
        min_length=2,
        max_length=5,
        description="Array of agent slugs to compare",
    )


class NoInput(BaseModel):
    """Tools that take no arguments."""
    model_config = ConfigDict(extra="forbid", strict=True)
