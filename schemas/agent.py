"""Agent record schemas for the directory catalog."""

from enum import Enum
from typing import Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PricingModel(str, Enum):
    """Monetization class of an agent."""
    FREE = "free"
    FREEMIUM = "freemium"
    PAID = "paid"
    ENTERPRISE = "enterprise"
    OPEN_SOURCE = "open_source"


class AutonomyLevel(str, Enum):
    """Degree of unsupervised operation."""
    ASSISTIVE = "assistive"
    SEMI_AUTONOMOUS = "semi_autonomous"
    FULLY_AUTONOMOUS = "fully_autonomous"


# Pricing models that count as budget-friendly in comparisons
BUDGET_PRICING = (PricingModel.FREE, PricingModel.OPEN_SOURCE, PricingModel.FREEMIUM)


class MCPConfig(BaseModel):
    """Launch configuration for an agent's MCP server."""
    model_config = ConfigDict(frozen=True)

    command: str
    args: tuple[str, ...] = Field(default_factory=tuple)
    env: Optional[tuple[tuple[str, str], ...]] = None
    description: Optional[str] = None

    @field_validator("env", mode="before")
    @classmethod
    def _freeze_env(cls, env):
        # Ordered pairs; a frozen record holds no mutable dict
        if isinstance(env, Mapping):
            return tuple(env.items())
        return env

    def connection_block(self) -> dict:
        """Connection settings as a plain dict, without env when it is absent."""
        block = {
            "command": self.command,
            "args": list(self.args),
        }
        if self.env is not None:
            block["env"] = dict(self.env)
        return block

    def launch_command(self) -> str:
        """Single-line shell form of the launch command."""
        return " ".join([self.command, *self.args])


class Agent(BaseModel):
    """One catalog record describing an external AI tool or service."""
    model_config = ConfigDict(frozen=True)

    # Identity
    slug: str = Field(min_length=1, description="Unique, stable lookup key")
    name: str
    tagline: str = ""
    description: str = ""
    url: str = ""

    # Classification
    primary_category: str
    secondary_categories: tuple[str, ...] = Field(default_factory=tuple)

    # Pricing and operation
    pricing_model: PricingModel
    pricing_details: str = ""
    autonomy_level: AutonomyLevel
    open_source: bool = False
    repo_url: Optional[str] = None

    # MCP
    mcp_support: bool = False
    mcp_config: Optional[MCPConfig] = None

    # Matching signals
    tags: tuple[str, ...] = Field(default_factory=tuple)
    capabilities: tuple[str, ...] = Field(default_factory=tuple)
    best_for: tuple[str, ...] = Field(default_factory=tuple, description="Intent statements")
    limitations: tuple[str, ...] = Field(default_factory=tuple)
    not_ideal_for: tuple[str, ...] = Field(default_factory=tuple, description="Negative signals")

    # Operational notes
    reliability_notes: str = ""
    access_methods: tuple[str, ...] = Field(default_factory=tuple)
    integrates_with: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("tags")
    @classmethod
    def _lowercase_tags(cls, tags: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(tag.lower() for tag in tags)

    @property
    def has_mcp_config(self) -> bool:
        """Whether the agent can be launched as an MCP server."""
        return self.mcp_support and self.mcp_config is not None
