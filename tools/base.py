"""Base classes for directory tools."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Type
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

READ_ONLY_ANNOTATIONS = {
    "readOnlyHint": True,
    "destructiveHint": False,
    "idempotentHint": True,
    "openWorldHint": False,
}


class ToolResult(BaseModel):
    """Result from tool execution."""
    tool_name: str
    success: bool
    result: Any
    error: Optional[str] = None


class Tool(ABC):
    """
    Abstract base class for tools.

    Arguments are validated against `input_model` before `run` is called;
    validation failures and unexpected errors come back as a failed
    ToolResult instead of propagating.
    """
    name: str
    title: str
    description: str
    parameters: Dict[str, Any]
    input_model: Type[BaseModel]
    annotations: Dict[str, bool] = READ_ONLY_ANNOTATIONS

    @abstractmethod
    def run(self, params: BaseModel) -> str:
        """Run the tool with validated arguments."""
        pass

    def execute(self, **kwargs) -> ToolResult:
        """Validate arguments and run the tool."""
        try:
            params = self.input_model.model_validate(kwargs)
        except ValidationError as e:
            logger.warning(f"Invalid arguments for {self.name}: {e}")
            return ToolResult(
                tool_name=self.name,
                success=False,
                result=None,
                error=self._format_validation_error(e),
            )

        try:
            return ToolResult(
                tool_name=self.name,
                success=True,
                result=self.run(params),
            )
        except Exception as e:
            logger.error(f"{self.name} tool error: {e}")
            return ToolResult(
                tool_name=self.name,
                success=False,
                result=None,
                error=str(e),
            )

    def get_definition(self) -> Dict:
        """Get tool definition with JSON-schema parameters."""
        return {
            "name": self.name,
            "title": self.title,
            "description": self.description,
            "inputSchema": self.parameters,
            "annotations": dict(self.annotations),
        }

    @staticmethod
    def _format_validation_error(error: ValidationError) -> str:
        messages = []
        for item in error.errors():
            location = ".".join(str(part) for part in item["loc"]) or "input"
            messages.append(f"{location}: {item['msg']}")
        return "; ".join(messages)
