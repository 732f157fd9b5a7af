"""Application settings."""

import logging
import os
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, field_validator

DEFAULT_CATALOG_PATH = str(Path(__file__).parent.parent / "data" / "catalog.yaml")


class Settings(BaseModel):
    """Application configuration settings."""

    # Catalog data source
    catalog_path: str = DEFAULT_CATALOG_PATH

    # Search settings
    default_limit: int = 5
    max_limit: int = 20

    # Logging
    log_level: str = "WARNING"
    verbose: bool = False

    def __init__(self, **data):
        # Fall back to the environment when no catalog path is given
        if data.get("catalog_path") is None:
            data["catalog_path"] = os.environ.get("YAGOO_CATALOG_PATH", DEFAULT_CATALOG_PATH)

        if data.get("log_level") is None:
            data["log_level"] = os.environ.get("YAGOO_LOG_LEVEL", "WARNING")

        super().__init__(**data)

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def get_log_level(self) -> str:
        """Effective log level; verbose always means DEBUG."""
        if self.verbose:
            return "DEBUG"
        return self.log_level.upper()
