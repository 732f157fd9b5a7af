"""YAML catalog loader with validation."""

import logging
from pathlib import Path
from typing import Any
import yaml
from pydantic import ValidationError
from schemas.agent import Agent
from .catalog import Catalog, CatalogLoadError

logger = logging.getLogger(__name__)


class CatalogLoader:
    """Load the agent catalog from a YAML document."""

    def load(self, catalog_path: str) -> Catalog:
        """
        Load and validate a catalog file.

        Args:
            catalog_path: Path to the catalog YAML file

        Returns:
            Immutable Catalog

        Raises:
            CatalogLoadError: If the file is missing, malformed, or violates catalog invariants
        """
        path = Path(catalog_path)
        if not path.is_file():
            raise CatalogLoadError(f"Catalog file not found: {catalog_path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CatalogLoadError(f"Could not parse catalog YAML {catalog_path}: {e}") from e

        catalog = self.parse(raw)
        logger.info(f"Loaded {len(catalog)} agents from {catalog_path}")
        return catalog

    def parse(self, raw: Any) -> Catalog:
        """
        Build a Catalog from an already-parsed document.

        Expected shape:
            categories: {category_key: display label, ...}
            agents: [ {slug: ..., name: ..., ...}, ... ]
        """
        if not isinstance(raw, dict):
            raise CatalogLoadError("Catalog document must be a mapping with 'categories' and 'agents'")

        category_labels = self._parse_categories(raw.get("categories"))
        records = raw.get("agents") or []
        if not isinstance(records, list):
            raise CatalogLoadError("'agents' must be a list of agent records")

        agents = []
        for index, record in enumerate(records):
            agents.append(self._parse_agent(index, record))

        return Catalog(agents, category_labels)

    def _parse_categories(self, value: Any) -> dict[str, str]:
        """Parse the ordered category-label mapping."""
        if not isinstance(value, dict) or not value:
            raise CatalogLoadError("'categories' must be a non-empty mapping of key to label")

        # yaml.safe_load keeps document order, which is the listing order
        return {str(key): str(label) for key, label in value.items()}

    def _parse_agent(self, index: int, record: Any) -> Agent:
        """Validate a single agent record."""
        if not isinstance(record, dict):
            raise CatalogLoadError(f"Agent record #{index} is not a mapping")

        try:
            return Agent.model_validate(record)
        except ValidationError as e:
            slug = record.get("slug", "<no slug>")
            raise CatalogLoadError(f"Invalid agent record #{index} ({slug}): {e}") from e
