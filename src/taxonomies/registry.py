"""Taxonomy registry — loads and serves single-term taxonomy definitions from JSON files.

Follows the same pattern as the other definition registries:
- JSON-per-file in definitions/ directory
- Lazy loading with _loaded guard
- In-memory dict keyed by taxonomy_key
- Global singleton via get_taxonomy_registry()
- CRUD with file persistence
- renderer_for() to build a checklist renderer for a taxonomy
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from .renderer import TermChecklistRenderer
from .schemas import TaxonomyDefinition, TaxonomySummary

logger = logging.getLogger(__name__)

DEFINITIONS_DIR_ENV = "TAXONOMY_DEFINITIONS_DIR"


class TaxonomyRegistry:
    """Registry of taxonomy definitions loaded from JSON files."""

    def __init__(self, definitions_dir: Optional[Path] = None):
        if definitions_dir is None:
            env_dir = os.environ.get(DEFINITIONS_DIR_ENV)
            definitions_dir = (
                Path(env_dir) if env_dir else Path(__file__).parent / "definitions"
            )
        self.definitions_dir = Path(definitions_dir)
        self._taxonomies: dict[str, TaxonomyDefinition] = {}
        self._file_map: dict[str, Path] = {}
        self._loaded = False

    def load(self) -> None:
        """Load all taxonomy definitions from JSON files."""
        if self._loaded:
            return

        if not self.definitions_dir.exists():
            logger.warning(
                f"Taxonomy definitions directory not found: {self.definitions_dir}"
            )
            self._loaded = True
            return

        for json_file in sorted(self.definitions_dir.glob("*.json")):
            try:
                with open(json_file, "r") as f:
                    data = json.load(f)
                taxonomy = TaxonomyDefinition.model_validate(data)
                self._taxonomies[taxonomy.taxonomy_key] = taxonomy
                self._file_map[taxonomy.taxonomy_key] = json_file
                logger.debug(f"Loaded taxonomy: {taxonomy.taxonomy_key}")
            except Exception as e:
                logger.error(f"Failed to load taxonomy from {json_file}: {e}")

        self._loaded = True
        logger.info(f"Loaded {len(self._taxonomies)} taxonomy definitions")

    def get(self, taxonomy_key: str) -> Optional[TaxonomyDefinition]:
        """Get a taxonomy definition by key."""
        self.load()
        return self._taxonomies.get(taxonomy_key)

    def list_all(self) -> list[TaxonomyDefinition]:
        """List all taxonomy definitions."""
        self.load()
        return list(self._taxonomies.values())

    def list_summaries(self) -> list[TaxonomySummary]:
        """List taxonomy summaries, sorted by key."""
        self.load()
        return [
            self.build_summary(t)
            for t in sorted(self._taxonomies.values(), key=lambda t: t.taxonomy_key)
        ]

    @staticmethod
    def build_summary(t: TaxonomyDefinition) -> TaxonomySummary:
        """Build the listing summary for a taxonomy definition."""
        return TaxonomySummary(
            taxonomy_key=t.taxonomy_key,
            label=t.label,
            description=t.description,
            hierarchical=t.hierarchical,
            input_element=t.input_element,
            object_types=t.object_types,
            status=t.status,
        )

    def list_keys(self) -> list[str]:
        """List all taxonomy keys."""
        self.load()
        return list(self._taxonomies.keys())

    def count(self) -> int:
        """Get total number of taxonomies."""
        self.load()
        return len(self._taxonomies)

    def for_object_type(self, object_type: str) -> list[TaxonomyDefinition]:
        """Get active taxonomies attached to a content type."""
        self.load()
        return [
            t
            for t in sorted(self._taxonomies.values(), key=lambda t: t.taxonomy_key)
            if object_type in t.object_types and t.status == "active"
        ]

    def renderer_for(self, taxonomy_key: str) -> TermChecklistRenderer:
        """Build a fresh checklist renderer configured for a taxonomy.

        Raises:
            KeyError: If the taxonomy is not registered.
        """
        taxonomy = self.get(taxonomy_key)
        if taxonomy is None:
            raise KeyError(f"Taxonomy not found: {taxonomy_key}")
        return TermChecklistRenderer(
            hierarchical=taxonomy.hierarchical,
            input_element=taxonomy.input_element,
        )

    def save(self, taxonomy_key: str, taxonomy: TaxonomyDefinition) -> bool:
        """Save a taxonomy definition to JSON file."""
        self.load()

        json_file = self._file_map.get(
            taxonomy_key, self.definitions_dir / f"{taxonomy_key}.json"
        )

        try:
            self.definitions_dir.mkdir(parents=True, exist_ok=True)

            with open(json_file, "w") as f:
                json.dump(taxonomy.model_dump(mode="json"), f, indent=2)
                f.write("\n")

            self._taxonomies[taxonomy_key] = taxonomy
            self._file_map[taxonomy_key] = json_file

            logger.info(f"Saved taxonomy: {taxonomy_key} -> {json_file}")
            return True

        except Exception as e:
            logger.error(f"Failed to save taxonomy {taxonomy_key}: {e}")
            return False

    def delete(self, taxonomy_key: str) -> bool:
        """Delete a taxonomy definition."""
        self.load()

        if taxonomy_key not in self._taxonomies:
            return False

        json_file = self._file_map.get(
            taxonomy_key, self.definitions_dir / f"{taxonomy_key}.json"
        )

        try:
            if json_file.exists():
                json_file.unlink()

            del self._taxonomies[taxonomy_key]
            self._file_map.pop(taxonomy_key, None)

            logger.info(f"Deleted taxonomy: {taxonomy_key}")
            return True

        except Exception as e:
            logger.error(f"Failed to delete taxonomy {taxonomy_key}: {e}")
            return False

    def reload(self) -> None:
        """Force reload all definitions."""
        self._loaded = False
        self._taxonomies.clear()
        self._file_map.clear()
        self.load()


# Global registry instance
_registry: Optional[TaxonomyRegistry] = None


def get_taxonomy_registry() -> TaxonomyRegistry:
    """Get the global taxonomy registry instance."""
    global _registry
    if _registry is None:
        _registry = TaxonomyRegistry()
        _registry.load()
    return _registry
