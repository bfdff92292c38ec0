"""
Domain service: Requirement catalog lookup with heuristic fallback.

The catalog is loaded once from a static JSON document and is read-only
afterwards. Matching is a first-match-wins substring search over the
catalog in file order, so earlier entries take priority.
"""
import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from pydantic import ValidationError

from app.domain.models import PlantRequirement

logger = logging.getLogger(__name__)


# Coarse keyword groups used when no catalog entry matches
WETLAND_CEREAL_KEYWORDS = ("oryza", "rice", "paddy")
DRYLAND_CEREAL_KEYWORDS = ("millet", "sorghum", "bajra", "ragi")

WETLAND_CEREAL_RULES = PlantRequirement(
    id="wetland_cereal",
    temp_min_c=20,
    temp_max_c=35,
    humidity_min=50,
    humidity_max=90,
    soil="Clay loam, good water retention",
    sunlight="Full sun",
)
DRYLAND_CEREAL_RULES = PlantRequirement(
    id="dryland_cereal",
    temp_min_c=22,
    temp_max_c=38,
    humidity_min=30,
    humidity_max=70,
    soil="Well-drained loam/sandy loam",
    sunlight="Full sun",
)
GENERIC_VEGETABLE_RULES = PlantRequirement(
    id="generic_vegetable",
    temp_min_c=18,
    temp_max_c=32,
    humidity_min=30,
    humidity_max=80,
    soil="Well-drained",
    sunlight="Full sun to partial shade",
)


def basic_rules_for(species: Optional[str]) -> PlantRequirement:
    """
    Coarse requirement profile derived from keywords in the species name.

    Never returns None: anything not recognised gets the generic
    vegetable profile.
    """
    name = (species or "").lower()
    if any(keyword in name for keyword in WETLAND_CEREAL_KEYWORDS):
        return WETLAND_CEREAL_RULES
    if any(keyword in name for keyword in DRYLAND_CEREAL_KEYWORDS):
        return DRYLAND_CEREAL_RULES
    return GENERIC_VEGETABLE_RULES


def _normalize(value: Optional[str]) -> str:
    return (value or "").replace("_", " ").strip().lower()


class RequirementCatalog:
    """
    Read-only collection of plant requirements.

    Build it with :meth:`from_file` at process start and pass it to the
    services that need it.
    """

    def __init__(self, entries: Iterable[PlantRequirement] = ()):
        self._entries = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple:
        return self._entries

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> "RequirementCatalog":
        """
        Build a catalog from raw records, skipping malformed ones.

        Args:
            records: Iterable of dictionaries in the catalog file schema

        Returns:
            RequirementCatalog with every valid record, in order
        """
        entries: List[PlantRequirement] = []
        for position, record in enumerate(records):
            try:
                entries.append(PlantRequirement.model_validate(record))
            except ValidationError as e:
                logger.warning(
                    f"Skipping malformed catalog entry at position {position}: "
                    f"{e.error_count()} validation error(s)"
                )
        return cls(entries)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "RequirementCatalog":
        """
        Load the catalog from a JSON document of the form ``{"plants": [...]}``.

        A missing or corrupt file yields an empty catalog so every lookup
        falls through to the heuristic rules.
        """
        try:
            with open(path, "r", encoding="utf-8") as fh:
                document = json.load(fh)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Plant catalog unavailable at {path}: {e}. Using heuristic rules only")
            return cls()

        plants = document.get("plants") if isinstance(document, dict) else None
        if not isinstance(plants, list):
            logger.warning(f"Plant catalog at {path} has no 'plants' list. Using heuristic rules only")
            return cls()

        catalog = cls.from_records(plants)
        logger.info(f"Loaded {len(catalog)} plant requirement(s) from {path}")
        return catalog

    def lookup(self, species: Optional[str]) -> Optional[PlantRequirement]:
        """
        Find the first entry matching a species or common name.

        An entry matches when its scientific or common name contains the
        query, or when the query contains the entry id (underscores read
        as spaces). Comparison is case-insensitive.

        Args:
            species: Scientific or common name to look up

        Returns:
            The first matching PlantRequirement, or None
        """
        query = (species or "").strip().lower()
        if not query:
            return None

        spaced_query = _normalize(query)
        for entry in self._entries:
            if entry.scientific_name and query in entry.scientific_name.lower():
                return entry
            if entry.common_name and query in entry.common_name.lower():
                return entry
            entry_id = _normalize(entry.id)
            if entry_id and entry_id in spaced_query:
                return entry
        return None

    def requirements_for(self, species: Optional[str]) -> PlantRequirement:
        """Catalog entry for the species, or the heuristic profile on a miss."""
        match = self.lookup(species)
        if match is not None:
            return match
        logger.debug(f"No catalog entry for '{species}', using heuristic rules")
        return basic_rules_for(species)


# Singleton instance
_catalog: Optional[RequirementCatalog] = None


def get_requirement_catalog() -> RequirementCatalog:
    """
    Get or load the process-wide requirement catalog.

    Returns:
        RequirementCatalog instance
    """
    global _catalog
    if _catalog is None:
        from app.config import settings
        _catalog = RequirementCatalog.from_file(settings.plant_catalog_path)
    return _catalog
