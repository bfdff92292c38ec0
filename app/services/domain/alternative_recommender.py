"""
Domain service: Alternative crop recommendation.

When the queried species is unsuitable, every candidate crop is
evaluated against the same weather, region and month. Candidate
evaluations are gathered together, so they overlap only when an
evaluation suspends (for example a catalog backed by a remote store);
the in-memory catalog evaluates them one after another on the event loop.
All evaluations are awaited before filtering, and the suitable ones are
returned in candidate-list order. A candidate whose evaluation fails is
treated as unsuitable.
"""
import asyncio
import logging
from typing import List, Optional, Sequence

from app.domain.models import RegionKey, Verdict, WeatherSnapshot
from app.services.domain.requirement_catalog import RequirementCatalog
from app.services.domain.suitability_evaluator import SuitabilityEvaluator

logger = logging.getLogger(__name__)


DEFAULT_CANDIDATES = (
    "pearl millet",
    "finger millet",
    "sorghum",
    "paddy",
    "tomato",
    "chili",
    "okra",
    "spinach",
    "coriander",
)
DEFAULT_MAX_ALTERNATIVES = 3


class AlternativeRecommender:
    """
    Fans out suitability evaluations over a fixed candidate list.

    Candidates are never ranked; there is no degree of fit, only
    admit or reject.
    """

    def __init__(
        self,
        catalog: RequirementCatalog,
        evaluator: SuitabilityEvaluator,
        candidates: Sequence[str] = DEFAULT_CANDIDATES,
        max_alternatives: int = DEFAULT_MAX_ALTERNATIVES,
    ):
        self.catalog = catalog
        self.evaluator = evaluator
        self.candidates = tuple(candidates)
        self.max_alternatives = max_alternatives

    async def _evaluate_candidate(
        self,
        candidate: str,
        weather: Optional[WeatherSnapshot],
        region: RegionKey,
        month: int,
    ) -> Verdict:
        """Evaluate one candidate. Runs without suspending for the in-memory catalog."""
        requirements = self.catalog.requirements_for(candidate)
        return self.evaluator.evaluate(requirements, weather, region, month, species=candidate)

    async def recommend(
        self,
        weather: Optional[WeatherSnapshot],
        region: RegionKey,
        month: int,
        exclude_species: Optional[str] = None,
    ) -> List[str]:
        """
        Find candidate crops that are suitable to sow right now.

        Args:
            weather: Weather reading used for the primary evaluation
            region: Region key used for the primary evaluation
            month: Calendar month used for the primary evaluation
            exclude_species: Queried species; a candidate with the exact
                same name is skipped

        Returns:
            Up to ``max_alternatives`` candidate names, in candidate-list order
        """
        excluded = (exclude_species or "").strip().lower()
        probed = [c for c in self.candidates if c.strip().lower() != excluded]

        # Cancelling the caller cancels every pending candidate
        results = await asyncio.gather(
            *(self._evaluate_candidate(c, weather, region, month) for c in probed),
            return_exceptions=True,
        )

        alternatives = []
        for candidate, result in zip(probed, results):
            if isinstance(result, BaseException):
                logger.warning(f"Evaluation of alternative '{candidate}' failed: {result}")
                continue
            if result.suitable_now:
                alternatives.append(candidate)

        logger.info(f"Found {len(alternatives)} suitable alternative(s) out of {len(probed)} candidate(s)")
        return alternatives[:self.max_alternatives]
