"""Candidate index: which catalog items can supply each feature."""
import logging
from collections.abc import Sequence

from tripodplanner.models import Item

logger = logging.getLogger(__name__)


class CandidateIndex:
    """Immutable mapping feature id -> catalog indices, in catalog order.

    Holds indices, never items: the catalog stays the single owner. The
    search walks features 1..feature_count, so an id with no supplier below
    the highest supplied one maps to an empty tuple.
    """

    def __init__(self, candidates: Sequence[Sequence[int]]):
        self._candidates: tuple[tuple[int, ...], ...] = tuple(tuple(c) for c in candidates)

    @classmethod
    def build(cls, items: Sequence[Item]) -> "CandidateIndex":
        buckets: list[list[int]] = []
        for idx, item in enumerate(items):
            for feature in item.feature_ids:
                if len(buckets) < feature:
                    buckets.extend([] for _ in range(feature - len(buckets)))
                buckets[feature - 1].append(idx)
        index = cls(buckets)
        logger.debug("Indexed %d items over %d features", len(items), index.feature_count)
        return index

    @property
    def feature_count(self) -> int:
        return len(self._candidates)

    def candidates(self, feature_id: int) -> tuple[int, ...]:
        if not 1 <= feature_id <= len(self._candidates):
            return ()
        return self._candidates[feature_id - 1]
