"""Tripod library optimizer — iterative depth-first branch and bound.

The search walks features 1..N on an explicit stack of frames. Each frame
either places one catalog item that supplies its feature or passes its
parent's score through unchanged (feature already owned, or left uncovered).
One partial solution is alive at a time: capacities and usage flags are
mutated in place and every placement is undone exactly once.
"""
import logging
from collections.abc import Sequence
from typing import Callable, Optional

from tripodplanner.errors import ConfigurationError, StateValidationError
from tripodplanner.index import CandidateIndex
from tripodplanner.models import Item, PlannerConfig, PriorityPrune, Report, Score, SearchResult
from tripodplanner.reporter import ReporterFn
from tripodplanner.scoring import ScoreModel

logger = logging.getLogger(__name__)

_NONE = -1

# on_best(score, used_flags, step) and stop(score) hooks for _search
_BestFn = Callable[[Score, list[bool], int], None]
_StopFn = Callable[[Score], bool]


class _Frame:
    """One feature depth of the explicit search stack."""
    __slots__ = ("feature", "parent", "score", "cursor", "item", "passed")

    def __init__(self, feature: int, parent: Score):
        self.feature = feature
        self.parent = parent    # score inherited from the shallower frame
        self.score = parent
        self.cursor = _NONE     # position in this feature's candidates
        self.item = _NONE       # catalog index currently placed here
        self.passed = False     # pass-through branch already taken


class TripodOptimizer:
    """Picks the items that maximize (priority coverage, coverage, -cost)."""

    def __init__(self, items: Sequence[Item], capacities: Sequence[int],
                 priority_count: int,
                 priority_prune: PriorityPrune | str = PriorityPrune.ON,
                 max_steps: Optional[int] = None):
        self.items = list(items)
        self.capacities = list(capacities)
        self._validate(priority_count)
        self.scorer = ScoreModel(priority_count)
        self.index = CandidateIndex.build(self.items)
        self.priority_prune = PriorityPrune(priority_prune)
        self.max_steps = max_steps
        self._masks = [item.feature_mask for item in self.items]

    @classmethod
    def from_config(cls, config: PlannerConfig) -> "TripodOptimizer":
        return cls(config.items, config.capacities, config.priority_count,
                   config.priority_prune, config.max_steps)

    def _validate(self, priority_count: int) -> None:
        if priority_count < 0:
            raise ConfigurationError(f"priority_count must be >= 0, got {priority_count}")
        for row, cap in enumerate(self.capacities):
            if cap < 0:
                raise ConfigurationError(f"Category {row} has negative capacity {cap}")
        for idx, item in enumerate(self.items):
            if not 0 <= item.category < len(self.capacities):
                raise ConfigurationError(
                    f"Item #{idx} has category {item.category}, "
                    f"expected [0, {len(self.capacities)})")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, reporter: Optional[ReporterFn] = None) -> SearchResult:
        """Search to exhaustion, calling reporter on every strict improvement."""
        prune = self.resolve_priority_prune()
        reports = 0
        last: Optional[Report] = None

        def on_best(score: Score, used: list[bool], step: int) -> None:
            nonlocal reports, last
            reports += 1
            last = Report(
                sequence=reports,
                step=step,
                priority_count=self.scorer.priority_features(score),
                feature_count=self.scorer.feature_count(score),
                cost=score.cost,
                features=score.features,
                used_items=[i for i, u in enumerate(used) if u],
            )
            if reporter is not None:
                reporter(last)

        _, steps, completed = self._search(self.index.feature_count, prune, on_best)
        logger.info("Search %s after %d steps with %d improvements",
                    "finished" if completed else "stopped", steps, reports)
        return SearchResult(best=last, reports=reports, steps=steps,
                            completed=completed, priority_prune=prune)

    def resolve_priority_prune(self) -> bool:
        if self.priority_prune is PriorityPrune.ON:
            return True
        if self.priority_prune is PriorityPrune.OFF:
            return False
        feasible = self.has_priority_complete_solution()
        logger.info("Priority prune %s: %s",
                    "enabled" if feasible else "disabled",
                    "all priority features reachable" if feasible
                    else "no solution covers every priority feature")
        return feasible

    def has_priority_complete_solution(self) -> bool:
        """Whether some placement covers all P priority features at once.

        Searches features 1..P only and stops at the first complete cover.
        A run cut short by max_steps counts as infeasible.
        """
        p = self.scorer.priority_count
        if p == 0:
            return True
        if p > self.index.feature_count:
            return False  # some priority feature has no supplier
        complete = self.scorer.priority_complete
        best, _, _ = self._search(p, False, stop=lambda s: complete(s.features))
        return complete(best.features)

    # ------------------------------------------------------------------
    # Search loop
    # ------------------------------------------------------------------

    def _search(self, last_feature: int, prune: bool,
                on_best: Optional[_BestFn] = None,
                stop: Optional[_StopFn] = None) -> tuple[Score, int, bool]:
        """Branch and bound over features 1..last_feature.

        Returns (best score, steps taken, ran to exhaustion). The shared
        state is fully restored on return.
        """
        items, masks, index = self.items, self._masks, self.index
        scorer = self.scorer
        p = scorer.priority_count
        book = list(self.capacities)
        used = [False] * len(items)
        best = Score()
        steps = 0
        stack: list[_Frame] = [_Frame(1, Score())] if last_feature else []

        while stack:
            if self.max_steps is not None and steps >= self.max_steps:
                logger.warning("Step budget of %d exhausted at feature %d",
                               self.max_steps, stack[-1].feature)
                self._unwind(stack, book, used)
                return best, steps, False
            steps += 1

            frame = stack[-1]
            f = frame.feature

            if frame.item != _NONE:
                used[frame.item] = False
                book[items[frame.item].category] += 1
                frame.item = _NONE
            if frame.passed:
                stack.pop()
                continue
            parent = frame.parent
            if (prune and f > p and frame.cursor == _NONE
                    and not scorer.priority_complete(parent.features)):
                # Only sound if some solution holds every priority feature.
                stack.pop()
                continue

            if not parent.has(f):
                candidates = index.candidates(f)
                cursor = frame.cursor + 1
                while cursor < len(candidates) and (
                        used[candidates[cursor]]
                        or not book[items[candidates[cursor]].category]):
                    cursor += 1
                frame.cursor = cursor
                if cursor < len(candidates):
                    idx = candidates[cursor]
                    item = items[idx]
                    used[idx] = True
                    book[item.category] -= 1
                    assert book[item.category] >= 0, "capacity underflow"
                    frame.item = idx
                    frame.score = parent.add(masks[idx], item.cost)

            if frame.item == _NONE:
                frame.passed = True
                frame.score = parent

            if f < last_feature:
                stack.append(_Frame(f + 1, frame.score))
                continue

            if scorer.better_than(frame.score, best):
                best = frame.score
                if on_best is not None:
                    on_best(best, used, steps)
                if stop is not None and stop(best):
                    self._unwind(stack, book, used)
                    return best, steps, False

        self._check_restored(book, used)
        return best, steps, True

    def _unwind(self, stack: list[_Frame], book: list[int], used: list[bool]) -> None:
        while stack:
            frame = stack.pop()
            if frame.item != _NONE:
                used[frame.item] = False
                book[self.items[frame.item].category] += 1
        self._check_restored(book, used)

    def _check_restored(self, book: list[int], used: list[bool]) -> None:
        if book != self.capacities or any(used):
            raise StateValidationError(
                f"Search state not restored: capacities {book}, "
                f"{sum(used)} items still in use")
