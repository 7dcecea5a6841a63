"""Pydantic models for catalog items, planner config, and search results.

These are the serializable schemas — keep field names stable. Score is the
only hot-loop value and is a plain class.
"""
from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

from tripodplanner.constants import BITSET_WIDTH, EMPTY_FEATURE, MAX_ITEM_FEATURES


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class Item(BaseModel):
    """A candidate item: lives in one category, costs gold, supplies tripods."""
    model_config = ConfigDict(frozen=True)

    category: int = Field(ge=0)
    cost: int = Field(default=0, ge=0)
    features: tuple[int, ...] = Field(default=(), max_length=MAX_ITEM_FEATURES)
    label: str = ""

    @field_validator("features")
    @classmethod
    def _no_negative_features(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        if any(f < 0 for f in v):
            raise ValueError(f"feature ids must be >= 0, got {list(v)}")
        return v

    @computed_field
    @property
    def feature_ids(self) -> tuple[int, ...]:
        """Real features in listing order, sentinel and repeats removed."""
        seen: list[int] = []
        for f in self.features:
            if f != EMPTY_FEATURE and f not in seen:
                seen.append(f)
        return tuple(seen)

    @property
    def feature_mask(self) -> int:
        mask = 0
        for f in self.feature_ids:
            mask |= 1 << (f - 1)
        return mask


class PriorityPrune(str, Enum):
    """How the priority-completion prune is applied.

    ``on`` is fast but only sound when some solution covers every priority
    feature; ``off`` guarantees the optimum; ``auto`` checks feasibility first.
    """
    ON = "on"
    OFF = "off"
    AUTO = "auto"


class PlannerConfig(BaseModel):
    """Everything one optimizer run consumes. Loaded from JSON by catalog.py."""
    capacities: list[Annotated[int, Field(ge=0)]]
    categories: Optional[list[str]] = None
    priority_count: int = Field(default=0, ge=0)
    priority_prune: PriorityPrune = PriorityPrune.ON
    max_steps: Optional[int] = Field(default=None, ge=1)
    features: dict[int, str] = Field(default_factory=dict)
    items: list[Item] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_categories(self) -> "PlannerConfig":
        if self.categories is not None and len(self.categories) != len(self.capacities):
            raise ValueError(
                f"{len(self.categories)} category names for "
                f"{len(self.capacities)} capacities")
        for idx, item in enumerate(self.items):
            if item.category >= len(self.capacities):
                raise ValueError(
                    f"item #{idx} has category {item.category}, "
                    f"only {len(self.capacities)} categories declared")
        return self

    def feature_name(self, feature_id: int) -> str:
        return self.features.get(feature_id, f"Feature {feature_id}")

    def category_name(self, category: int) -> str:
        if self.categories:
            return self.categories[category]
        return f"Category {category}"


# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------

class Score:
    """Acquired-feature bitset (bit f-1 for feature f) and total cost (internal)."""
    __slots__ = ("features", "cost")

    def __init__(self, features: int = 0, cost: int = 0):
        self.features = features
        self.cost = cost

    def add(self, feature_mask: int, cost: int) -> "Score":
        return Score(self.features | feature_mask, self.cost + cost)

    def has(self, feature_id: int) -> bool:
        return bool(self.features >> (feature_id - 1) & 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return self.features == other.features and self.cost == other.cost

    def __repr__(self) -> str:
        return f"Score(features={self.features:#b}, cost={self.cost})"


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class Report(BaseModel):
    """One strict improvement of the best-known solution."""
    sequence: int           # 1-based position in the report stream
    step: int               # engine step at which it was found
    priority_count: int
    feature_count: int
    cost: int
    features: int           # bitset, bit f-1 for feature f
    used_items: list[int]   # catalog indices, ascending

    @computed_field
    @property
    def feature_ids(self) -> list[int]:
        return [i + 1 for i in range(self.features.bit_length()) if self.features >> i & 1]

    def bitset(self, width: int = BITSET_WIDTH) -> str:
        return format(self.features, f"0{max(width, self.features.bit_length())}b")


class SearchResult(BaseModel):
    """Outcome of one optimizer run. best is the last report, if any."""
    best: Optional[Report] = None
    reports: int = 0
    steps: int = 0
    completed: bool = True
    priority_prune: bool = False
