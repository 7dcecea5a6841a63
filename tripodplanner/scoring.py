"""Lexicographic score model: priority coverage, total coverage, then cost."""
from tripodplanner.models import Score


class ScoreModel:
    """Ranks scores for a fixed priority count P (features 1..P are priority)."""

    def __init__(self, priority_count: int):
        if priority_count < 0:
            raise ValueError(f"priority_count must be >= 0, got {priority_count}")
        self.priority_count = priority_count
        self.priority_mask = (1 << priority_count) - 1

    def priority_features(self, score: Score) -> int:
        return (score.features & self.priority_mask).bit_count()

    @staticmethod
    def feature_count(score: Score) -> int:
        return score.features.bit_count()

    def priority_complete(self, features: int) -> bool:
        """True when every priority bit is set (vacuously true for P = 0)."""
        return features & self.priority_mask == self.priority_mask

    def key(self, score: Score) -> tuple[int, int, int]:
        """Sort key; larger is better."""
        return self.priority_features(score), self.feature_count(score), -score.cost

    def better_than(self, score: Score, other: Score) -> bool:
        """Strict improvement: score precedes other in the ranking."""
        return self.key(score) > self.key(other)
