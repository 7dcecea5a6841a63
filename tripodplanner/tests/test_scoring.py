"""Tests for ScoreModel (scoring.py) and the Score value."""
import pytest

from tripodplanner import Score, ScoreModel


def _bits(*features: int) -> int:
    mask = 0
    for f in features:
        mask |= 1 << (f - 1)
    return mask


class TestScoreModel:
    def test_priority_coverage_dominates(self) -> None:
        model = ScoreModel(priority_count=2)
        # one priority feature beats three low-priority ones
        assert model.better_than(Score(_bits(1)), Score(_bits(3, 4, 5)))

    def test_total_coverage_breaks_priority_tie(self) -> None:
        model = ScoreModel(priority_count=2)
        assert model.better_than(Score(_bits(1, 3), cost=10), Score(_bits(2), cost=0))

    def test_lower_cost_breaks_coverage_tie(self) -> None:
        model = ScoreModel(priority_count=2)
        assert model.better_than(Score(_bits(1, 3), cost=1), Score(_bits(2, 4), cost=2))
        assert not model.better_than(Score(_bits(1, 3), cost=2), Score(_bits(2, 4), cost=1))

    def test_equal_scores_are_not_strictly_better(self) -> None:
        model = ScoreModel(priority_count=1)
        a = Score(_bits(1, 2), cost=3)
        b = Score(_bits(1, 3), cost=3)
        assert not model.better_than(a, b)
        assert not model.better_than(b, a)

    def test_anything_beats_empty_except_free_nothing(self) -> None:
        model = ScoreModel(priority_count=1)
        assert model.better_than(Score(_bits(4), cost=99), Score())
        assert not model.better_than(Score(), Score())

    def test_zero_priority_is_coverage_then_cost(self) -> None:
        model = ScoreModel(priority_count=0)
        assert model.priority_mask == 0
        ranked = sorted(
            [Score(_bits(1), 0), Score(_bits(1, 2, 3), 9), Score(_bits(2, 3), 1), Score(_bits(4, 5), 0)],
            key=model.key, reverse=True,
        )
        assert [(s.features.bit_count(), s.cost) for s in ranked] == [(3, 9), (2, 0), (2, 1), (1, 0)]

    def test_priority_complete(self) -> None:
        model = ScoreModel(priority_count=3)
        assert model.priority_mask == 0b111
        assert model.priority_complete(_bits(1, 2, 3, 7))
        assert not model.priority_complete(_bits(1, 3, 7))
        assert ScoreModel(priority_count=0).priority_complete(0)

    def test_counts(self) -> None:
        model = ScoreModel(priority_count=2)
        s = Score(_bits(1, 3, 60), cost=5)
        assert model.priority_features(s) == 1
        assert model.feature_count(s) == 3
        assert model.key(s) == (1, 3, -5)

    def test_negative_priority_count_rejected(self) -> None:
        with pytest.raises(ValueError):
            ScoreModel(priority_count=-1)


class TestScore:
    def test_add_ors_features_and_sums_cost(self) -> None:
        s = Score(_bits(1), cost=2).add(_bits(1, 4), 3)
        assert s == Score(_bits(1, 4), cost=5)

    def test_add_returns_new_score(self) -> None:
        base = Score(_bits(2), cost=1)
        base.add(_bits(3), 1)
        assert base == Score(_bits(2), cost=1)

    def test_has(self) -> None:
        s = Score(_bits(2, 70))
        assert s.has(2)
        assert s.has(70)
        assert not s.has(1)
