"""Tests for CandidateIndex (index.py)."""
from tripodplanner import CandidateIndex, Item


def _item(*features: int, category: int = 0) -> Item:
    return Item(category=category, cost=0, features=features)


class TestBuild:
    def test_groups_items_by_feature_in_catalog_order(self) -> None:
        index = CandidateIndex.build([_item(2), _item(1, 2), _item(2, 3)])
        assert index.candidates(1) == (1,)
        assert index.candidates(2) == (0, 1, 2)
        assert index.candidates(3) == (2,)

    def test_feature_count_is_highest_supplied_id(self) -> None:
        index = CandidateIndex.build([_item(1), _item(5)])
        assert index.feature_count == 5
        assert index.candidates(5) == (1,)

    def test_unsupplied_gap_is_empty(self) -> None:
        index = CandidateIndex.build([_item(1), _item(4)])
        assert index.candidates(2) == ()
        assert index.candidates(3) == ()

    def test_empty_sentinel_never_indexed(self) -> None:
        index = CandidateIndex.build([_item(0, 2, 0), _item(0)])
        assert index.candidates(0) == ()
        assert index.candidates(2) == (0,)
        assert index.feature_count == 2

    def test_repeated_feature_listed_once(self) -> None:
        index = CandidateIndex.build([_item(3, 3)])
        assert index.candidates(3) == (0,)

    def test_out_of_range_feature_is_empty(self) -> None:
        index = CandidateIndex.build([_item(1)])
        assert index.candidates(2) == ()
        assert index.candidates(-1) == ()

    def test_empty_catalog(self) -> None:
        index = CandidateIndex.build([])
        assert index.feature_count == 0
        assert index.candidates(1) == ()

    def test_does_not_touch_items(self) -> None:
        items = [_item(2, 1), _item(1)]
        before = [i.model_dump() for i in items]
        CandidateIndex.build(items)
        assert [i.model_dump() for i in items] == before


class TestSorceressCatalog:
    def test_every_supplier_indexed(self, sorceress) -> None:
        index = CandidateIndex.build(sorceress.items)
        assert index.feature_count == 53
        for idx, item in enumerate(sorceress.items):
            for f in item.feature_ids:
                assert idx in index.candidates(f)
