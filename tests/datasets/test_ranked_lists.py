import pytest

from agreement_eval.datasets import RankedList, TiedRankedList
from agreement_eval.types import InvalidDatasetError


class TestRankedList:
    """Strict ranked lists."""

    def test_positions(self):
        ranked = RankedList.from_sequence(["dog", "bear", "cat"])
        assert ranked.index_of("dog") == 0
        assert ranked.index_of("cat") == 2
        assert ranked[1] == "bear"
        assert list(ranked) == ["dog", "bear", "cat"]
        assert len(ranked) == 3

    def test_rejects_duplicates(self):
        with pytest.raises(InvalidDatasetError):
            RankedList.from_sequence(["dog", "cat", "dog"])

    def test_missing_element(self):
        with pytest.raises(KeyError):
            RankedList.from_sequence(["dog"]).index_of("cat")

    def test_to_tied_ranked_list_uses_singletons(self):
        tied = RankedList.from_sequence(["dog", "bear", "cat"]).to_tied_ranked_list()
        assert tied.ranks == (frozenset({"dog"}), frozenset({"bear"}), frozenset({"cat"}))
        assert tied.ranks_count == tied.elements_count == 3


class TestTiedRankedList:
    """Ranked lists with ties."""

    def test_from_ranks(self):
        tied = TiedRankedList.from_ranks([["dog", "bear"], ["cat"]])
        assert tied.index_of("dog") == tied.index_of("bear") == 0
        assert tied.index_of("cat") == 1
        assert tied.ranks_count == 2
        assert tied.elements_count == 3
        assert tied.elements == frozenset({"dog", "bear", "cat"})

    def test_rejects_empty_rank(self):
        with pytest.raises(InvalidDatasetError):
            TiedRankedList.from_ranks([["dog"], []])

    def test_rejects_element_in_two_ranks(self):
        with pytest.raises(InvalidDatasetError):
            TiedRankedList.from_ranks([["dog", "cat"], ["cat"]])

    def test_rejects_duplicate_within_rank(self):
        with pytest.raises(InvalidDatasetError):
            TiedRankedList.from_ranks([["dog", "dog"]])

    def test_iteration_is_ordered_and_restartable(self):
        tied = TiedRankedList.from_ranks([["a"], ["b", "c"], ["d"]])
        first = list(tied)
        second = list(tied)
        assert first == second == [frozenset({"a"}), frozenset({"b", "c"}), frozenset({"d"})]

    def test_get_single(self):
        tied = TiedRankedList.from_ranks([["a"], ["b", "c"]])
        assert tied.get_single(0) == "a"
        assert tied.get(1) == frozenset({"b", "c"})
        with pytest.raises(ValueError):
            tied.get_single(1)
        with pytest.raises(IndexError):
            tied.get(2)

    def test_from_singleton_ranks(self):
        tied = TiedRankedList.from_singleton_ranks(["x", "y"])
        assert tied == TiedRankedList.from_ranks([["x"], ["y"]])

    def test_equality_depends_on_rank_order(self):
        assert TiedRankedList.from_ranks([["a"], ["b"]]) != TiedRankedList.from_ranks(
            [["b"], ["a"]]
        )
        assert TiedRankedList.from_ranks([["a", "b"]]) == TiedRankedList.from_ranks([["b", "a"]])
