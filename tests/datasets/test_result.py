import pytest

from agreement_eval.datasets import Result, Shape, TiedRankedList
from agreement_eval.types import NotConvertibleError, ShapeMismatchError


def test_shape_predicates(animal_ranks, animal_values, animal_tied, animal_partition):
    assert animal_ranks.is_ranked_list and animal_ranks.shape is Shape.RANKS
    assert animal_values.is_value_list and animal_values.shape is Shape.VALUES
    assert animal_tied.is_tied_ranked_list and animal_tied.shape is Shape.TIE_RANKS
    assert animal_partition.is_partition and animal_partition.shape is Shape.PARTITION
    assert not animal_partition.is_value_list


def test_rankable_results_upgrade(animal_ranks, animal_values, animal_tied):
    for result in (animal_ranks, animal_values, animal_tied):
        assert result.is_rankable
        tied = result.to_tied_ranked_list()
        assert isinstance(tied, TiedRankedList)
        assert tied.elements == frozenset({"dog", "bear", "cat"})


def test_tied_upgrade_returns_same_list(animal_tied):
    assert animal_tied.to_tied_ranked_list() is animal_tied.tied_ranked_list


def test_partition_is_not_convertible(animal_partition):
    assert not animal_partition.is_rankable
    with pytest.raises(NotConvertibleError):
        animal_partition.to_tied_ranked_list()


def test_typed_accessor_mismatch(animal_values):
    assert animal_values.value_list.get("cat") == 1.0
    with pytest.raises(ShapeMismatchError):
        animal_values.partition


def test_rejects_non_datasets():
    with pytest.raises(TypeError):
        Result({"dog": 1.0})


def test_markers():
    assert Shape.from_marker("tie-ranks") is Shape.TIE_RANKS
    with pytest.raises(ValueError):
        Shape.from_marker("single-ranks")


def test_results_are_hashable(animal_ranks, animal_values, animal_tied, animal_partition):
    results = [animal_ranks, animal_values, animal_tied, animal_partition]
    assert len(set(results)) == 4
    assert animal_values in set(results)
