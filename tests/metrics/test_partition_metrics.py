import math

import numpy as np
import pytest

from agreement_eval.datasets import Partition, Result, TiedRankedList
from agreement_eval.metrics import (
    PairContingency,
    cosine,
    cosine_partitions,
    jaccard,
    jaccard_index,
    mi,
    normalized_mutual_information,
    overlap,
    overlap_coefficient,
    pair_contingency,
    pearson_partitions,
    simple_matching,
    smc,
    sorensen,
    sorensen_dice,
)
from agreement_eval.types import ElementSetMismatchError, ShapeMismatchError

TYPED_METRICS = [
    jaccard_index,
    simple_matching,
    sorensen_dice,
    overlap_coefficient,
    cosine_partitions,
    pearson_partitions,
    normalized_mutual_information,
]


@pytest.fixture
def grouped() -> Partition:
    return Partition.from_groups([["dog", "bear"], ["cat"]])


@pytest.fixture
def split() -> Partition:
    return Partition.from_groups([["dog"], ["bear"], ["cat"]])


@pytest.fixture
def coarse() -> Partition:
    return Partition.from_groups([["a", "b", "c"], ["d"]])


@pytest.fixture
def paired() -> Partition:
    return Partition.from_groups([["a", "b"], ["c", "d"]])


class TestPairContingency:
    def test_counts(self, coarse, paired):
        # ab both, ac bc a-only, cd b-only, ad bd neither
        table = pair_contingency("test", coarse, paired)
        assert table == PairContingency(both=1, a_only=2, b_only=1, neither=2)
        assert table.total == 6
        assert table.degree_a == 3
        assert table.degree_b == 2

    def test_swapping_operands_transposes(self, coarse, paired):
        assert pair_contingency("test", paired, coarse) == pair_contingency(
            "test", coarse, paired
        ).transposed()

    def test_single_element(self):
        p = Partition.from_groups([["only"]])
        assert pair_contingency("test", p, p).total == 0


class TestSetSimilarity:
    def test_grouping_against_singletons(self, grouped, split):
        assert jaccard_index(grouped, split) == 0.0
        assert simple_matching(grouped, split) == pytest.approx(2 / 3)
        assert simple_matching(grouped, split) < 1.0
        assert sorensen_dice(grouped, split) == 0.0
        assert math.isnan(overlap_coefficient(grouped, split))

    def test_known_values(self, coarse, paired):
        assert jaccard_index(coarse, paired) == pytest.approx(0.25)
        assert simple_matching(coarse, paired) == pytest.approx(0.5)
        assert sorensen_dice(coarse, paired) == pytest.approx(0.4)
        assert overlap_coefficient(coarse, paired) == pytest.approx(0.5)

    def test_self_comparison(self, paired):
        assert jaccard_index(paired, paired) == 1.0
        assert simple_matching(paired, paired) == 1.0
        assert sorensen_dice(paired, paired) == 1.0
        assert overlap_coefficient(paired, paired) == 1.0

    def test_all_singletons_have_no_connected_pairs(self, split):
        assert math.isnan(jaccard_index(split, split))
        assert math.isnan(sorensen_dice(split, split))
        assert simple_matching(split, split) == 1.0

    def test_sorensen_is_derived_from_jaccard(self, coarse, paired):
        j = jaccard_index(coarse, paired)
        assert sorensen_dice(coarse, paired) == pytest.approx(2 * j / (1 + j))


class TestCorrelationOfPairs:
    def test_cosine_known_value(self, coarse, paired):
        assert cosine_partitions(coarse, paired) == pytest.approx(1 / math.sqrt(6))

    def test_cosine_without_connected_pairs(self, grouped, split):
        assert math.isnan(cosine_partitions(grouped, split))

    def test_pearson_matches_indicator_correlation(self, coarse, paired):
        # Indicators over the pairs ab, ac, ad, bc, bd, cd
        in_coarse = [1, 1, 0, 1, 0, 0]
        in_paired = [1, 0, 0, 0, 0, 1]
        expected = np.corrcoef(in_coarse, in_paired)[0, 1]
        assert pearson_partitions(coarse, paired) == pytest.approx(expected, abs=1e-12)

    def test_pearson_self_comparison(self, paired):
        assert pearson_partitions(paired, paired) == pytest.approx(1.0)

    def test_pearson_constant_indicator_is_nan(self, grouped, split):
        assert math.isnan(pearson_partitions(grouped, split))


class TestMutualInformation:
    def test_self_comparison(self, paired):
        assert normalized_mutual_information(paired, paired) == pytest.approx(1.0)

    def test_independent_connectivity(self, grouped, split):
        assert normalized_mutual_information(grouped, split) == 0.0

    def test_matches_entropy_identity(self, coarse, paired):
        stats = pytest.importorskip("scipy.stats")
        h_a = stats.entropy([3, 3], base=2)
        h_b = stats.entropy([2, 4], base=2)
        h_joint = stats.entropy([1, 2, 1, 2], base=2)
        expected = 2 * (h_a + h_b - h_joint) / (h_a + h_b)
        assert normalized_mutual_information(coarse, paired) == pytest.approx(expected)


@pytest.mark.parametrize("metric", TYPED_METRICS)
def test_typed_metrics_reject_different_elements(metric, grouped):
    other = Partition.from_groups([["dog", "bear"], ["emu"]])
    with pytest.raises(ElementSetMismatchError):
        metric(grouped, other)


@pytest.mark.parametrize("metric", TYPED_METRICS)
def test_typed_metrics_reject_other_shapes(metric, grouped):
    ranked = TiedRankedList.from_singleton_ranks(["dog", "bear", "cat"])
    with pytest.raises(ShapeMismatchError):
        metric(grouped, ranked)


@pytest.mark.parametrize("wrapper", [jaccard, smc, sorensen, overlap, mi, cosine])
def test_wrappers_need_two_partitions(wrapper, animal_partition, animal_values, animal_ranks):
    assert wrapper(animal_partition, animal_values) is None
    assert wrapper(animal_ranks, animal_partition) is None
    assert wrapper(animal_partition, animal_partition) is not None


def test_wrapper_scenario(grouped, split):
    truth = Result(grouped)
    candidate = Result(split)
    assert jaccard(truth, candidate) == 0.0
    assert smc(truth, candidate) < 1.0
    assert math.isnan(overlap(truth, candidate))
