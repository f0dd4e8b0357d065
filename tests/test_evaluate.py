import math

import pytest

from counting_ratio.bayesian_counter import BayesianCounter
from counting_ratio.evaluate.evaluate import (
    compute_dcg,
    compute_ndcg,
    evaluate_ranking,
    ranking_ndcg,
)
from counting_ratio.exact_ratio import ExactRatio


@pytest.fixture
def bayesian() -> BayesianCounter:
    counter = BayesianCounter()
    counter.observe_sequence((num, "One") for num in [1, 3, 3, 5, 6, 7, 9, 11, 12, 13])
    counter.observe_sequence((num, "Two") for num in [0, 2, 3, 6, 8, 9])
    return counter


def test_compute_dcg() -> None:
    assert compute_dcg([]) == 0.0
    assert compute_dcg([1.0, 0.0]) == pytest.approx(1.0 / math.log(2))
    assert compute_dcg([0.0, 1.0]) == pytest.approx(1.0 / math.log(3))


def test_compute_ndcg() -> None:
    assert compute_ndcg([1.0, 0.0, 0.0]) == pytest.approx(1.0)
    assert compute_ndcg([0.0, 1.0]) == pytest.approx(math.log(2) / math.log(3))
    assert compute_ndcg([0.0, 0.0]) == 1.0


def test_ranking_ndcg() -> None:
    assert ranking_ndcg(["One", "Two"], "One") == pytest.approx(1.0)
    assert ranking_ndcg(["One", "Two"], "Two") == pytest.approx(math.log(2) / math.log(3))
    assert ranking_ndcg(["One", "Two"], "Three") == 0.0


def test_evaluate_ranking(bayesian: BayesianCounter) -> None:
    evaluation = evaluate_ranking(bayesian, [(3, "One"), (0, "Two"), (3, "Two")], name="held-out")
    assert evaluation.name == "held-out"
    assert evaluation.accuracy == ExactRatio.ratio(2, 3)
    assert evaluation.ndcg == pytest.approx((2.0 + math.log(2) / math.log(3)) / 3)


def test_evaluate_ranking_without_pairs(bayesian: BayesianCounter) -> None:
    evaluation = evaluate_ranking(bayesian, [])
    assert evaluation.name == "ranking"
    assert not evaluation.accuracy.defined()
    assert math.isnan(evaluation.ndcg)


def test_evaluate_ranking_on_empty_counter() -> None:
    evaluation = evaluate_ranking(BayesianCounter(), [(1, "One")])
    assert evaluation.accuracy == ExactRatio.ratio(0, 1)
    assert evaluation.ndcg == 0.0
