import logging
from typing import Any, Iterable, Iterator, Sequence, Tuple, Union

import numpy

from counting_ratio.bayesian_counter import BayesianCounter
from counting_ratio.evaluate.evaluation import Evaluation
from counting_ratio.exact_ratio import ExactRatio

logger = logging.getLogger(__name__)


def compute_dcg(relevances: Sequence[float]) -> float:
    relevances = numpy.asarray(relevances, dtype=numpy.float64)
    positions = numpy.arange(relevances.size)
    return float(numpy.sum(relevances / numpy.log(positions + 2)))


def compute_ndcg(relevances: Sequence[float]) -> float:
    dcg = compute_dcg(relevances)
    idcg = compute_dcg(sorted(relevances, reverse=True))
    if idcg <= 1e-6:
        return 1.0
    return dcg / idcg


def ranking_ndcg(
    ranking: Sequence[Any],
    actual: Any,
) -> float:
    """NDCG of a most-likely-first ranking in which only ``actual`` is relevant."""
    if actual not in ranking:
        return 0.0
    return compute_ndcg([1.0 if label == actual else 0.0 for label in ranking])


def evaluate_ranking(
    counter: BayesianCounter,
    pairs: Union[Iterable[Tuple[Any, Any]], Iterator[Tuple[Any, Any]]],
    name: str = "ranking",
) -> Evaluation:
    """
    Scores ``counter.label_ranking_for`` against held-out (example, label)
    pairs. The ranking is read most likely first; ``accuracy`` counts how
    often its first label was the actual one.
    """
    scores = []
    accuracy = ExactRatio()
    for example, actual in pairs:
        ranking = counter.label_ranking_for(example)[::-1]
        scores.append(ranking_ndcg(ranking, actual))
        accuracy.observe(len(ranking) > 0 and ranking[0] == actual)

    ndcg = float(numpy.mean(scores)) if scores else float("nan")
    logger.info("%s: ndcg %.4f, accuracy %s", name, ndcg, accuracy)
    return Evaluation(name, ndcg, accuracy)
