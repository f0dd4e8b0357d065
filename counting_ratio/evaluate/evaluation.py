from dataclasses import dataclass

from counting_ratio.exact_ratio import ExactRatio


@dataclass
class Evaluation:
    name: str
    ndcg: float  # mean over evaluated pairs
    accuracy: ExactRatio  # top-ranked label was the actual label
