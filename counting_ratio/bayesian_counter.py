import functools
import logging
from dataclasses import dataclass, field
from typing import Dict, Generic, Iterable, Iterator, List, Tuple, TypeVar, Union

import pandas

from counting_ratio.exact_ratio import ExactRatio
from counting_ratio.label_counts import LabelCounts

logger = logging.getLogger(__name__)

Label = TypeVar("Label")
Example = TypeVar("Example")


@dataclass(slots=True)
class BayesianCounter(Generic[Label, Example]):
    """
    Joint counts of (example, label) observations.

    Every probability is derived on read from the current counts and returned
    as an ExactRatio, unreduced. Labels and examples are used as dict keys and
    must be hashable and mutually orderable; labels are visited in ascending
    order.

    Queries about labels or examples that were never observed produce a zero
    denominator rather than an error, so their float value is nan.
    """

    _label_map: Dict[Label, LabelCounts] = field(default_factory=lambda: {})
    _total: int = 0

    @property
    def total(self) -> int:
        return self._total

    def observe(
        self,
        example: Example,
        label: Label,
    ) -> None:
        label_counts = self._label_map.get(label, None)
        if label_counts is None:
            label_counts = LabelCounts()
            self._label_map[label] = label_counts
        label_counts.observe(example)
        self._total += 1

    def observe_sequence(
        self,
        pairs: Union[Iterable[Tuple[Example, Label]], Iterator[Tuple[Example, Label]]],
    ) -> None:
        observed = 0
        for example, label in pairs:
            self.observe(example, label)
            observed += 1
        logger.debug("observed %d pairs, total now %d", observed, self._total)

    def labels(self) -> List[Label]:
        return sorted(self._label_map)

    def examples(self) -> List[Example]:
        examples = set()
        for label_counts in self._label_map.values():
            examples.update(label_counts.example_counts)
        return sorted(examples)

    def count(
        self,
        example: Example,
        label: Label,
    ) -> int:
        label_counts = self._label_map.get(label, None)
        if label_counts is None:
            return 0
        return label_counts.get_count(example)

    def label_count(
        self,
        label: Label,
    ) -> int:
        label_counts = self._label_map.get(label, None)
        if label_counts is None:
            return 0
        return label_counts.total

    def example_count(
        self,
        example: Example,
    ) -> int:
        return sum(
            label_counts.get_count(example)
            for label_counts in self._label_map.values()
        )

    def p_label(
        self,
        label: Label,
    ) -> ExactRatio:
        return ExactRatio.ratio(self.label_count(label), self._total)

    def p_example(
        self,
        example: Example,
    ) -> ExactRatio:
        return ExactRatio.ratio(self.example_count(example), self._total)

    def p_example_given_label(
        self,
        example: Example,
        label: Label,
    ) -> ExactRatio:
        return ExactRatio.ratio(self.count(example, label), self.label_count(label))

    def p_label_given_example(
        self,
        label: Label,
        example: Example,
    ) -> ExactRatio:
        # Bayes' rule on raw counts: P(e | l) * P(l) / P(e), left unreduced
        return (
            self.p_example_given_label(example, label)
            * self.p_label(label)
            / self.p_example(example)
        )

    def label_ranking_for(
        self,
        example: Example,
    ) -> List[Label]:
        """
        Every observed label, least likely first for ``example``.

        Each label is weighted by P(example | label) with its numerator scaled
        by the label's count, keeping the conditional's denominator. Labels
        comparing equal keep ascending label order.
        """
        weighted = [
            (
                self.p_example_given_label(example, label).scale_numerator(
                    self.label_count(label)
                ),
                label,
            )
            for label in self.labels()
        ]
        weighted.sort(key=functools.cmp_to_key(lambda a, b: a[0].compare(b[0])))
        return [label for _, label in weighted]

    def to_frame(self) -> pandas.DataFrame:
        labels = self.labels()
        examples = self.examples()
        return pandas.DataFrame(
            [[self.count(example, label) for example in examples] for label in labels],
            index=pandas.Index(labels, name="label"),
            columns=pandas.Index(examples, name="example"),
            dtype="int64",
        )
