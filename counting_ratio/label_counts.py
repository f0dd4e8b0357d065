from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(slots=True)
class LabelCounts:
    total: int = 0  # sum of example_counts.values()
    example_counts: Dict[Any, int] = field(default_factory=lambda: {})

    def observe(
        self,
        example,
        num: int = 1,
    ) -> None:
        self.total += num
        example_counts = self.example_counts
        example_counts[example] = num + example_counts.get(example, 0)

    def get_count(
        self,
        example,
    ) -> int:
        return self.example_counts.get(example, 0)
