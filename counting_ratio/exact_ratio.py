from dataclasses import dataclass, replace

import numpy


@dataclass(eq=True)
class ExactRatio:
    """
    A set of counted observations: how many of them matched some condition
    (``matches``) out of how many were made (``observations``).

    Unlike a rational number the pair is never reduced, 1/2 and 2/4 stay
    distinct. Arithmetic works on the raw counts:

        a + b        -> (a.matches + b.matches) / (a.observations + b.observations)
        a * b        -> (a.matches * b.matches) / (a.observations * b.observations)
        a / b        -> (a.matches * b.observations) / (a.observations * b.matches)

    With no observations the float value is nan (or inf when matches > 0)
    and ``str`` shows it, e.g. ``"0/0 (nan%)"``. Check ``defined()`` first.
    """

    matches: int = 0
    observations: int = 0

    @classmethod
    def ratio(cls, matches: int, observations: int) -> "ExactRatio":
        return cls(matches, observations)

    def observe(self, condition_met: bool) -> None:
        self.observations += 1
        if condition_met:
            self.matches += 1

    def observe_with_prior(
        self,
        prior_met: bool,
        posterior_met: bool,
    ) -> None:
        # observations failing the prior are left out of the denominator
        if prior_met:
            self.observe(posterior_met)

    def defined(self) -> bool:
        return self.observations > 0

    def copy(self) -> "ExactRatio":
        return replace(self)

    def scale_numerator(self, count: int) -> "ExactRatio":
        """
        Multiplies ``matches`` by ``count`` and keeps ``observations``.

        Not a scalar multiply: it weights a conditional by a raw count while
        keeping the conditional's denominator, for ranking comparisons only.
        """
        return ExactRatio(self.matches * count, self.observations)

    def __add__(self, other: "ExactRatio") -> "ExactRatio":
        if not isinstance(other, ExactRatio):
            return NotImplemented
        return ExactRatio(
            self.matches + other.matches,
            self.observations + other.observations,
        )

    def __mul__(self, other: "ExactRatio") -> "ExactRatio":
        if not isinstance(other, ExactRatio):
            return NotImplemented
        return ExactRatio(
            self.matches * other.matches,
            self.observations * other.observations,
        )

    def __truediv__(self, other: "ExactRatio") -> "ExactRatio":
        if not isinstance(other, ExactRatio):
            return NotImplemented
        return ExactRatio(
            self.matches * other.observations,
            self.observations * other.matches,
        )

    def compare(self, other: "ExactRatio") -> int:
        """
        Orders two ratios using integer arithmetic only.

        A ratio with no matches sorts below any ratio with matches. Known
        quirk: two ratios with matches and the same number of observations
        compare equal whatever their matches are, e.g. 1/4 and 3/4.
        """
        if self.matches == 0 and other.matches == 0:
            return 0
        if self.matches == 0:
            return -1
        if other.matches == 0:
            return 1
        if self.observations == other.observations:
            return 0
        lhs = self.matches * other.observations
        rhs = other.matches * self.observations
        return (lhs > rhs) - (lhs < rhs)

    def __lt__(self, other: "ExactRatio") -> bool:
        if not isinstance(other, ExactRatio):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "ExactRatio") -> bool:
        if not isinstance(other, ExactRatio):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "ExactRatio") -> bool:
        if not isinstance(other, ExactRatio):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "ExactRatio") -> bool:
        if not isinstance(other, ExactRatio):
            return NotImplemented
        return self.compare(other) >= 0

    def __float__(self) -> float:
        return self.probability

    def __str__(self) -> str:
        return f"{self.matches}/{self.observations} ({100.0 * self.probability:.2f}%)"

    @property
    def probability(self) -> float:
        with numpy.errstate(divide="ignore", invalid="ignore"):
            return float(
                numpy.float64(self.matches) / numpy.float64(self.observations)
            )
