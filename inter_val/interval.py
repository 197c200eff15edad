import math
from dataclasses import dataclass
from typing import Iterable, Iterator

from loguru import logger

from inter_val.bound_kind import BoundKind, Exclusive, Inclusive, Side
from inter_val.errors import IntervalIsEmpty
from inter_val.half_bound import Bound, HalfBound
from inter_val.not_nan import raw, scalar


def is_valid_interval(lower: HalfBound, upper: HalfBound) -> bool:
    return lower.contains(upper.value) and upper.contains(lower.value)


@dataclass(frozen=True, order=True)
class Interval:
    """
    A non-empty interval such as [a, b], (a, b), [a, b) or (a, b].

    The scalar type only needs a total order; raw floats are wrapped in NotNan.
    Integer intervals are still intervals on the real line, e.g. (0, 1) is not
    empty even though it has no integer member.
    """
    lower: HalfBound
    upper: HalfBound

    def __post_init__(self):
        lower = HalfBound.of(self.lower, Side.LOWER)
        upper = HalfBound.of(self.upper, Side.UPPER)
        if not is_valid_interval(lower, upper):
            logger.debug(f"Rejected empty interval {lower}, {upper}")
            raise IntervalIsEmpty(lower, upper)
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "upper", upper)

    def __str__(self) -> str:
        return f"{self.lower}, {self.upper}"

    @classmethod
    def try_new(cls, lower: Bound | HalfBound, upper: Bound | HalfBound) -> "Interval | None":
        try:
            return cls(lower, upper)
        except IntervalIsEmpty:
            return None

    @classmethod
    def between(cls, a, b, lower_kind=Inclusive, upper_kind=Inclusive) -> "Interval":
        """Interval between `a` and `b` in whichever order they are given"""
        a, b = scalar(a), scalar(b)
        if b < a:
            a, b = b, a
        return cls(lower_kind.at(a), upper_kind.at(b))

    @classmethod
    def try_between(cls, a, b, lower_kind=Inclusive, upper_kind=Inclusive) -> "Interval | None":
        try:
            return cls.between(a, b, lower_kind, upper_kind)
        except IntervalIsEmpty:
            return None

    @classmethod
    def closed(cls, a, b) -> "Interval":
        return cls(Inclusive.at(a), Inclusive.at(b))

    @classmethod
    def open(cls, a, b) -> "Interval":
        return cls(Exclusive.at(a), Exclusive.at(b))

    @classmethod
    def right_open(cls, a, b) -> "Interval":
        return cls(Inclusive.at(a), Exclusive.at(b))

    @classmethod
    def left_open(cls, a, b) -> "Interval":
        return cls(Exclusive.at(a), Inclusive.at(b))

    @classmethod
    def from_range(cls, r: range) -> "Interval":
        if r.step != 1:
            raise ValueError(f"Only unit-step ranges describe an interval, got step {r.step}")
        return cls.right_open(r.start, r.stop)

    def to_range(self) -> range:
        return range(self.min(), self.max() + 1)

    @classmethod
    def span_many(cls, items: Iterable["Interval"]) -> "Interval | None":
        items = iter(items)
        result = next(items, None)
        if result is None:
            return None
        for item in items:
            result = result.span(item)
        return result

    @classmethod
    def hull_many(cls, values: Iterable, lower_kind=Inclusive, upper_kind=Inclusive) -> "Interval | None":
        values = [scalar(v) for v in values]
        if not values:
            return None
        return cls.try_new(lower_kind.at(min(values)), upper_kind.at(max(values)))

    @property
    def kinds(self) -> tuple[BoundKind, BoundKind]:
        return self.lower.kind, self.upper.kind

    @property
    def inf(self):
        return self.lower.value

    @property
    def sup(self):
        return self.upper.value

    def min(self):
        return self.lower.minimal_contained_value()

    def max(self):
        return self.upper.maximal_contained_value()

    def measure(self):
        return raw(self.sup) - raw(self.inf)

    def center(self):
        return (raw(self.inf) + raw(self.sup)) / 2

    def contains(self, t) -> bool:
        return self.lower.contains(t) and self.upper.contains(t)

    def __contains__(self, t) -> bool:
        return self.contains(t)

    # subset test on bound values
    def includes(self, other: "Interval") -> bool:
        return self.lower.includes(other.lower) and self.upper.includes(other.upper)

    def overlaps(self, other: "Interval") -> bool:
        return self.intersection(other) is not None

    # meet '∩' operator
    def intersection(self, other: "Interval") -> "Interval | None":
        return Interval.try_new(
            self.lower.intersection(other.lower),
            self.upper.intersection(other.upper),
        )

    def __and__(self, other: "Interval") -> "Interval | None":
        return self.intersection(other)

    # join 'U' operator: the smallest interval covering both
    def span(self, other: "Interval") -> "Interval":
        return Interval(self.lower.union(other.lower), self.upper.union(other.upper))

    def __or__(self, other: "Interval") -> "Interval":
        return self.span(other)

    def hull(self, t) -> "Interval":
        return Interval(self.lower.hull(t), self.upper.hull(t))

    def gap(self, other: "Interval") -> "Interval | None":
        """The interval strictly between two disjoint intervals"""
        gap = Interval.try_new(self.upper.flip(), other.lower.flip())
        if gap is None:
            gap = Interval.try_new(other.upper.flip(), self.lower.flip())
        return gap

    def union(self, other: "Interval") -> "IntervalUnion":
        return IntervalUnion(span=self.span(other), gap=self.gap(other))

    def difference(self, other: "Interval") -> "IntervalDifference":
        """The parts of this interval below and above `other`"""
        return IntervalDifference(
            lower=Interval.try_new(self.lower, self.upper.intersection(other.lower.flip())),
            upper=Interval.try_new(self.lower.intersection(other.upper.flip()), self.upper),
        )

    def lower_complement(self) -> HalfBound:
        """Upper bound of everything below this interval"""
        return self.lower.flip()

    def upper_complement(self) -> HalfBound:
        """Lower bound of everything above this interval"""
        return self.upper.flip()

    def dilate(self, delta) -> "Interval":
        return Interval(self.lower.dilate(delta), self.upper.dilate(delta))

    def closure(self) -> "Interval":
        return Interval(self.lower.closure(), self.upper.closure())

    def interior(self) -> "Interval | None":
        return Interval.try_new(self.lower.interior(), self.upper.interior())

    def iou(self, other: "Interval") -> float:
        """Intersection over union of the two intervals' measures"""
        intersection = self.intersection(other)
        if intersection is None:
            return 0.0
        union = self.span(other).measure()
        if union == 0:
            # two identical single points
            return math.nan
        return intersection.measure() / union

    def __iter__(self) -> Iterator:
        return self.step_by(1)

    def step_by(self, step) -> Iterator:
        if step <= 0:
            raise ValueError(f"Step must be positive, got {step}")
        return iter(range(self.min(), self.max() + 1, step))

    def step_uniform(self, n: int) -> Iterator[float]:
        """Split [inf, sup] into `n` equal steps, skipping excluded endpoints"""
        if n < 1:
            raise ValueError(f"Number of steps must be positive, got {n}")
        inf, sup = raw(self.inf), raw(self.sup)
        step = (sup - inf) / n
        first = 0 if self.lower.kind is BoundKind.INCLUSIVE else 1
        last = n if self.upper.kind is BoundKind.INCLUSIVE else n - 1
        for i in range(first, last + 1):
            yield sup if i == n else inf + step * i


@dataclass(frozen=True)
class IntervalUnion:
    span: Interval
    gap: Interval | None

    def __iter__(self) -> Iterator[Interval]:
        """Split the span back into its components"""
        if self.gap is None:
            return iter([self.span])
        first = Interval(self.span.lower, self.gap.lower.flip())
        second = Interval(self.gap.upper.flip(), self.span.upper)
        return iter([first, second])


@dataclass(frozen=True)
class IntervalDifference:
    lower: Interval | None
    upper: Interval | None

    def __iter__(self) -> Iterator[Interval]:
        return iter([part for part in (self.lower, self.upper) if part is not None])
