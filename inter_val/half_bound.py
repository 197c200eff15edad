import math
import numbers
from dataclasses import dataclass

from inter_val.bound_kind import BoundKind, Side, as_kind
from inter_val.not_nan import raw, scalar


@dataclass(frozen=True)
class Bound:
    """A value paired with a boundary kind, not yet placed on a side"""
    value: object
    kind: BoundKind

    def __post_init__(self):
        object.__setattr__(self, "value", scalar(self.value))
        object.__setattr__(self, "kind", as_kind(self.kind))

    def lower(self) -> "HalfBound":
        return HalfBound(self.value, self.kind, Side.LOWER)

    def upper(self) -> "HalfBound":
        return HalfBound(self.value, self.kind, Side.UPPER)

    def to(self, upper):
        """Build the interval running from this bound up to `upper`"""
        from inter_val.interval import Interval
        return Interval(self, upper)


@dataclass(frozen=True)
class HalfBound:
    value: object
    kind: BoundKind
    side: Side

    def __post_init__(self):
        object.__setattr__(self, "value", scalar(self.value))
        object.__setattr__(self, "kind", as_kind(self.kind))

    @classmethod
    def of(cls, bound: "Bound | HalfBound", side: Side) -> "HalfBound":
        if isinstance(bound, HalfBound):
            if bound.side is not side:
                raise ValueError(f"Expected a {side.value} bound, got {bound.side.value} bound {bound}")
            return bound
        if isinstance(bound, Bound):
            return cls(bound.value, bound.kind, side)
        raise TypeError(f"Not a bound: {bound!r}")

    def __str__(self) -> str:
        inclusive = self.kind is BoundKind.INCLUSIVE
        if self.side is Side.LOWER:
            return ("[" if inclusive else "(") + str(self.value)
        return str(self.value) + ("]" if inclusive else ")")

    @property
    def is_lower(self) -> bool:
        return self.side is Side.LOWER

    # ordering relation, only defined between bounds of the same side
    def _ordering_key(self, other: "HalfBound"):
        if not isinstance(other, HalfBound):
            return None
        if other.side is not self.side:
            raise TypeError(f"Cannot order a {self.side.value} bound against a {other.side.value} bound")
        return (self.value, self.kind.ordering_rank(self.side)), (other.value, other.kind.ordering_rank(other.side))

    def __lt__(self, other: "HalfBound") -> bool:
        keys = self._ordering_key(other)
        if keys is None:
            return NotImplemented
        return keys[0] < keys[1]

    def __le__(self, other: "HalfBound") -> bool:
        keys = self._ordering_key(other)
        if keys is None:
            return NotImplemented
        return keys[0] <= keys[1]

    def __gt__(self, other: "HalfBound") -> bool:
        keys = self._ordering_key(other)
        if keys is None:
            return NotImplemented
        return keys[0] > keys[1]

    def __ge__(self, other: "HalfBound") -> bool:
        keys = self._ordering_key(other)
        if keys is None:
            return NotImplemented
        return keys[0] >= keys[1]

    def contains(self, t) -> bool:
        return self.kind.contains(self.value, scalar(t), self.side)

    def includes(self, other: "HalfBound") -> bool:
        """Is this bound at least as permissive as `other`? (compares values only)"""
        if self.is_lower:
            return self.value <= other.value
        return other.value <= self.value

    # meet: the tighter of the two bounds
    def intersection(self, other: "HalfBound") -> "HalfBound":
        if self.is_lower:
            return max(self, other)
        return min(self, other)

    # join: the looser of the two bounds
    def union(self, other: "HalfBound") -> "HalfBound":
        if self.is_lower:
            return min(self, other)
        return max(self, other)

    def flip(self) -> "HalfBound":
        """The complementary bound: everything this bound excludes on its side"""
        return HalfBound(self.value, self.kind.flip(), self.side.flip())

    def dilate(self, delta) -> "HalfBound":
        delta = scalar(delta)
        if self.is_lower:
            return HalfBound(self.value - delta, self.kind, self.side)
        return HalfBound(self.value + delta, self.kind, self.side)

    def hull(self, t) -> "HalfBound":
        t = scalar(t)
        value = min(self.value, t) if self.is_lower else max(self.value, t)
        return HalfBound(value, self.kind, self.side)

    def minimal_contained_value(self):
        if self.kind is BoundKind.INCLUSIVE:
            return self.value
        if not isinstance(self.value, numbers.Integral):
            raise TypeError(f"Exclusive bound {self} on a non-integer scalar has no least element")
        return self.value + 1

    def maximal_contained_value(self):
        if self.kind is BoundKind.INCLUSIVE:
            return self.value
        if not isinstance(self.value, numbers.Integral):
            raise TypeError(f"Exclusive bound {self} on a non-integer scalar has no greatest element")
        return self.value - 1

    def _finite_value(self):
        value = raw(self.value)
        if value in (math.inf, -math.inf):
            raise ValueError(f"Infinite bound {self} has no integer limit")
        return value

    def ceil(self) -> int:
        """Smallest integer admitted by a lower bound"""
        value = self._finite_value()
        if self.kind is BoundKind.INCLUSIVE:
            return math.ceil(value)
        return math.floor(value) + 1

    def floor(self) -> int:
        """Largest integer admitted by an upper bound"""
        value = self._finite_value()
        if self.kind is BoundKind.INCLUSIVE:
            return math.floor(value)
        return math.ceil(value) - 1

    def closure(self) -> "HalfBound":
        return HalfBound(self.value, BoundKind.INCLUSIVE, self.side)

    def interior(self) -> "HalfBound":
        return HalfBound(self.value, BoundKind.EXCLUSIVE, self.side)
