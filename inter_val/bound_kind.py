from enum import Enum

from inter_val.errors import BoundKindMismatch


class Side(Enum):
    LOWER = "lower"
    UPPER = "upper"

    def flip(self) -> "Side":
        return Side.UPPER if self is Side.LOWER else Side.LOWER


class BoundKind(Enum):
    """Whether the endpoint value itself is a member of the interval"""
    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"

    def __str__(self):
        return self.value

    def flip(self) -> "BoundKind":
        return BoundKind.EXCLUSIVE if self is BoundKind.INCLUSIVE else BoundKind.INCLUSIVE

    def less(self, this, t) -> bool:
        if self is BoundKind.INCLUSIVE:
            return this <= t
        return this < t

    def contains(self, bound_value, point, side: Side) -> bool:
        """Is `point` on the inner side of a bound at `bound_value`?"""
        if side is Side.LOWER:
            return self.less(bound_value, point)
        return self.less(point, bound_value)

    # tie-break for two bounds of the same side at the same value:
    # lower [4 sorts before (4, upper 4) sorts before 4]
    def ordering_rank(self, side: Side) -> int:
        if side is Side.LOWER:
            return 0 if self is BoundKind.INCLUSIVE else 1
        return 0 if self is BoundKind.EXCLUSIVE else 1

    def generalize(self) -> "BoundKind":
        return self

    def at(self, value):
        from inter_val.half_bound import Bound
        return Bound(value, self)


class StaticKind:
    """
    A boundary kind fixed ahead of time (`Inclusive` or `Exclusive`).

    Markers behave like their BoundKind counterpart and generalize into it;
    the reverse direction only succeeds through `narrow`.
    """
    general: BoundKind

    def __repr__(self):
        return type(self).__name__.removesuffix("Kind")

    def __eq__(self, other):
        if isinstance(other, (StaticKind, BoundKind)):
            return self.general is other.generalize()
        return NotImplemented

    def __hash__(self):
        return hash(self.general)

    def generalize(self) -> BoundKind:
        return self.general

    def flip(self) -> "StaticKind":
        return _MARKERS[self.general.flip()]

    def less(self, this, t) -> bool:
        return self.general.less(this, t)

    def contains(self, bound_value, point, side: Side) -> bool:
        return self.general.contains(bound_value, point, side)

    def at(self, value):
        return self.general.at(value)

    def narrow(self, kind) -> "StaticKind":
        kind = as_kind(kind)
        if kind is not self.general:
            raise BoundKindMismatch(self.general, kind)
        return self


class InclusiveKind(StaticKind):
    general = BoundKind.INCLUSIVE


class ExclusiveKind(StaticKind):
    general = BoundKind.EXCLUSIVE


Inclusive = InclusiveKind()
Exclusive = ExclusiveKind()

_MARKERS = {
    BoundKind.INCLUSIVE: Inclusive,
    BoundKind.EXCLUSIVE: Exclusive,
}


def as_kind(kind) -> BoundKind:
    if isinstance(kind, (BoundKind, StaticKind)):
        return kind.generalize()
    raise TypeError(f"Not a boundary kind: {kind!r}")
