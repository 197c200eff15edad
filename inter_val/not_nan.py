import math
import numbers
from decimal import Decimal

from loguru import logger

from inter_val.errors import FloatIsNan


def raw(value):
    """Unwrap a NotNan back into a plain float (other scalars pass through)"""
    return value.value if isinstance(value, NotNan) else value


class NotNan:
    """A float that is guaranteed not to be NaN, and therefore totally ordered"""
    __slots__ = ("value",)

    def __init__(self, value: float):
        value = float(raw(value))
        if math.isnan(value):
            logger.debug("Rejected NaN scalar")
            raise FloatIsNan(value)
        self.value = value

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"NotNan({self.value!r})"

    def __float__(self):
        return self.value

    def __eq__(self, other):
        if isinstance(other, _COMPARABLE):
            return self.value == raw(other)
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, _COMPARABLE):
            return self.value < raw(other)
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, _COMPARABLE):
            return self.value <= raw(other)
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, _COMPARABLE):
            return self.value > raw(other)
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, _COMPARABLE):
            return self.value >= raw(other)
        return NotImplemented

    # inf - inf and 0 * inf have no value, so arithmetic can fail just like construction
    def __add__(self, other):
        return NotNan(self.value + raw(other))

    def __radd__(self, other):
        return NotNan(raw(other) + self.value)

    def __sub__(self, other):
        return NotNan(self.value - raw(other))

    def __rsub__(self, other):
        return NotNan(raw(other) - self.value)

    def __mul__(self, other):
        return NotNan(self.value * raw(other))

    def __rmul__(self, other):
        return NotNan(raw(other) * self.value)

    def __truediv__(self, other):
        return NotNan(self.value / raw(other))

    def __rtruediv__(self, other):
        return NotNan(raw(other) / self.value)

    def __neg__(self):
        return NotNan(-self.value)

    def __abs__(self):
        return NotNan(abs(self.value))

    def __hash__(self):
        # equal to float(x) == x, so the hashes have to agree as well
        return hash(self.value)


# anything plain floats already order against (Fraction and Decimal included)
_COMPARABLE = (NotNan, numbers.Real, Decimal)


def scalar(value):
    """Wrap raw floats so that every stored bound value is totally ordered"""
    if isinstance(value, NotNan):
        return value
    if isinstance(value, float):
        return NotNan(value)
    return value
