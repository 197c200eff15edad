class IntervalError(Exception):
    """Base class for every error raised by inter_val"""


class IntervalConstructionError(IntervalError, ValueError):
    """An interval (or one of its scalars) could not be built"""


class IntervalIsEmpty(IntervalConstructionError):
    def __init__(self, lower, upper):
        self.lower = lower
        self.upper = upper
        super().__init__(f"Interval between {lower} and {upper} is empty")


class FloatIsNan(IntervalConstructionError):
    def __init__(self, value=float("nan")):
        self.value = value
        super().__init__("NaN cannot be used as an interval scalar")


class BoundKindMismatch(IntervalError, TypeError):
    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} boundary, got {actual}")
