from loguru import logger

from inter_val.bound_kind import BoundKind, Exclusive, ExclusiveKind, Inclusive, InclusiveKind, Side, StaticKind
from inter_val.errors import (
    BoundKindMismatch,
    FloatIsNan,
    IntervalConstructionError,
    IntervalError,
    IntervalIsEmpty,
)
from inter_val.half_bound import Bound, HalfBound
from inter_val.interval import Interval, IntervalDifference, IntervalUnion
from inter_val.not_nan import NotNan

# silent unless the application opts in through inter_val.log.enable_logging
logger.disable("inter_val")

__all__ = [
    "Bound",
    "BoundKind",
    "BoundKindMismatch",
    "Exclusive",
    "ExclusiveKind",
    "FloatIsNan",
    "HalfBound",
    "Inclusive",
    "InclusiveKind",
    "Interval",
    "IntervalConstructionError",
    "IntervalDifference",
    "IntervalError",
    "IntervalIsEmpty",
    "IntervalUnion",
    "NotNan",
    "Side",
    "StaticKind",
]
