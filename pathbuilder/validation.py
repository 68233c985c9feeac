"""
Precondition checks for every path-building primitive.

Each check is a pure function of its arguments: it returns None when the
arguments are in domain and a RejectedInput naming the failed precondition
otherwise. Angle bounds follow the builder's domains: absolute orientations
and arc sweeps exclude a full turn, relative turns are limited to a half turn.
"""

import math
import numbers
from typing import Iterable, Optional

from .constants import EPS, PI, TWO_PI
from .errors import Rejection, RejectedInput


def _reject(reason: Rejection, operation: str) -> RejectedInput:
    return RejectedInput(reason=reason, operation=operation)


def is_length(value: float) -> bool:
    return value > EPS


def is_absolute_angle(angle: float) -> bool:
    return -TWO_PI < angle < TWO_PI


def is_relative_angle(angle: float) -> bool:
    return -PI <= angle <= PI


def is_segment_count(segments) -> bool:
    if isinstance(segments, bool) or not isinstance(segments, numbers.Integral):
        return False
    return segments >= 2


def validate_set_orientation(angle: float) -> Optional[RejectedInput]:
    if not is_absolute_angle(angle):
        return _reject(Rejection.ANGLE, "set_orientation")
    return None


def validate_rotate(angle: float) -> Optional[RejectedInput]:
    if not is_relative_angle(angle):
        return _reject(Rejection.ANGLE, "rotate")
    return None


def validate_linear(length: float) -> Optional[RejectedInput]:
    if not is_length(length):
        return _reject(Rejection.LENGTH, "add_linear")
    return None


def validate_linear_offset_angle(length: float, angle: float) -> Optional[RejectedInput]:
    if not is_length(length):
        return _reject(Rejection.LENGTH, "add_linear_offset_angle")
    if not is_relative_angle(angle):
        return _reject(Rejection.ANGLE, "add_linear_offset_angle")
    return None


def validate_linear_offset_delta(
    parallel: float, perpendicular: float
) -> Optional[RejectedInput]:
    if not is_length(math.hypot(parallel, perpendicular)):
        return _reject(Rejection.LENGTH, "add_linear_offset_delta")
    return None


def validate_tessellation(
    segments: Optional[int], min_arc_length: Optional[float], operation: str
) -> Optional[RejectedInput]:
    """Exactly one arc granularity policy must be chosen."""
    if (segments is None) == (min_arc_length is None):
        return _reject(Rejection.TESSELLATION, operation)
    return None


def validate_circular(
    radius: float,
    angle: float,
    segments: Optional[int] = None,
    min_arc_length: Optional[float] = None,
) -> Optional[RejectedInput]:
    """
    Check an arc of the given radius and signed sweep.

    The sweep must be numerically non-zero; a zero sweep has no turn side.

    With min_arc_length the arc must still be split into at least two chords,
    so the minimum has to stay under half the arc length.
    """
    operation = "add_circular"
    rejection = validate_tessellation(segments, min_arc_length, operation)
    if rejection is not None:
        return rejection
    if not is_length(radius):
        return _reject(Rejection.RADIUS, operation)
    if not is_absolute_angle(angle) or abs(angle) <= EPS:
        return _reject(Rejection.ANGLE, operation)
    if segments is not None:
        if not is_segment_count(segments):
            return _reject(Rejection.SEGMENT_COUNT, operation)
        return None
    if not (EPS < min_arc_length < abs(angle) * radius / 2.0):
        return _reject(Rejection.ARC_LENGTH, operation)
    return None


def first_rejection(
    rejections: Iterable[Optional[RejectedInput]],
) -> Optional[RejectedInput]:
    for rejection in rejections:
        if rejection is not None:
            return rejection
    return None
