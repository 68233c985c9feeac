from dataclasses import dataclass
from enum import Enum


class Rejection(str, Enum):
    """Precondition class a rejected operation failed."""

    LENGTH = "length"
    ANGLE = "angle"
    RADIUS = "radius"
    SEGMENT_COUNT = "segment_count"
    ARC_LENGTH = "arc_length"
    TESSELLATION = "tessellation"


@dataclass(frozen=True)
class RejectedInput:
    """
    Outcome of a failed validation.

    Rejections are returned, never raised: a builder operation that receives
    one reports False and leaves the path untouched.
    """

    reason: Rejection
    operation: str

    def __str__(self) -> str:
        return f"{self.operation}: rejected ({self.reason.value})"


class PathContractError(AssertionError):
    """An internal invariant of the path engine was broken."""
