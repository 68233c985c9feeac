"""
PathBuilder module - Fluent-style construction of piecewise paths.

A PathBuilder starts at the local origin heading along +x and grows the path
one validated operation at a time. Every operation returns True when it was
applied and False when its arguments were rejected; a rejected call leaves
the path exactly as it was.
"""

import functools
import inspect
import logging
import math
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

import numpy as np

from .constants import DEFAULT_PIXMAP_MARGIN, HALF_TURN, RIGHT_ANGLE
from .errors import Rejection, RejectedInput
from .outline import stroke_outline
from .path import Path
from .path_types import BoundingBox, PathVector, Point
from .render import DrawingSurface, draw_path, draw_path_from_vectors, to_pixmap, to_png
from .style import PathStyle
from .tessellation import segment_count
from .validation import (
    first_rejection,
    validate_circular,
    validate_linear,
    validate_linear_offset_angle,
    validate_linear_offset_delta,
    validate_rotate,
    validate_set_orientation,
)

if TYPE_CHECKING:
    from PIL.Image import Image

logger = logging.getLogger(__name__)

# A planned primitive: its validation outcome and the commit to run if all pass
Step = Tuple[Optional[RejectedInput], Callable[[Path], None]]


def _linear_step(length: float) -> Step:
    return validate_linear(length), lambda path: path.apply_linear(length)


def _offset_step(length: float, angle: float) -> Step:
    return (
        validate_linear_offset_angle(length, angle),
        lambda path: path.apply_linear_offset_angle(length, angle),
    )


def _circular_step(
    radius: float, angle: float, segments: Optional[int], min_arc_length: Optional[float]
) -> Step:
    def apply(path: Path) -> None:
        count = segments
        if count is None:
            count = segment_count(radius, angle, min_arc_length)
        path.apply_circular(radius, angle, count)

    return validate_circular(radius, angle, segments, min_arc_length), apply


def _turn(angle: float, turn_right: bool) -> float:
    return angle if turn_right else -angle


def degrees_variant(radian_method, angle_parameter: str = "angle"):
    """Wrap a radian-based builder method so that angle_parameter is given in degrees."""
    signature = inspect.signature(radian_method)

    @functools.wraps(radian_method)
    def wrapper(self, *args, **kwargs):
        bound = signature.bind(self, *args, **kwargs)
        bound.arguments[angle_parameter] = math.radians(bound.arguments[angle_parameter])
        return radian_method(*bound.args, **bound.kwargs)

    wrapper.__name__ = f"{radian_method.__name__}_deg"
    wrapper.__qualname__ = f"{radian_method.__qualname__}_deg"
    wrapper.__doc__ = f"Same as {radian_method.__name__}, with {angle_parameter} in degrees."
    return wrapper


class PathBuilder:
    """
    Builds a path made of straight runs, circular arcs and L/U/S motifs.

    Headings are absolute radians, positive clockwise in a frame whose y axis
    grows downward. Each *_deg method is the same operation with its angle
    in degrees.

    Example:
        builder = PathBuilder()
        builder.add_linear(100)
        builder.add_circular(50, math.pi / 2, segments=8)
        polygon = builder.shape(10)
    """

    def __init__(self):
        self._path = Path()
        self.last_rejection: Optional[RejectedInput] = None

    def reset(self) -> None:
        """Return to the single origin point with zero length, box and orientations."""
        self._path = Path()
        self.last_rejection = None

    def copy(self) -> "PathBuilder":
        clone = PathBuilder()
        clone._path = self._path.copy()
        return clone

    __copy__ = copy

    def __repr__(self) -> str:
        return (
            f"PathBuilder(count={self.count}, length={self.length:.6g}, "
            f"exit_orientation={self.exit_orientation:.6g})"
        )

    # ========== Accessors ==========

    @property
    def path(self) -> Path:
        """A copy of the current path state."""
        return self._path.copy()

    @property
    def is_valid(self) -> bool:
        return self._path.is_valid

    @property
    def count(self) -> int:
        return self._path.count

    @property
    def length(self) -> float:
        return self._path.length

    @property
    def entry_point(self) -> Point:
        return self._path.points[0]

    @property
    def exit_point(self) -> Point:
        return self._path.points[-1]

    @property
    def entry_orientation(self) -> float:
        return self._path.entry_orientation

    @property
    def entry_orientation_deg(self) -> float:
        return math.degrees(self._path.entry_orientation)

    @property
    def exit_orientation(self) -> float:
        return self._path.exit_orientation

    @property
    def exit_orientation_deg(self) -> float:
        return math.degrees(self._path.exit_orientation)

    @property
    def points(self) -> List[Point]:
        return list(self._path.points)

    @property
    def vectors(self) -> List[PathVector]:
        return list(self._path.vectors)

    @property
    def bounding_box(self) -> BoundingBox:
        return self._path.bounding_box

    def to_json(self):
        return self._path.to_json()

    # ========== Derived geometry and rendering ==========

    def shape(self, width: float) -> np.ndarray:
        """Closed stroke outline of the path, see pathbuilder.outline.stroke_outline."""
        return stroke_outline(self._path, width)

    def draw(self, surface: DrawingSurface, style: Optional[PathStyle] = None) -> None:
        draw_path(self._path, surface, style)

    def draw_from_vectors(
        self, surface: DrawingSurface, style: Optional[PathStyle] = None
    ) -> None:
        draw_path_from_vectors(self._path, surface, style)

    def to_pixmap(
        self, margin: int = DEFAULT_PIXMAP_MARGIN, style: Optional[PathStyle] = None
    ) -> Optional["Image"]:
        return to_pixmap(self._path, margin, style)

    def to_png(self, file_name: Optional[str] = None, style: Optional[PathStyle] = None, **kwargs):
        to_png(self._path, file_name, style, **kwargs)

    # ========== Building operations ==========

    def _commit(self, operation: str, steps: List[Step]) -> bool:
        rejection = first_rejection(step_rejection for step_rejection, _ in steps)
        if rejection is not None:
            self.last_rejection = RejectedInput(rejection.reason, operation)
            return False

        for _, apply in steps:
            apply(self._path)
        if len(steps) > 1:
            logger.debug("%s committed as %d primitives", operation, len(steps))
        self.last_rejection = None
        return True

    def _reject(self, reason: Rejection, operation: str) -> bool:
        self.last_rejection = RejectedInput(reason, operation)
        return False

    def set_orientation(self, angle: float) -> bool:
        """
        Set the exit heading to an absolute angle in (-2pi, 2pi).

        While the path is still a single point, the entry heading follows.
        """
        return self._commit(
            "set_orientation",
            [(validate_set_orientation(angle), lambda path: path.apply_set_orientation(angle))],
        )

    def rotate(self, angle: float) -> bool:
        """Turn the exit heading by angle in [-pi, pi]."""
        return self._commit(
            "rotate", [(validate_rotate(angle), lambda path: path.apply_rotate(angle))]
        )

    def add_linear(self, length: float) -> bool:
        """Straight run of the given length along the exit heading."""
        return self._commit("add_linear", [_linear_step(length)])

    def add_linear_offset_angle(self, length: float, angle: float) -> bool:
        """Turn by angle in [-pi, pi], then add a straight run."""
        return self._commit("add_linear_offset_angle", [_offset_step(length, angle)])

    def add_linear_offset_delta(self, parallel: float, perpendicular: float) -> bool:
        """
        Straight run to a point given relative to the current heading.

        Args:
            parallel: Displacement along the exit heading
            perpendicular: Displacement to the right of the exit heading
        """
        return self._commit(
            "add_linear_offset_delta",
            [
                (
                    validate_linear_offset_delta(parallel, perpendicular),
                    lambda path: path.apply_linear_offset_delta(parallel, perpendicular),
                )
            ],
        )

    def add_circular(
        self,
        radius: float,
        angle: float,
        segments: Optional[int] = None,
        *,
        min_arc_length: Optional[float] = None,
    ) -> bool:
        """
        Circular arc tangent to the exit heading.

        Give exactly one of segments and min_arc_length.

        Args:
            radius: Arc radius
            angle: Signed sweep in (-2pi, 2pi), positive turns right (clockwise)
            segments: Number of equal chords, at least 2
            min_arc_length: Longest arc span per chord; the chord count is
                ceil(|angle| * radius / min_arc_length) and must reach 2
        """
        return self._commit(
            "add_circular", [_circular_step(radius, angle, segments, min_arc_length)]
        )

    def add_extended_circular(
        self,
        length1: float,
        radius: float,
        angle: float,
        length2: float,
        *,
        segments: Optional[int] = None,
        min_arc_length: Optional[float] = None,
    ) -> bool:
        """Straight run, arc, straight run. Valid only if all three parts are."""
        return self._commit(
            "add_extended_circular",
            [
                _linear_step(length1),
                _circular_step(radius, angle, segments, min_arc_length),
                _linear_step(length2),
            ],
        )

    def add_l_shape(
        self,
        length1: float,
        length2: float,
        radius: Optional[float] = None,
        *,
        segments: Optional[int] = None,
        min_arc_length: Optional[float] = None,
        turn_right: bool = True,
    ) -> bool:
        """
        Two legs joined by a quarter turn.

        Without radius the corner is sharp. With radius the corner is an arc
        and both legs are shortened by the radius, so the overall span stays
        length1 by length2.
        """
        operation = "add_l_shape"
        angle = _turn(RIGHT_ANGLE, turn_right)

        if radius is None:
            if segments is not None or min_arc_length is not None:
                return self._reject(Rejection.TESSELLATION, operation)
            steps = [_linear_step(length1), _offset_step(length2, angle)]
        else:
            steps = [
                _linear_step(length1 - radius),
                _circular_step(radius, angle, segments, min_arc_length),
                _linear_step(length2 - radius),
            ]
        return self._commit(operation, steps)

    def add_u_shape(
        self,
        length1: float,
        height: float,
        length2: float,
        *,
        segments: Optional[int] = None,
        min_arc_length: Optional[float] = None,
        turn_right: bool = True,
    ) -> bool:
        """
        Half turn: out along length1, across height, back along length2.

        The sharp variant uses two right angles. Giving segments or
        min_arc_length rounds the return into a half circle of diameter
        height, trimming both legs by height / 2.
        """
        operation = "add_u_shape"
        quarter = _turn(RIGHT_ANGLE, turn_right)

        if segments is None and min_arc_length is None:
            steps = [
                _linear_step(length1),
                _offset_step(height, quarter),
                _offset_step(length2, quarter),
            ]
        else:
            radius = height / 2.0
            steps = [
                _linear_step(length1 - radius),
                _circular_step(radius, _turn(HALF_TURN, turn_right), segments, min_arc_length),
                _linear_step(length2 - radius),
            ]
        return self._commit(operation, steps)

    def add_s_shape(
        self,
        length1: float,
        length2: float,
        length3: float,
        height: float,
        *,
        segments: Optional[int] = None,
        min_arc_length: Optional[float] = None,
        turn_right: bool = True,
    ) -> bool:
        """
        Snake motif: two opposite half turns, each spanning height / 2.

        The sharp variant uses right angles. Giving segments or
        min_arc_length rounds each half turn into a half circle of radius
        height / 4; the outer legs are trimmed by height / 4 and the middle
        leg by height / 2.
        """
        operation = "add_s_shape"

        if segments is None and min_arc_length is None:
            quarter = _turn(RIGHT_ANGLE, turn_right)
            steps = [
                _linear_step(length1),
                _offset_step(height / 2.0, quarter),
                _offset_step(length2, quarter),
                _offset_step(height / 2.0, -quarter),
                _offset_step(length3, -quarter),
            ]
        else:
            radius = height / 4.0
            half = _turn(HALF_TURN, turn_right)
            steps = [
                _linear_step(length1 - radius),
                _circular_step(radius, half, segments, min_arc_length),
                _linear_step(length2 - 2.0 * radius),
                _circular_step(radius, -half, segments, min_arc_length),
                _linear_step(length3 - radius),
            ]
        return self._commit(operation, steps)

    # ========== Degree-based variants ==========

    set_orientation_deg = degrees_variant(set_orientation)
    rotate_deg = degrees_variant(rotate)
    add_linear_offset_angle_deg = degrees_variant(add_linear_offset_angle)
    add_circular_deg = degrees_variant(add_circular)
    add_extended_circular_deg = degrees_variant(add_extended_circular)
