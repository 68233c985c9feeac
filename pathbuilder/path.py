"""
Path state owned by a PathBuilder.

The apply_* methods commit an operation unconditionally; callers are expected
to have validated the arguments first (see pathbuilder.validation).
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .geometry import point_from_vector
from .path_types import BoundingBox, PathVector, Point
from .tessellation import tessellate_arc

logger = logging.getLogger(__name__)


def _origin_points() -> List[Point]:
    return [Point(0.0, 0.0)]


@dataclass
class Path:
    """
    A piecewise linear path starting at the local origin.

    Attributes:
        points: Path vertices, points[0] is always the origin
        vectors: One (length, heading) pair per segment between consecutive points
        length: Sum of all segment lengths
        entry_orientation: Heading at the entry point, frozen once the path grows
        exit_orientation: Current construction heading
        bounding_box: Box covering every point, grown point by point
    """

    points: List[Point] = field(default_factory=_origin_points)
    vectors: List[PathVector] = field(default_factory=list)
    length: float = 0.0
    entry_orientation: float = 0.0
    exit_orientation: float = 0.0
    bounding_box: BoundingBox = field(default_factory=BoundingBox)

    @property
    def is_valid(self) -> bool:
        return len(self.points) >= 2

    @property
    def count(self) -> int:
        return len(self.points)

    @property
    def is_initial(self) -> bool:
        return len(self.points) == 1

    def copy(self) -> "Path":
        # Points, vectors and the box are immutable, so shallow list copies suffice.
        return Path(
            points=list(self.points),
            vectors=list(self.vectors),
            length=self.length,
            entry_orientation=self.entry_orientation,
            exit_orientation=self.exit_orientation,
            bounding_box=self.bounding_box,
        )

    # ========== Committing mutators ==========

    def apply_set_orientation(self, angle: float) -> None:
        self.exit_orientation = angle
        if self.is_initial:
            self.entry_orientation = self.exit_orientation

    def apply_rotate(self, angle: float) -> None:
        self.exit_orientation += angle
        if self.is_initial:
            self.entry_orientation = self.exit_orientation

    def apply_linear(self, length: float) -> None:
        point = point_from_vector(self.points[-1], length, self.exit_orientation)
        self._append(point, PathVector(length, self.exit_orientation))
        self.length += length
        logger.debug(
            "linear segment: length=%.6g heading=%.6g", length, self.exit_orientation
        )

    def apply_linear_offset_angle(self, length: float, angle: float) -> None:
        self.exit_orientation += angle
        self.apply_linear(length)

    def apply_linear_offset_delta(self, parallel: float, perpendicular: float) -> None:
        self.apply_linear_offset_angle(
            math.hypot(parallel, perpendicular), math.atan2(perpendicular, parallel)
        )

    def apply_circular(self, radius: float, angle: float, segments: int) -> None:
        """
        Append a tessellated arc.

        The exit heading advances by the full sweep, which is not the heading
        of the last chord: the intended tangent direction does not depend on
        how finely the arc was split.
        """
        chords = tessellate_arc(
            self.points[-1], self.exit_orientation, radius, angle, segments
        )
        for point, vector in chords:
            self._append(point, vector)

        self.exit_orientation += angle
        self.length += chords[0][1].length * segments
        logger.debug(
            "circular segment: radius=%.6g sweep=%.6g chords=%d", radius, angle, segments
        )

    def _append(self, point: Point, vector: PathVector) -> None:
        self.points.append(point)
        self.vectors.append(vector)
        self.bounding_box = self.bounding_box.expanded(point)

    def to_json(self) -> Dict[str, Any]:
        return {
            "points": [point.to_json() for point in self.points],
            "vectors": [vector.to_json() for vector in self.vectors],
            "length": float(self.length),
            "entry_orientation": float(self.entry_orientation),
            "exit_orientation": float(self.exit_orientation),
            "bounding_box": self.bounding_box.to_json(),
        }
