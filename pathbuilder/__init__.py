"""
pathbuilder - Incremental construction of 2D paths.

This package builds piecewise paths from straight runs, circular arcs and
L/U/S motifs, derives their stroke outline, and renders them through
matplotlib or Pillow.
"""

__version__ = "0.1.0"

# Core builder
from .builder import PathBuilder

# Path state and geometry types
from .errors import PathContractError, Rejection, RejectedInput
from .path import Path
from .path_types import BoundingBox, PathVector, Point

# Rendering
from .render import DrawingSurface, MatplotlibSurface, PillowSurface
from .style import Pen, PathStyle, Styles

# Define what gets imported with "from pathbuilder import *"
__all__ = [
    # Builder
    "PathBuilder",
    "Path",
    # Geometry types
    "Point",
    "PathVector",
    "BoundingBox",
    # Errors
    "Rejection",
    "RejectedInput",
    "PathContractError",
    # Rendering
    "DrawingSurface",
    "MatplotlibSurface",
    "PillowSurface",
    "Pen",
    "PathStyle",
    "Styles",
]
