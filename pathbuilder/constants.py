import math

EPS = 1e-5  # numerically zero for lengths, radii and cosines

PI = math.pi
HALF_PI = math.pi / 2.0
TWO_PI = 2.0 * math.pi

RIGHT_ANGLE = HALF_PI  # L-shape corner and sharp U/S turns
HALF_TURN = PI  # U-shape return and each S-shape half-arc

ARROW_HEAD_BACK = 0.75  # arrow head base, as a fraction of arrow length
ARROW_HEAD_SPREAD = 0.15  # arrow head half-width, as a fraction of arrow length

DEFAULT_PIXMAP_MARGIN = 35
