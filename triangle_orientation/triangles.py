
import logging
from typing import NamedTuple

import numpy as np

from .config import OrientationConfig
from .errors import InvalidInputError, OrientationError
from .utils import shoelace_sum, interior_angles_deg, orientation_average_deg, is_collinear

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    x: float
    y: float


class Triangle:
    """
    Three points plus the quantities the matcher compares:
    - angles: interior angle (deg) at each vertex, in vertex order
    - orientation_average: rotational pose (deg, [0, 360))
    - is_degenerate: the points are collinear within tolerance
    Equality is identity; the vertex order may be changed in place by
    order_clockwise, which refreshes the derived values.
    """
    __slots__ = ("_vertices", "angles", "orientation_average", "is_degenerate", "_tol")

    def __init__(self, p1, p2, p3, degeneracy_tolerance=1e-9):
        self._vertices = [Point(float(p1[0]), float(p1[1])),
                          Point(float(p2[0]), float(p2[1])),
                          Point(float(p3[0]), float(p3[1]))]
        self._tol = degeneracy_tolerance
        self.is_degenerate = is_collinear(self._vertices, degeneracy_tolerance)
        self._refresh()

    @property
    def vertices(self):
        return tuple(self._vertices)

    def as_array(self):
        return np.array(self._vertices, dtype=float)

    def swap_vertices(self, i, j):
        v = self._vertices
        v[i], v[j] = v[j], v[i]
        self._refresh()

    def _refresh(self):
        P = self.as_array()
        self.angles = interior_angles_deg(P)
        self.orientation_average = orientation_average_deg(P)

    def __repr__(self):
        pts = ", ".join(f"({p.x:.3f}, {p.y:.3f})" for p in self._vertices)
        return f"Triangle({pts})"


def _as_points(points):
    P = np.asarray(points, dtype=float)
    if P.ndim != 2 or P.shape[1] < 2:
        raise InvalidInputError(f"Expected an (N, 2) point array, got shape {P.shape}")
    return P[:, :2]

def create_triangles(points, config=None):
    """Every (i<j<k) triangle of the input, in lexicographic index order."""
    config = config or OrientationConfig()
    P = _as_points(points) if len(points) else np.zeros((0, 2))
    n = P.shape[0]
    if n < 3:
        raise InvalidInputError(f"At least 3 points are needed to form a triangle, got {n}")
    tol = config.degeneracy_tolerance
    triangles = []
    for i in range(n):
        for j in range(i+1, n):
            for k in range(j+1, n):
                triangles.append(Triangle(P[i], P[j], P[k], degeneracy_tolerance=tol))
    logger.debug(f"Created {len(triangles)} triangles from {n} points")
    return triangles

# ---------- Clockwise canonical order ----------
def is_clockwise_polygon(polygon):
    return shoelace_sum(polygon) > 0

# visits all 6 permutations of 3 vertices: 132, 312, 321, 231, 213
_SWAP_SEQUENCE = ((1, 2), (0, 1), (1, 2), (0, 1), (1, 2))

def order_clockwise(triangle):
    if is_clockwise_polygon(triangle.vertices):
        return triangle
    for i, j in _SWAP_SEQUENCE:
        triangle.swap_vertices(i, j)
        if is_clockwise_polygon(triangle.vertices):
            return triangle
    raise OrientationError(f"No clockwise vertex order exists for {triangle!r}")
