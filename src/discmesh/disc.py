from logging import getLogger
from typing import Optional, Sequence, Tuple, Union
import math
import operator
import numpy as np

import discmesh
from discmesh.color import Color
from discmesh.exceptions import InvalidGeometry
from discmesh.triangle import Triangle
from discmesh.vector import Vector3, ZERO

DEFAULT_RADIUS = 1.0
DEFAULT_NORMAL = (0.0, 0.0, 1.0)
DEFAULT_SEGMENTS = 120
MIN_SEGMENTS = 3
PARALLEL_TOLERANCE = 1.0e-5

_SEED = Vector3(1.0, 0.0, 1.0)
_FALLBACK_SEED = Vector3(0.0, 1.0, 1.0)

VectorLike = Union[Vector3, Sequence[float]]


def _check_radius(radius: float) -> float:
    radius = float(radius)
    if not math.isfinite(radius) or radius <= 0.0:
        raise InvalidGeometry(f"Radius must be a positive number, got {radius}.")
    return radius


def plane_basis(normal: Vector3, radius: float) -> Tuple[Vector3, Vector3]:
    """
    Construct two orthogonal vectors spanning the plane orthogonal to normal.

    The normal does not need unit length, it is normalized before use so the
    parallel test does not depend on its magnitude. The first vector is the
    cross product of the normal with the seed (1, 0, 1), or with (0, 1, 1) if
    the normal is parallel to the first seed. The second vector is the cross
    product of the normal with the first one.

    :param normal: non-zero vector orthogonal to the plane
    :param radius: length of both result vectors
    :return: tuple (v1, v2)
    """
    radius = _check_radius(radius)
    if not normal.is_finite() or normal.length == 0.0:
        raise InvalidGeometry(f"Normal must be a finite non-zero vector, got {tuple(normal)}.")
    unit = normal.normalize()
    v1 = unit.cross(_SEED)
    if v1.is_close(ZERO, PARALLEL_TOLERANCE):
        v1 = unit.cross(_FALLBACK_SEED)
    v2 = unit.cross(v1)
    return v1.normalize(radius), v2.normalize(radius)


def disc_vertices(*,
                  center: Vector3,
                  basis: Tuple[Vector3, Vector3],
                  radius: float,
                  segments: int) -> Tuple[Vector3, ...]:
    """Center followed by segments boundary points, boundary point i+1 at angle i*2pi/segments."""
    v1, v2 = basis
    dt = 2*math.pi/segments
    vertices = [center]
    for i in range(segments):
        t = i*dt
        p = v1*math.cos(t) + v2*math.sin(t)
        # Remove drift from the trig evaluation
        vertices.append(p.normalize(radius) + center)
    return tuple(vertices)


def fan_faces(vertices: Sequence[Vector3], color: Color) -> Tuple[Triangle, ...]:
    n = len(vertices) - 1
    center = vertices[0]
    faces = [Triangle(vertices[i], center, vertices[i + 1], color) for i in range(1, n)]
    faces.append(Triangle(vertices[n], center, vertices[1], color))
    return tuple(faces)


class DiscMesh:
    """
    Triangle fan approximating a disc embedded in 3D space.

    Vertex 0 is the center, vertices 1..N are the boundary points in increasing
    angular order, and face i-1 is (vertex i, center, vertex i+1) with the last
    face closing the fan. All data is computed on construction and never
    changes afterwards.
    """

    def __init__(self, *,
                 center: VectorLike,
                 color: Union[Color, Sequence[int]],
                 radius: float = DEFAULT_RADIUS,
                 normal: VectorLike = DEFAULT_NORMAL,
                 segments: int = DEFAULT_SEGMENTS,
                 max_segments: Optional[int] = None) -> None:
        self._center = Vector3.from_iterable(center)
        if not self._center.is_finite():
            raise InvalidGeometry(f"Center must be finite, got {tuple(self._center)}.")
        self._radius = _check_radius(radius)
        self._normal = Vector3.from_iterable(normal)
        self._color = Color.coerce(color)
        self._segments = self._check_segments(segments, max_segments)

        logger = getLogger()
        logger.debug(f"Meshing disc: center={tuple(self._center)}, radius={self._radius}, "
                     f"normal={tuple(self._normal)}, segments={self._segments}")

        basis = plane_basis(self._normal, self._radius)
        self._vertices = disc_vertices(center=self._center,
                                       basis=basis,
                                       radius=self._radius,
                                       segments=self._segments)
        self._faces = fan_faces(self._vertices, self._color)
        self._flat_floats: Optional[np.ndarray] = None

    @staticmethod
    def _check_segments(segments: int, max_segments: Optional[int]) -> int:
        try:
            segments = operator.index(segments)
        except TypeError as err:
            raise InvalidGeometry(f"Segment count must be an integer, got {segments!r}.") from err
        if max_segments is None:
            max_segments = discmesh.max_segments
        if segments < MIN_SEGMENTS:
            raise InvalidGeometry(f"Segment count must be at least {MIN_SEGMENTS}, got {segments}.")
        if segments > max_segments:
            raise InvalidGeometry(f"Segment count {segments} exceeds the maximum {max_segments}.")
        return segments

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(center={tuple(self._center)}, radius={self._radius}, "
                f"normal={tuple(self._normal)}, segments={self._segments})")

    @property
    def center(self) -> Vector3:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def normal(self) -> Vector3:
        return self._normal

    @property
    def unit_normal(self) -> Vector3:
        return self._normal.normalize()

    @property
    def color(self) -> Color:
        return self._color

    @property
    def segments(self) -> int:
        return self._segments

    @property
    def vertices(self) -> Tuple[Vector3, ...]:
        return self._vertices

    @property
    def faces(self) -> Tuple[Triangle, ...]:
        return self._faces

    def faces_as_flat_floats(self) -> np.ndarray:
        """
        Faces as one flat float32 buffer, nine values per triangle.

        :return: read-only array of length 9*segments
        """
        if self._flat_floats is None:
            array = np.array([f.as_floats() for f in self._faces], dtype=np.float32).reshape(-1)
            array.flags.writeable = False
            self._flat_floats = array
        return self._flat_floats

    @property
    def num_points(self) -> int:
        return len(self._vertices)

    @property
    def num_edges(self) -> int:
        # One spoke and one rim edge per segment
        return 2*self._segments

    @property
    def num_faces(self) -> int:
        return len(self._faces)

    @property
    def characteristic(self) -> int:
        return self.num_points - self.num_edges + self.num_faces

    @property
    def points(self) -> np.ndarray:
        array = np.array([tuple(v) for v in self._vertices], dtype='d')
        array.flags.writeable = False
        return array

    @property
    def face_indices(self) -> np.ndarray:
        n = self._segments
        first = np.arange(1, n + 1)
        array = np.column_stack([first, np.zeros(n, dtype=int), first % n + 1])
        array.flags.writeable = False
        return array

    @property
    def cell_centers(self) -> np.ndarray:
        return self.points[self.face_indices].mean(axis=1)

    @property
    def colors(self) -> np.ndarray:
        colors = np.empty((self._segments, 3))
        colors[:] = tuple(self._color)
        return colors

    def area(self) -> float:
        return sum(f.area for f in self._faces)
