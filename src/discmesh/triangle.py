from dataclasses import dataclass
from typing import Tuple

from discmesh.color import Color
from discmesh.vector import Vector3


@dataclass(frozen=True)
class Triangle:

    v1: Vector3
    v2: Vector3
    v3: Vector3
    color: Color

    @property
    def vertices(self) -> Tuple[Vector3, Vector3, Vector3]:
        return self.v1, self.v2, self.v3

    @property
    def normal(self) -> Vector3:
        # Not normalized, length is twice the area
        return (self.v2 - self.v1).cross(self.v3 - self.v1)

    @property
    def area(self) -> float:
        return 0.5*self.normal.length

    def is_degenerate(self, tol: float = 1.0e-12) -> bool:
        return (self.v1.is_close(self.v2, tol)
                or self.v2.is_close(self.v3, tol)
                or self.v1.is_close(self.v3, tol)
                or self.area <= tol)

    def as_floats(self) -> Tuple[float, ...]:
        return (*self.v1, *self.v2, *self.v3)
