from dataclasses import dataclass
from typing import Iterable, Iterator
import math
import numpy as np

from discmesh.exceptions import InvalidGeometry


@dataclass(frozen=True)
class Vector3:

    x: float
    y: float
    z: float

    def __post_init__(self):
        # Store plain floats, never numpy scalars or ints
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector3":
        if isinstance(values, cls):
            return values
        components = [float(v) for v in values]
        if len(components) != 3:
            raise InvalidGeometry(f"Expected 3 components, got {len(components)}.")
        return cls(*components)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> "Vector3":
        return self.scale(factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector3":
        return self.scale(-1.0)

    def scale(self, factor: float) -> "Vector3":
        return Vector3(self.x*factor, self.y*factor, self.z*factor)

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(self.y*other.z - self.z*other.y,
                       self.z*other.x - self.x*other.z,
                       self.x*other.y - self.y*other.x)

    def dot(self, other: "Vector3") -> float:
        return self.x*other.x + self.y*other.y + self.z*other.z

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y, self.z)

    def is_finite(self) -> bool:
        return all(math.isfinite(c) for c in self)

    def normalize(self, length: float = 1.0) -> "Vector3":
        """
        Return a vector with the same direction as self and the given length.

        :param length: target length of the result
        :return: rescaled vector
        """
        largest = max(abs(self.x), abs(self.y), abs(self.z))
        if largest == 0.0:
            raise InvalidGeometry("Can not normalize a zero length vector.")
        # Divide by the largest component first so the length stays finite
        unit = Vector3(self.x/largest, self.y/largest, self.z/largest)
        current = unit.length
        return Vector3(unit.x/current, unit.y/current, unit.z/current).scale(length)

    def is_close(self, other: "Vector3", tol: float = 1.0e-5) -> bool:
        return (abs(self.x - other.x) <= tol
                and abs(self.y - other.y) <= tol
                and abs(self.z - other.z) <= tol)

    def distance(self, other: "Vector3") -> float:
        return (self - other).length

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype='d')


ZERO = Vector3(0.0, 0.0, 0.0)
