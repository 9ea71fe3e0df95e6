from dataclasses import dataclass
from typing import Iterator, Sequence, Union

from discmesh.exceptions import InvalidGeometry


@dataclass(frozen=True)
class Color:
    """Normalized RGB color, every channel in [0, 1]."""

    r: float
    g: float
    b: float

    def __post_init__(self):
        for name in ("r", "g", "b"):
            value = float(getattr(self, name))
            if not 0.0 <= value <= 1.0:
                raise InvalidGeometry(f"Color channel {name}={value} not in [0, 1].")
            object.__setattr__(self, name, value)

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int) -> "Color":
        try:
            channels = [float(c) for c in (r, g, b)]
        except (TypeError, ValueError) as err:
            raise InvalidGeometry(f"8-bit color channels must be numbers, got {(r, g, b)!r}.") from err
        for channel in channels:
            if not 0 <= channel <= 255:
                raise InvalidGeometry(f"8-bit color channel {channel} not in [0, 255].")
        return cls(*(c/255 for c in channels))

    @classmethod
    def coerce(cls, value: Union["Color", Sequence[int]]) -> "Color":
        if isinstance(value, cls):
            return value
        try:
            size = len(value)
        except TypeError as err:
            raise InvalidGeometry(f"Expected an (r, g, b) triple, got {value!r}.") from err
        if size != 3:
            raise InvalidGeometry(f"Expected an (r, g, b) triple, got {value!r}.")
        return cls.from_rgb8(*value)

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
