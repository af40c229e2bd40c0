"""Colours, shapes and cubes, plus a small generic maximum helper."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class HSLAPixel:
    """A colour in hue/saturation/luminance/alpha form.

    The default pixel is opaque white.
    """

    h: float = 0.0
    s: float = 0.0
    l: float = 1.0  # noqa: E741
    a: float = 1.0

    BLUE: ClassVar[HSLAPixel]
    ORANGE: ClassVar[HSLAPixel]
    YELLOW: ClassVar[HSLAPixel]
    PURPLE: ClassVar[HSLAPixel]


HSLAPixel.BLUE = HSLAPixel(240, 1, 0.5)
HSLAPixel.ORANGE = HSLAPixel(30, 1, 0.5)
HSLAPixel.YELLOW = HSLAPixel(60, 1, 0.5)
HSLAPixel.PURPLE = HSLAPixel(270, 1, 0.5)


@dataclass
class Shape:
    """A generic shape with a width (1 by default)."""

    width: float = 1.0


@dataclass
class Cube(Shape):
    """A coloured cube whose side length is the shape's width."""

    color: HSLAPixel = field(default_factory=HSLAPixel)

    @property
    def length(self) -> float:
        """Side length of the cube."""
        return self.width

    @length.setter
    def length(self, value: float) -> None:
        self.width = value

    def volume(self) -> float:
        """Return the volume of the cube."""
        return self.length * self.length * self.length

    def surface_area(self) -> float:
        """Return the total surface area of the cube."""
        return 6 * self.length * self.length


def my_max(a: T, b: T) -> T:
    """Return ``a`` if it is greater than ``b``, otherwise ``b``."""
    if a > b:  # type: ignore[operator]
        return a
    return b