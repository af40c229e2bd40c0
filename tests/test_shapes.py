import pytest

from lecturetrees.shapes import Cube, HSLAPixel, Shape, my_max


def test_default_pixel_is_opaque_white():
    pixel = HSLAPixel()
    assert (pixel.h, pixel.s, pixel.l, pixel.a) == (0, 0, 1.0, 1.0)


def test_three_argument_pixel_is_opaque():
    pixel = HSLAPixel(120, 0.25, 0.75)
    assert pixel.a == 1.0
    assert (pixel.h, pixel.s, pixel.l) == (120, 0.25, 0.75)


@pytest.mark.parametrize(
    "pixel, hue",
    [
        (HSLAPixel.BLUE, 240),
        (HSLAPixel.ORANGE, 30),
        (HSLAPixel.YELLOW, 60),
        (HSLAPixel.PURPLE, 270),
    ],
)
def test_named_colours(pixel, hue):
    assert pixel == HSLAPixel(hue, 1, 0.5)


def test_shape_default_width():
    assert Shape().width == 1
    assert Shape(7.5).width == 7.5


def test_cube_defaults_and_colour():
    cube = Cube(4, HSLAPixel.PURPLE)
    assert cube.length == 4
    assert cube.color == HSLAPixel.PURPLE
    assert Cube().length == 1
    assert Cube().color == HSLAPixel()


def test_cube_is_a_shape():
    cube = Cube(3)
    assert isinstance(cube, Shape)
    assert cube.width == cube.length == 3


def test_cube_volume_and_surface_area():
    cube = Cube(2)
    assert cube.volume() == 8
    assert cube.surface_area() == 24


def test_set_length_changes_measurements():
    cube = Cube(5)
    cube.length = 2
    assert cube.width == 2
    assert cube.volume() == Cube(2).volume()
    assert cube.surface_area() == Cube(2).surface_area()


def test_unit_cube_volume_equals_length():
    assert Cube().volume() == Cube().length


@pytest.mark.parametrize(
    "a, b, expected",
    [(3, 5, 5), ("a", "d", "d"), ("Hello", "World", "World"), (9, 2, 9)],
)
def test_my_max(a, b, expected):
    assert my_max(a, b) == expected


def test_my_max_ties_return_second():
    first, second = [1], [1]
    assert my_max(first, second) is second