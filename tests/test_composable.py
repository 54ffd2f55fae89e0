import pytest

from chartcraft.composable import BoxedElement, ComposedElement, EmptyElement
from chartcraft.shapes import Circle, Pixel
from chartcraft.style import BLUE, GREEN, RED


class Recorder:
    def __init__(self):
        self.calls = []

    def draw_pixel(self, point, color):
        self.calls.append(("pixel", point, color))

    def draw_circle(self, center, radius, style, fill):
        self.calls.append(("circle", center, radius, fill))


def test_empty_element_draws_nothing():
    backend = Recorder()
    empty = EmptyElement((10, 20))
    empty.draw(empty.points(), backend, (100, 100))
    assert backend.calls == []
    assert empty.points() == [(10, 20)]


def test_boxed_element_shifts_inner():
    element = EmptyElement((10, 20)) + Circle((1, 2), 3, RED)
    assert isinstance(element, BoxedElement)
    assert element.points() == [(10, 20)]
    backend = Recorder()
    element.draw(element.points(), backend, (100, 100))
    assert backend.calls == [("circle", (10 + 1, 20 + 2), 3, False)]


def test_chain_draws_all_components_in_order():
    element = (
        EmptyElement((10, 20))
        + Pixel((1, 2), RED)
        + Pixel((3, 4), BLUE)
        + Pixel((5, 6), GREEN)
    )
    assert isinstance(element, ComposedElement)
    assert isinstance(element.second, ComposedElement)
    assert element.second.offset == (0, 0)
    backend = Recorder()
    element.draw(element.points(), backend, (100, 100))
    assert backend.calls == [
        ("pixel", (10 + 1, 20 + 2), RED.to_rgba()),
        ("pixel", (10 + 3, 20 + 4), BLUE.to_rgba()),
        ("pixel", (10 + 5, 20 + 6), GREEN.to_rgba()),
    ]


def test_composed_uses_mapped_anchor():
    element = EmptyElement(("guest", 0.5)) + Pixel((1, 1), RED) + Pixel((2, 2), RED)
    backend = Recorder()
    element.draw([(100, 200)], backend, (300, 300))
    assert [call[1] for call in backend.calls] == [(100 + 1, 200 + 1), (100 + 2, 200 + 2)]


def test_composed_without_anchor_draws_nothing():
    element = EmptyElement((0, 0)) + Pixel((1, 1), RED) + Pixel((2, 2), RED)
    backend = Recorder()
    element.draw([], backend, (10, 10))
    assert backend.calls == []


def test_adding_non_element_raises():
    with pytest.raises(TypeError):
        EmptyElement((0, 0)) + 5
    with pytest.raises(TypeError):
        EmptyElement((0, 0)) + Pixel((0, 0), RED) + "text"