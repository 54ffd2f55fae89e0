import pytest

from chartcraft.bars import (
    CandleStick,
    ErrorBar,
    ErrorBarOrient,
    error_bar_horizontal,
    error_bar_vertical,
)
from chartcraft.style import GREEN, RED


class Recorder:
    def __init__(self):
        self.calls = []

    def draw_line(self, start, end, color):
        self.calls.append(("line", start, end, color))

    def draw_rect(self, upper, lower, style, fill):
        self.calls.append(("rect", upper, lower, style, fill))

    def draw_circle(self, center, radius, style, fill):
        self.calls.append(("circle", center, radius, style, fill))


def test_candlestick_gain_uses_gain_style():
    stick = CandleStick(50, 30, 10, 60, 40, GREEN, RED, 7)
    backend = Recorder()
    stick.draw(stick.points(), backend, (100, 100))
    kinds = [call[0] for call in backend.calls]
    assert kinds == ["line", "line", "rect"]
    assert backend.calls[0][1:3] == ((50, 30), (50, 10))
    assert backend.calls[1][1:3] == ((50, 60), (50, 40))
    _, upper, lower, color, fill = backend.calls[2]
    assert color == GREEN.to_rgba()
    assert fill is False
    assert lower[0] - upper[0] == 7
    assert (upper[1], lower[1]) == (30, 40)


def test_candlestick_loss_swaps_open_and_close():
    stick = CandleStick(50, 40, 10, 60, 30, GREEN, RED, 6)
    backend = Recorder()
    stick.draw(stick.points(), backend, (100, 100))
    assert backend.calls[0][1:3] == ((50, 30), (50, 10))
    assert backend.calls[1][1:3] == ((50, 60), (50, 40))
    _, upper, lower, color, _ = backend.calls[2]
    assert color == RED.to_rgba()
    assert (upper[1], lower[1]) == (30, 40)
    assert lower[0] - upper[0] == 6


def test_candlestick_points_and_short_input():
    stick = CandleStick("d", 1, 2, 0, 1, GREEN, RED, 4)
    assert stick.points() == [("d", 1), ("d", 2), ("d", 0), ("d", 1)]
    assert stick.style.color == RED.to_rgba()
    backend = Recorder()
    stick.draw([(1, 1), (2, 2)], backend, (10, 10))
    assert backend.calls == []


def test_error_bar_points_by_orientation():
    assert error_bar_vertical(5, 1, 2, 3, RED, 4).points() == [(5, 1), (5, 2), (5, 3)]
    assert error_bar_horizontal(5, 1, 2, 3, RED, 4).points() == [(1, 5), (2, 5), (3, 5)]


def test_vertical_error_bar_draw():
    bar = error_bar_vertical(50, 10, 20, 30, RED, 8)
    backend = Recorder()
    bar.draw(bar.points(), backend, (100, 100))
    half = 8 // 2
    assert backend.calls == [
        ("line", (50 - half, 10), (50 + half, 10), RED.to_rgba()),
        ("line", (50 - half, 30), (50 + half, 30), RED.to_rgba()),
        ("line", (50, 10), (50, 30), RED.to_rgba()),
        ("circle", (50, 20), half, RED.to_rgba(), False),
    ]


def test_horizontal_caps_are_vertical():
    start, end = ErrorBarOrient.HORIZONTAL.ending_coord((10, 20), 7)
    assert start[0] == end[0] == 10
    assert end[1] - start[1] == 2 * (7 // 2)
    start, end = ErrorBarOrient.VERTICAL.ending_coord((10, 20), 7)
    assert start[1] == end[1] == 20


def test_error_bar_needs_three_points():
    bar = error_bar_vertical(0, 1, 2, 3, RED, 2)
    with pytest.raises(ValueError):
        bar.draw([(0, 1)], Recorder(), (10, 10))
    with pytest.raises(ValueError):
        ErrorBar(0, (1, 2), RED, 2)