from math import hypot

import numpy as np
import pytest
from matplotlib.path import Path

from mplpath import to_matplotlib_path
from svgpathconverter import ArcTo, LineTo, convert_path


def test_codes_follow_primitives():
    path = to_matplotlib_path(convert_path("M0,0L10,0Q15,5 20,0C20,10 10,10 10,5Z"))
    assert list(path.codes) == [
        Path.MOVETO,
        Path.LINETO,
        Path.CURVE3, Path.CURVE3,
        Path.CURVE4, Path.CURVE4, Path.CURVE4,
        Path.CLOSEPOLY,
    ]
    assert path.vertices.tolist() == [
        [0, 0], [10, 0], [15, 5], [20, 0], [20, 10], [10, 10], [10, 5], [0, 0],
    ]


def test_close_returns_to_latest_move():
    path = to_matplotlib_path(convert_path("M0,0L1,0ZM5,5L6,5Z"))
    assert path.vertices[-1].tolist() == [5, 5]


def test_arc_is_flattened():
    path = to_matplotlib_path(convert_path("M0,0A5,5 0 0 1 10,0"), arc_density=12)
    assert path.codes[0] == Path.MOVETO
    assert list(path.codes[1:]) == [Path.LINETO] * 11
    assert path.vertices[-1] == pytest.approx(np.array([10, 0]))
    for x, y in path.vertices:
        assert hypot(x - 5, y) == pytest.approx(5)


def test_degenerate_arcs():
    path = to_matplotlib_path(convert_path("M0,0A0,5 0 0 1 10,0A5,5 0 0 1 10,0"))
    assert list(path.codes) == [Path.MOVETO, Path.LINETO]
    assert path.vertices[-1].tolist() == [10, 0]


def test_implicit_move_to_origin():
    path = to_matplotlib_path([LineTo(1, 1)])
    assert list(path.codes) == [Path.MOVETO, Path.LINETO]
    assert path.vertices[0].tolist() == [0, 0]


def test_empty_path():
    assert len(to_matplotlib_path([]).vertices) == 0


def test_rejects_foreign_objects():
    with pytest.raises(TypeError):
        to_matplotlib_path([ArcTo(1, 1, 0, 1, 1, False, False), "L1,1"])
