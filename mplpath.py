#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Hand converted primitives to matplotlib.

matplotlib's Path has native codes for moves, lines, quadratic and cubic
Beziers and closepath. It has no elliptical arc, so arcs are flattened into
line vertices sampled along the center-parameterized ellipse.
"""

from math import sin, cos, radians

import numpy as np
from matplotlib.path import Path

from pathgeometry import Point, ORIGIN, endpoint_to_center
from svgpathconverter import (
    MoveTo, LineTo, CubicCurveTo, QuadCurveTo, ArcTo, ClosePath,
)


def sample_arc(start, arc, density):
    """Return `density` points along `arc` (an ArcTo) starting at `start`."""
    end = Point(arc.x, arc.y)
    rx, ry, center, theta1, theta2 = endpoint_to_center(
        start, arc.rx, arc.ry, arc.rotation, arc.large_arc, arc.sweep, end)
    rot = radians(arc.rotation)
    points = []
    for t in np.linspace(radians(theta1), radians(theta2), density):
        x_prim = rx * cos(t)
        y_prim = ry * sin(t)
        points.append(Point(center.x + cos(rot) * x_prim - sin(rot) * y_prim,
                            center.y + sin(rot) * x_prim + cos(rot) * y_prim))
    return points


def to_matplotlib_path(primitives, arc_density=20):
    """Build a matplotlib Path from a sequence of drawing primitives."""
    vertices = []
    codes = []
    current = ORIGIN
    subpath_start = ORIGIN

    for element in primitives:
        if not codes and not isinstance(element, MoveTo):
            vertices.append(ORIGIN)
            codes.append(Path.MOVETO)

        if isinstance(element, MoveTo):
            current = subpath_start = Point(element.x, element.y)
            vertices.append(current)
            codes.append(Path.MOVETO)
        elif isinstance(element, LineTo):
            current = Point(element.x, element.y)
            vertices.append(current)
            codes.append(Path.LINETO)
        elif isinstance(element, CubicCurveTo):
            current = Point(element.x, element.y)
            vertices.extend([(element.c1x, element.c1y), (element.c2x, element.c2y), current])
            codes.extend([Path.CURVE4] * 3)
        elif isinstance(element, QuadCurveTo):
            current = Point(element.x, element.y)
            vertices.extend([(element.cx, element.cy), current])
            codes.extend([Path.CURVE3] * 2)
        elif isinstance(element, ArcTo):
            end = Point(element.x, element.y)
            if end == current:
                continue
            if element.rx == 0 or element.ry == 0:
                points = [end]
            else:
                points = sample_arc(current, element, arc_density)[1:]
            vertices.extend(points)
            codes.extend([Path.LINETO] * len(points))
            current = end
        elif isinstance(element, ClosePath):
            vertices.append(subpath_start)
            codes.append(Path.CLOSEPOLY)
            current = subpath_start
        else:
            raise TypeError("not a drawing primitive: {!r}".format(element))

    if not codes:
        return Path(np.empty((0, 2)))
    return Path(np.array(vertices, dtype=float), codes)
