#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Plane geometry helpers shared by the path interpreter and the backend adapter.

Points are immutable (x, y) pairs. Rotation uses the usual 2D rotation matrix
around an arbitrary pivot; reflection through a point is the 180 degree case.
"""

from collections import namedtuple
from math import sin, cos, sqrt, degrees, radians, acos

import numpy as np

Point = namedtuple("Point", ["x", "y"])

ORIGIN = Point(0.0, 0.0)


def rotate_point(point, pivot, angle):
    """Rotate `point` about `pivot` by `angle` degrees (counter-clockwise in
    a y-up frame, clockwise on screen)."""
    rad = radians(angle)
    s = sin(rad)
    c = cos(rad)
    dx = point.x - pivot.x
    dy = point.y - pivot.y
    return Point(pivot.x + dx * c - dy * s,
                 pivot.y + dx * s + dy * c)


def reflect_point(point, pivot):
    """Mirror `point` through `pivot`."""
    return rotate_point(point, pivot, 180.0)


# -----------------------------------------------------------
# Arc conversion (endpoint to center parameterization)
# -----------------------------------------------------------
def endpoint_to_center(start, rx, ry, rotation, large, sweep, end):
    """
    Convert an SVG endpoint arc into its center form.

    Returns (rx, ry, center, theta1, theta2) with the angles in degrees.
    Radii too small to span the chord are scaled up as SVG requires.
    The caller must handle the degenerate cases (start == end, zero radius).
    """
    cosr = cos(radians(rotation))
    sinr = sin(radians(rotation))
    dx = (start.x - end.x) / 2
    dy = (start.y - end.y) / 2
    x1prim = cosr * dx + sinr * dy
    y1prim = -sinr * dx + cosr * dy
    x1prim_sq = x1prim * x1prim
    y1prim_sq = y1prim * y1prim

    rx = abs(rx)
    ry = abs(ry)
    rx_sq = rx * rx
    ry_sq = ry * ry

    radius_scale = (x1prim_sq / rx_sq) + (y1prim_sq / ry_sq)
    if radius_scale > 1:
        radius_scale = sqrt(radius_scale)
        rx *= radius_scale
        ry *= radius_scale
        rx_sq = rx * rx
        ry_sq = ry * ry

    t1 = rx_sq * y1prim_sq
    t2 = ry_sq * x1prim_sq
    c = sqrt(abs((rx_sq * ry_sq - t1 - t2) / (t1 + t2)))
    if large == sweep:
        c = -c
    cxprim = c * rx * y1prim / ry
    cyprim = -c * ry * x1prim / rx

    center = Point(
        (cosr * cxprim - sinr * cyprim) + ((start.x + end.x) / 2),
        (sinr * cxprim + cosr * cyprim) + ((start.y + end.y) / 2)
    )

    ux = (x1prim - cxprim) / rx
    uy = (y1prim - cyprim) / ry
    vx = (-x1prim - cxprim) / rx
    vy = (-y1prim - cyprim) / ry
    n = sqrt(ux * ux + uy * uy)
    theta = degrees(acos(np.clip(ux / n, -1.0, 1.0)))
    if uy < 0:
        theta = -theta
    theta = theta % 360

    n = sqrt((ux * ux + uy * uy) * (vx * vx + vy * vy))
    p = ux * vx + uy * vy
    delta = degrees(acos(np.clip(p / n, -1.0, 1.0)))
    if (ux * vy - uy * vx) < 0:
        delta = -delta
    delta = delta % 360
    if not sweep and delta > 0:
        delta -= 360

    return rx, ry, center, theta, theta + delta
