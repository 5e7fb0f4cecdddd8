#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
SVG Path Converter

This module reads an SVG path definition (the d attribute of a <path>
element, plus the non-standard B/b "bearing" commands) and either

  * rewrites it with canonical punctuation (SVGPathConverter.format), or
  * resolves it into a list of absolute drawing primitives
    (SVGPathConverter.convert): MoveTo, LineTo, CubicCurveTo, QuadCurveTo,
    ArcTo and ClosePath.

The interpreter is a fold over the argument groups of the path with an
explicit CursorState: the current point, the last control point used by the
smooth S/s and T/t commands, and the bearing applied to relative horizontal
lines. A fresh state is created for every conversion.

Behaviour worth knowing:
  * the bearing only rotates h, never v or any other relative command;
  * Z/z does not move the current point back to the subpath start;
  * a smooth command after a non-curve command reflects whatever control
    point the last curve left behind;
  * unknown command letters are skipped (logged) unless strict=True.
"""

from dataclasses import dataclass
import logging

from patherrors import UnsupportedCommandError
from pathformat import format_path
from pathgeometry import Point, ORIGIN, rotate_point, reflect_point
from pathtokens import tokenize, argument_groups

logger = logging.getLogger(__name__)


# -----------------------------------------------------------
# Drawing primitives
# -----------------------------------------------------------
@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class CubicCurveTo:
    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float


@dataclass(frozen=True)
class QuadCurveTo:
    cx: float
    cy: float
    x: float
    y: float


@dataclass(frozen=True)
class ArcTo:
    rx: float
    ry: float
    rotation: float
    x: float
    y: float
    large_arc: bool
    sweep: bool


@dataclass(frozen=True)
class ClosePath:
    pass


@dataclass
class CursorState:
    current_point: Point = ORIGIN
    last_control_point: Point = ORIGIN
    bearing: float = 0.0
    last_bearing: float = 0.0


# -----------------------------------------------------------
# Interpreter
# -----------------------------------------------------------
def _resolve(state, x, y, absolute):
    if absolute:
        return Point(x, y)
    return Point(state.current_point.x + x, state.current_point.y + y)


def advance(state, identifier, values):
    """
    Apply one argument group of command `identifier` to `state`.

    `values` are the literal tokens of the group (see pathtokens). Returns
    the emitted primitive, or None for bearing commands.
    """
    command = identifier.upper()
    absolute = identifier.isupper()
    numbers = [float(v) for v in values]
    current = state.current_point

    if command == 'M':
        state.current_point = _resolve(state, numbers[0], numbers[1], absolute)
        return MoveTo(*state.current_point)
    elif command == 'L':
        state.current_point = _resolve(state, numbers[0], numbers[1], absolute)
        return LineTo(*state.current_point)
    elif command == 'H':
        if absolute:
            pos = Point(numbers[0], current.y)
        else:
            pos = Point(current.x + numbers[0], current.y)
            if state.bearing != 0:
                pos = rotate_point(pos, current, state.bearing)
        state.current_point = pos
        return LineTo(*pos)
    elif command == 'V':
        pos = Point(current.x, numbers[0] if absolute else current.y + numbers[0])
        state.current_point = pos
        return LineTo(*pos)
    elif command == 'C':
        control1 = _resolve(state, numbers[0], numbers[1], absolute)
        control2 = _resolve(state, numbers[2], numbers[3], absolute)
        end = _resolve(state, numbers[4], numbers[5], absolute)
        state.last_control_point = control2
        state.current_point = end
        return CubicCurveTo(control1.x, control1.y, control2.x, control2.y, end.x, end.y)
    elif command == 'S':
        control1 = reflect_point(state.last_control_point, current)
        control2 = _resolve(state, numbers[0], numbers[1], absolute)
        end = _resolve(state, numbers[2], numbers[3], absolute)
        state.last_control_point = control2
        state.current_point = end
        return CubicCurveTo(control1.x, control1.y, control2.x, control2.y, end.x, end.y)
    elif command == 'Q':
        control = _resolve(state, numbers[0], numbers[1], absolute)
        end = _resolve(state, numbers[2], numbers[3], absolute)
        state.last_control_point = control
        state.current_point = end
        return QuadCurveTo(control.x, control.y, end.x, end.y)
    elif command == 'T':
        control = reflect_point(state.last_control_point, current)
        end = _resolve(state, numbers[0], numbers[1], absolute)
        state.last_control_point = control
        state.current_point = end
        return QuadCurveTo(control.x, control.y, end.x, end.y)
    elif command == 'A':
        # radii and rotation are never relative
        end = _resolve(state, numbers[5], numbers[6], absolute)
        state.current_point = end
        return ArcTo(numbers[0], numbers[1], numbers[2], end.x, end.y,
                     values[3] == '1', values[4] == '1')
    elif command == 'B':
        if absolute:
            state.bearing = numbers[0]
        else:
            state.bearing = (state.last_bearing + numbers[0]) % 360.0
        state.last_bearing = state.bearing
        return None
    elif command == 'Z':
        return ClosePath()
    else:
        raise UnsupportedCommandError("unknown command {!r}".format(identifier))


def iter_primitives(path_data, state, strict=False):
    """Generator that yields the primitives of `path_data`, updating `state`."""
    for segment in tokenize(path_data):
        groups = argument_groups(segment)
        if groups is None:
            if strict:
                raise UnsupportedCommandError(
                    "unknown command {!r}".format(segment.identifier), segment)
            logger.warning("Skipping unknown command %r", str(segment))
            continue
        for values in groups:
            primitive = advance(state, segment.identifier, values)
            logger.debug("%s%s -> %s", segment.identifier, values, primitive)
            if primitive is not None:
                yield primitive


def convert_path(path_data, strict=False):
    """
    Resolve `path_data` into a list of absolute drawing primitives.
    Any error aborts the whole conversion.
    """
    return list(iter_primitives(path_data, CursorState(), strict))


# -----------------------------------------------------------
# The SVGPathConverter class (wrapper around format_path/convert_path)
# -----------------------------------------------------------
class SVGPathConverter:
    def __init__(self, strict=False):
        """
        strict: raise UnsupportedCommandError on unknown command letters
        instead of skipping them.
        """
        self.strict = strict

    def format(self, path_data):
        return format_path(path_data, self.strict)

    def convert(self, path_data):
        return convert_path(path_data, self.strict)


# -----------------------------------------------------------
# Example usage (for testing the module directly)
# -----------------------------------------------------------
if __name__ == '__main__':
    example_path = (
        "M 100 100 L 200 100 C 250 100 250 200 200 200 "
        "S 150 300 100 200 Z "
        "M 300 300 B 45 h 50 A 50 50 0 0 1 350 350"
    )
    converter = SVGPathConverter()
    print(converter.format(example_path))
    for element in converter.convert(example_path):
        print(element)
