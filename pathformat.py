#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Path-data normalizer.

Rewrites a path-data string so every argument group is spelled the same way:
commas inside a coordinate pair, single spaces between pairs and scalars,
and one command letter per group. Numeric literals are copied verbatim, so
the result means exactly what the input meant.

    >>> format_path("M10 10 20 20c1 2 3 4 5 6")
    'M10,10M20,20c1,2 3,4 5,6'
"""

import logging

from patherrors import UnsupportedCommandError
from pathtokens import tokenize, argument_groups

logger = logging.getLogger(__name__)


def _pair(x, y):
    return "{},{}".format(x, y)


def _pairs(values):
    return " ".join(_pair(values[i], values[i + 1]) for i in range(0, len(values), 2))


def _arc(values):
    rx, ry, rotation, large, sweep, x, y = values
    return "{} {} {} {} {}".format(_pair(rx, ry), rotation, large, sweep, _pair(x, y))


# Canonical spelling of one argument group, keyed by upper-case command.
FORMATTERS = {
    "M": _pairs,
    "L": _pairs,
    "T": _pairs,
    "C": _pairs,
    "S": _pairs,
    "Q": _pairs,
    "H": "".join,
    "V": "".join,
    "B": "".join,
    "A": _arc,
    "Z": "".join,
}


def format_segment(segment, strict=False):
    """Return the canonical text of a single Segment ('' if it is skipped)."""
    groups = argument_groups(segment)
    if groups is None:
        if strict:
            raise UnsupportedCommandError(
                "unknown command {!r}".format(segment.identifier), segment)
        logger.warning("Dropping unknown command %r", str(segment))
        return ""
    formatter = FORMATTERS[segment.identifier.upper()]
    return "".join(segment.identifier + formatter(values) for values in groups)


def format_path(path_data, strict=False):
    """Normalize the punctuation of a whole path-data string."""
    result = "".join(format_segment(segment, strict) for segment in tokenize(path_data))
    logger.debug("Formatted %r as %r", path_data, result)
    return result
