#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Errors raised while reading SVG path data.

All of them derive from ValueError so callers that only care about
"bad path string" can keep catching ValueError.
"""


class PathDataError(ValueError):
    """Base class for every path-data problem."""

    def __init__(self, message, segment=None):
        if segment is not None:
            message = "{} (in segment {!r})".format(message, str(segment))
        super().__init__(message)
        self.segment = segment


class MalformedInputError(PathDataError):
    """Text that does not scan: stray leading text or a bad numeric token."""


class StructuralError(PathDataError):
    """A command with the wrong number of arguments."""


class UnsupportedCommandError(PathDataError):
    """A command letter outside the supported set (strict mode only)."""
