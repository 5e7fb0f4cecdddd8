#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Tokenizer for SVG path data.

A path-data string is cut into segments: one command letter plus the raw
argument text up to the next command letter. Arguments are only read when a
consumer asks for them, through a scanner that knows how many numbers each
command takes, so separators may be any mix of whitespace, a comma, or
nothing at all ("10-5", ".5.5", glued arc flags such as "0010,20").

All patterns are compiled once and never mutated; every call keeps its own
scan position, so the module is safe to use from several threads.
"""

from collections import namedtuple
import re

from patherrors import MalformedInputError, StructuralError

# --- Regular expressions and constants ---
# 'e' and 'E' never start a segment: they belong to number exponents.
SEGMENT_RE = re.compile(r"([A-DF-Za-df-z])([^A-DF-Za-df-z]*)")
NUMBER_RE = re.compile(r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?")
FLAG_RE = re.compile(r"[01]")
WSP_RE = re.compile(r"\s*")
SEPARATOR_RE = re.compile(r"\s*,?\s*")

# Numbers per argument group, keyed by the upper-case command letter.
# B is the non-standard bearing command.
ARITY = {
    "M": 2,
    "L": 2,
    "T": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "A": 7,
    "B": 1,
    "Z": 0,
}

# Group positions that hold a single-character 0/1 flag.
FLAG_POSITIONS = {"A": (3, 4)}

COMMANDS = frozenset(ARITY) | frozenset(c.lower() for c in ARITY)


class Segment(namedtuple("Segment", ["identifier", "arguments"])):
    """One command occurrence: its letter and its unparsed argument text."""
    __slots__ = ()

    @property
    def absolute(self):
        return self.identifier.isupper()

    def __str__(self):
        return self.identifier + self.arguments


def tokenize(path_data):
    """Yield the Segments of `path_data` from left to right."""
    text = path_data.strip()
    if not text:
        return
    if SEGMENT_RE.match(text) is None:
        raise MalformedInputError(
            "path data must start with a command letter, got {!r}".format(text[:16]))
    for match in SEGMENT_RE.finditer(text):
        yield Segment(match.group(1), match.group(2))


def scan_numbers(text, group_size=0, flags=()):
    """
    Read the numeric tokens of an argument string and return their literal
    text. When `group_size` is given, positions listed in `flags` (taken
    modulo the group size) must be a single '0' or '1' character.
    """
    tokens = []
    pos = WSP_RE.match(text).end()
    while pos < len(text):
        index = len(tokens) % group_size if group_size else None
        pattern = FLAG_RE if index in flags else NUMBER_RE
        match = pattern.match(text, pos)
        if match is None:
            expected = "a 0/1 flag" if pattern is FLAG_RE else "a number"
            raise MalformedInputError(
                "expected {} at {!r}".format(expected, text[pos:pos + 16]))
        tokens.append(match.group())
        pos = SEPARATOR_RE.match(text, match.end()).end()
    return tokens


def argument_groups(segment):
    """
    Split the arguments of `segment` into tuples of exactly the size its
    command needs. Returns None for letters outside ARITY.
    """
    key = segment.identifier.upper()
    size = ARITY.get(key)
    if size is None:
        return None
    try:
        tokens = scan_numbers(segment.arguments, size, FLAG_POSITIONS.get(key, ()))
    except MalformedInputError as e:
        raise MalformedInputError(str(e), segment) from e
    if size == 0:
        if tokens:
            raise StructuralError(
                "{} takes no arguments, got {}".format(segment.identifier, len(tokens)), segment)
        return [()]
    if len(tokens) < size or len(tokens) % size:
        raise StructuralError(
            "{} needs groups of {} numbers, got {}".format(segment.identifier, size, len(tokens)),
            segment)
    return [tuple(tokens[i:i + size]) for i in range(0, len(tokens), size)]
