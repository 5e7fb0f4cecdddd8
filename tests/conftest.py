"""Shared test fixtures."""

from dataclasses import fields

import pytest

from svgpathconverter import SVGPathConverter


# Sample documents and path data

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <circle cx="12" cy="12" r="10"/>
  <path id="mouth" d="M8 14s1.5 2 4 2 4-2 4-2"/>
  <path id="empty" d=""/>
  <g>
    <path id="eye" d="M9 9h.01"/>
  </g>
</svg>'''

HOME_PATH = "M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"

SETTINGS_PATH = (
    "M12.22 2h-.44a2 2 0 0 0-2 2v.18a2 2 0 0 1-1 1.73l-.43.25a2 2 0 0 1-2 0l-.15-.08"
    "a2 2 0 0 0-2.73.73l-.22.38a2 2 0 0 0 .73 2.73l.15.1a2 2 0 0 1 1 1.72v.51"
)


@pytest.fixture
def smiley_svg() -> str:
    return SMILEY_SVG


@pytest.fixture
def converter():
    return SVGPathConverter()


@pytest.fixture
def strict_converter():
    return SVGPathConverter(strict=True)


@pytest.fixture
def assert_primitives():
    """Compare primitive lists: same variants, floats approximately equal."""

    def check(actual, expected):
        assert len(actual) == len(expected), actual
        for got, want in zip(actual, expected):
            assert type(got) is type(want), (got, want)
            for field in fields(want):
                value = getattr(want, field.name)
                if isinstance(value, bool):
                    assert getattr(got, field.name) is value, (got, want)
                else:
                    assert getattr(got, field.name) == pytest.approx(value, abs=1e-9), (got, want)

    return check
