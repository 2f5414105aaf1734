"""Shared test fixtures."""

from __future__ import annotations

import pytest

from polyimg.config import configure_logging

configure_logging("debug")


RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10">
  <rect x="0" y="0" width="10" height="10" fill="rgb(255, 0, 128)"/>
</svg>'''

STROKED_RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10">
  <rect x="0" y="0" width="10" height="10" fill="none" stroke="#000"/>
</svg>'''

CURVE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M10 80 C 40 10, 65 10, 95 80" fill="none" stroke="red"/>
</svg>'''

# <use> two levels deep: the inner use moves by (5, 7), the outer by (20, 30)
NESTED_USE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" width="100" height="100">
  <defs>
    <rect id="base" x="1" y="2" width="3" height="4" fill="blue"/>
    <g id="wrapper"><use xlink:href="#base" x="5" y="7"/></g>
  </defs>
  <use href="#wrapper" x="20" y="30"/>
</svg>'''

SYMBOL_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <symbol id="icon" viewBox="0 0 10 10">
    <rect width="10" height="10" fill="green"/>
  </symbol>
  <use href="#icon" x="10" y="10" width="20" height="20"/>
</svg>'''

CYCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10">
  <g id="a"><use href="#b"/></g>
  <g id="b"><use href="#a"/></g>
</svg>'''

HIDDEN_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10">
  <g style="display: none"><rect width="5" height="5"/></g>
  <rect width="5" height="5" display="none"/>
  <rect width="2" height="2" fill="red"/>
</svg>'''

MIXED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" width="24" height="24" fill="none" stroke="currentColor" color="#336699">
  <circle cx="12" cy="12" r="10"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
  <line x1="9" y1="9" x2="9.01" y2="9"/>
  <path d="M3 3 L 5 5 X 1 1"/>
</svg>'''


@pytest.fixture
def rect_svg() -> str:
    return RECT_SVG


@pytest.fixture
def curve_svg() -> str:
    return CURVE_SVG


@pytest.fixture
def nested_use_svg() -> str:
    return NESTED_USE_SVG


@pytest.fixture
def mixed_svg() -> str:
    return MIXED_SVG
