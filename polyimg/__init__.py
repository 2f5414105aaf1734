"""polyimg: convert SVG drawings into compact polygon images for small displays.

Example:
    >>> from polyimg import convert_svg
    >>> result = convert_svg(svg_text, tolerance=0.5, numberFormat="int")
    >>> print(result.text)
"""

from polyimg.api import ConversionResult, convert_svg, convert_tree
from polyimg.exceptions import (
    ConversionError,
    EmptyGeometry,
    InvalidShapeData,
    RangeExceeded,
    ResourceLimitExceeded,
    SvgParseError,
    UnresolvedReference,
    UnsupportedPathCommand,
)
from polyimg.models.options import ConversionOptions

__version__ = "0.1.0"

__all__ = [
    # Main API
    "convert_svg",
    "convert_tree",
    "ConversionResult",
    "ConversionOptions",
    # Exceptions
    "ConversionError",
    "SvgParseError",
    "UnresolvedReference",
    "ResourceLimitExceeded",
    "RangeExceeded",
    "UnsupportedPathCommand",
    "InvalidShapeData",
    "EmptyGeometry",
]
