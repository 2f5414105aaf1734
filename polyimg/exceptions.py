"""Conversion error hierarchy.

Fatal errors abort the whole conversion. Non-fatal ones are isolated to the
shape that raised them: the shape is skipped and a warning is recorded.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for every error raised by the conversion pipeline."""

    fatal = True


class SvgParseError(ConversionError):
    """The source document is not well-formed SVG."""


class UnresolvedReference(ConversionError):
    """A <use> element points at a missing target or forms a cycle."""

    def __init__(self, href: str, reason: str = "missing target") -> None:
        self.href = href
        self.reason = reason
        super().__init__(f"Unresolved reference {href!r}: {reason}")


class ResourceLimitExceeded(ConversionError):
    """Reference expansion produced more nodes than the configured budget."""


class RangeExceeded(ConversionError):
    """Integer encoding was asked to pack values outside the signed 32-bit range."""

    def __init__(self, minimum: float, maximum: float) -> None:
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"Values [{minimum}, {maximum}] exceed the signed 32-bit range")


class UnsupportedPathCommand(ConversionError):
    """A path command outside {move, line, cubic curve, close}."""

    fatal = False


class InvalidShapeData(ConversionError):
    """Malformed geometry attributes on a single shape."""

    fatal = False


class EmptyGeometry(ConversionError):
    """The shape produced no usable subpaths. Not reported as an error."""

    fatal = False
