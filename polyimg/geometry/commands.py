"""Normalized path commands: move, line, cubic curve and close."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Point = tuple[float, float]


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


@dataclass(frozen=True)
class CurveTo:
    control1: Point
    control2: Point
    end: Point


@dataclass(frozen=True)
class ClosePath:
    pass


PathCommand = Union[MoveTo, LineTo, CurveTo, ClosePath]


def command_points(command: PathCommand) -> list[Point]:
    """Coordinates carried by a command, in argument order."""
    if isinstance(command, (MoveTo, LineTo)):
        return [command.point]
    if isinstance(command, CurveTo):
        return [command.control1, command.control2, command.end]
    return []
