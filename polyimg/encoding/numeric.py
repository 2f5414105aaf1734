"""Compact numeric encoding of coordinate lists.

Integers are packed at the narrowest width that holds every value; floats are
packed as float32. Both produce little-endian bytes tagged with an explicit
ElementType, plus a JavaScript expression that rebuilds the typed array on the
device from base64.
"""

from __future__ import annotations

import base64
import enum
import json
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from polyimg.exceptions import RangeExceeded


class ElementType(enum.Enum):
    """Typed-array element types, in narrowest-first search order for integers."""

    UINT8 = ("Uint8Array", "<u1", 0, 255)
    INT8 = ("Int8Array", "<i1", -128, 127)
    UINT16 = ("Uint16Array", "<u2", 0, 65535)
    INT16 = ("Int16Array", "<i2", -32768, 32767)
    UINT32 = ("Uint32Array", "<u4", 0, 4294967295)
    INT32 = ("Int32Array", "<i4", -2147483648, 2147483647)
    FLOAT32 = ("Float32Array", "<f4", None, None)

    def __init__(self, js_name: str, dtype: str, minimum: int | None, maximum: int | None) -> None:
        self.js_name = js_name
        self.dtype = np.dtype(dtype)
        self.minimum = minimum
        self.maximum = maximum

    @property
    def is_integer(self) -> bool:
        return self.minimum is not None

    def holds(self, low: float, high: float) -> bool:
        return self.is_integer and self.minimum <= low and high <= self.maximum


INTEGER_TYPES = [t for t in ElementType if t.is_integer]


@dataclass(frozen=True)
class EncodedBuffer:
    data: bytes
    element_type: ElementType

    def __len__(self) -> int:
        return len(self.data) // self.element_type.dtype.itemsize

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    def to_expression(self) -> str:
        """Expression that reconstructs the same typed array on an Espruino device."""
        return f'new {self.element_type.js_name}(E.toArrayBuffer(atob("{self.to_base64()}")))'

    def decode(self) -> NDArray:
        return np.frombuffer(self.data, dtype=self.element_type.dtype)


def round_half_up(values: Sequence[float] | NDArray[np.float64]) -> NDArray[np.float64]:
    """JavaScript Math.round semantics: halves round toward +infinity."""
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5)


def pick_integer_type(low: float, high: float) -> ElementType:
    for element_type in INTEGER_TYPES:
        if element_type.holds(low, high):
            return element_type
    raise RangeExceeded(low, high)


def encode_ints(values: Sequence[float] | NDArray[np.float64]) -> EncodedBuffer:
    rounded = round_half_up(values)
    if rounded.size == 0:
        return EncodedBuffer(b"", ElementType.UINT8)
    element_type = pick_integer_type(float(rounded.min()), float(rounded.max()))
    return EncodedBuffer(rounded.astype(element_type.dtype).tobytes(), element_type)


def encode_floats(values: Sequence[float] | NDArray[np.float64]) -> EncodedBuffer:
    data = np.asarray(values, dtype=np.float64).astype(ElementType.FLOAT32.dtype).tobytes()
    return EncodedBuffer(data, ElementType.FLOAT32)


def encode_decimal(values: Sequence[float] | NDArray[np.float64]) -> str:
    """Plain decimal list, each value rounded to 3 places."""
    rounded = []
    for v in np.asarray(values, dtype=np.float64).reshape(-1):
        r = round(float(v), 3)
        rounded.append(int(r) if r.is_integer() else r)
    return json.dumps(rounded, separators=(",", ":"))


def encode_points(values: Sequence[float] | NDArray[np.float64], number_format: str = "int") -> str:
    """Textual form of a coordinate list for the given number format."""
    if number_format == "int":
        return encode_ints(values).to_expression()
    if number_format == "float":
        return encode_floats(values).to_expression()
    return encode_decimal(values)
