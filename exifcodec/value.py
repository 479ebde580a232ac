# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Value decoder

Turns the raw bytes of an entry into a typed Value according to the
entry's primitive format and component count. Every variant of Value
corresponds to one PrimitiveFormat, and a byte window is only decoded
after its length has been checked against the declared shape.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Union

from exifcodec.exceptions import SizeMismatchError, TextEncodingError
from exifcodec.primitives import (
    pack_i8, pack_i16, pack_i32, pack_irational,
    pack_u8, pack_u16, pack_u32, pack_urational,
    read_i8, read_i16, read_i32, read_irational,
    read_u8, read_u16, read_u32, read_urational,
)
from exifcodec.types import ByteOrder, PrimitiveFormat, WIRE_TYPE_SIZES


@dataclass
class Value:
    """
    Decoded value of an entry.

    ``data`` is a str for TEXT and a list with one item per component for
    every other format: ints for the integer formats and UNDEFINED,
    Rational pairs for the rational formats.
    """
    format: PrimitiveFormat
    data: Union[str, List[Any]]

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self):
        return iter(self.data)

    @property
    def first(self) -> Any:
        """First component, or None for an empty value."""
        if self.format is PrimitiveFormat.TEXT:
            return self.data
        return self.data[0] if self.data else None


_READERS: Dict[PrimitiveFormat, Callable] = {
    PrimitiveFormat.U8: lambda chunk, order: read_u8(chunk),
    PrimitiveFormat.I8: lambda chunk, order: read_i8(chunk),
    PrimitiveFormat.UNDEFINED: lambda chunk, order: read_u8(chunk),
    PrimitiveFormat.TEXT: lambda chunk, order: read_u8(chunk),
    PrimitiveFormat.U16: read_u16,
    PrimitiveFormat.I16: read_i16,
    PrimitiveFormat.U32: read_u32,
    PrimitiveFormat.I32: read_i32,
    PrimitiveFormat.URATIONAL: read_urational,
    PrimitiveFormat.IRATIONAL: read_irational,
}

_WRITERS: Dict[PrimitiveFormat, Callable] = {
    PrimitiveFormat.U8: pack_u8,
    PrimitiveFormat.I8: pack_i8,
    PrimitiveFormat.UNDEFINED: pack_u8,
    PrimitiveFormat.TEXT: pack_u8,
    PrimitiveFormat.U16: pack_u16,
    PrimitiveFormat.I16: pack_i16,
    PrimitiveFormat.U32: pack_u32,
    PrimitiveFormat.I32: pack_i32,
    PrimitiveFormat.URATIONAL: pack_urational,
    PrimitiveFormat.IRATIONAL: pack_irational,
}


def extract(
    raw,
    format: PrimitiveFormat,
    components: int,
    order: ByteOrder
) -> Value:
    """
    Decode raw entry bytes into a Value.

    Args:
        raw: Entry bytes (bytes, bytearray or memoryview)
        format: Primitive format of each component
        components: Number of components
        order: Byte order of the dataset

    Returns:
        Value whose variant matches ``format``

    Raises:
        SizeMismatchError: If len(raw) != format.element_size * components
        TextEncodingError: If a TEXT value is not valid UTF-8
    """
    size = format.element_size
    expected = size * components
    if components < 0 or len(raw) != expected:
        raise SizeMismatchError(expected, len(raw))

    read = _READERS[format]
    view = memoryview(raw)
    items = [read(view[i * size:(i + 1) * size], order) for i in range(components)]

    if format is PrimitiveFormat.TEXT:
        return Value(format, _decode_text(bytes(items)))
    return Value(format, items)


def _decode_text(data: bytes) -> str:
    """Truncate at the first NUL and decode as strict UTF-8."""
    nul = data.find(b'\x00')
    if nul >= 0:
        data = data[:nul]
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise TextEncodingError(data, e.reason) from e


def encode(
    format: PrimitiveFormat,
    data: Union[str, Sequence[Any]],
    order: ByteOrder
) -> bytes:
    """
    Encode component values into raw entry bytes.

    TEXT values are encoded as UTF-8 followed by a terminating NUL.
    """
    if format is PrimitiveFormat.TEXT:
        if isinstance(data, str):
            return data.encode('utf-8') + b'\x00'
        return bytes(data)
    write = _WRITERS[format]
    return b''.join(write(item, order) for item in data)


def reorder(raw, wire_type: int, source: ByteOrder, target: ByteOrder) -> bytes:
    """
    Convert the raw bytes of an entry from one byte order to another.

    Works on the wire type so that entries whose format falls outside
    PrimitiveFormat are converted as well. Rationals are two 32-bit
    halves, each swapped on its own.

    Raises:
        SizeMismatchError: If the length is not a multiple of the element size
    """
    raw = bytes(raw)
    if source is target:
        return raw
    size = WIRE_TYPE_SIZES.get(wire_type, 1)
    if wire_type in (PrimitiveFormat.URATIONAL, PrimitiveFormat.IRATIONAL):
        size = 4
    if size == 1:
        return raw
    if len(raw) % size:
        raise SizeMismatchError(len(raw) - len(raw) % size + size, len(raw))
    return b''.join(raw[i:i + size][::-1] for i in range(0, len(raw), size))
