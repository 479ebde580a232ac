# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Byte-order-aware primitive readers and writers

Each reader takes a byte window positioned at the start of a value and
returns the value. Readers never advance or keep state. A window shorter
than the primitive is rejected before anything is read.

Copyright 2025 DNAi inc.
"""

import struct

from exifcodec.exceptions import SizeMismatchError
from exifcodec.types import ByteOrder, Rational


def _unpack(code: str, width: int, buf, order: ByteOrder) -> int:
    if len(buf) < width:
        raise SizeMismatchError(width, len(buf))
    return struct.unpack(f'{order.struct_prefix}{code}', bytes(buf[:width]))[0]


def read_u8(buf) -> int:
    if len(buf) < 1:
        raise SizeMismatchError(1, len(buf))
    return buf[0]


def read_i8(buf) -> int:
    value = read_u8(buf)
    return value - 0x100 if value & 0x80 else value


def read_u16(buf, order: ByteOrder) -> int:
    return _unpack('H', 2, buf, order)


def read_i16(buf, order: ByteOrder) -> int:
    return _unpack('h', 2, buf, order)


def read_u32(buf, order: ByteOrder) -> int:
    return _unpack('I', 4, buf, order)


def read_i32(buf, order: ByteOrder) -> int:
    return _unpack('i', 4, buf, order)


def read_urational(buf, order: ByteOrder) -> Rational:
    """Read two unsigned 32-bit values, numerator first."""
    if len(buf) < 8:
        raise SizeMismatchError(8, len(buf))
    return Rational(read_u32(buf[:4], order), read_u32(buf[4:8], order))


def read_irational(buf, order: ByteOrder) -> Rational:
    """Read two signed 32-bit values, numerator first."""
    if len(buf) < 8:
        raise SizeMismatchError(8, len(buf))
    return Rational(read_i32(buf[:4], order), read_i32(buf[4:8], order))


def read_f32(buf, order: ByteOrder) -> float:
    """TIFF FLOAT, used only for rendering entries outside PrimitiveFormat."""
    if len(buf) < 4:
        raise SizeMismatchError(4, len(buf))
    return struct.unpack(f'{order.struct_prefix}f', bytes(buf[:4]))[0]


def read_f64(buf, order: ByteOrder) -> float:
    """TIFF DOUBLE, used only for rendering entries outside PrimitiveFormat."""
    if len(buf) < 8:
        raise SizeMismatchError(8, len(buf))
    return struct.unpack(f'{order.struct_prefix}d', bytes(buf[:8]))[0]


# Writers produce the byte window a reader above consumes. struct.error on
# an out-of-range value is left to propagate.

def pack_u8(value: int, order: ByteOrder = ByteOrder.BIG_ENDIAN) -> bytes:
    return struct.pack('B', value)


def pack_i8(value: int, order: ByteOrder = ByteOrder.BIG_ENDIAN) -> bytes:
    return struct.pack('b', value)


def pack_u16(value: int, order: ByteOrder) -> bytes:
    return struct.pack(f'{order.struct_prefix}H', value)


def pack_i16(value: int, order: ByteOrder) -> bytes:
    return struct.pack(f'{order.struct_prefix}h', value)


def pack_u32(value: int, order: ByteOrder) -> bytes:
    return struct.pack(f'{order.struct_prefix}I', value)


def pack_i32(value: int, order: ByteOrder) -> bytes:
    return struct.pack(f'{order.struct_prefix}i', value)


def pack_urational(value: Rational, order: ByteOrder) -> bytes:
    return struct.pack(f'{order.struct_prefix}II', value.numerator, value.denominator)


def pack_irational(value: Rational, order: ByteOrder) -> bytes:
    return struct.pack(f'{order.struct_prefix}ii', value.numerator, value.denominator)
