# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Structural EXIF types

Enumerations for byte order, primitive formats, directory kinds, support
levels, data encodings and data options, plus the Rational pair type.

Every enumeration value is its compact wire code. Conversions from a wire
code go through ``from_code`` which raises UnrecognizedEnumError naming
the enumeration instead of guessing.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Union

from exifcodec.exceptions import UnrecognizedEnumError


class _WireEnum(IntEnum):
    """IntEnum whose members are resolved from wire codes."""

    @classmethod
    def from_code(cls, code: int):
        """
        Resolve a wire code to a member.

        Raises:
            UnrecognizedEnumError: If the code has no member
        """
        try:
            return cls(code)
        except ValueError:
            raise UnrecognizedEnumError(cls.__name__, code) from None


class ByteOrder(_WireEnum):
    """
    Byte order of multi-byte values.

    BIG_ENDIAN stores 0x1234ABCD as 12 34 AB CD (Motorola, "MM").
    LITTLE_ENDIAN stores it as CD AB 34 12 (Intel, "II").
    """
    BIG_ENDIAN = 0
    LITTLE_ENDIAN = 1

    @classmethod
    def from_marker(cls, marker: bytes) -> "ByteOrder":
        """Resolve the two-byte TIFF byte order marker."""
        if marker == b'MM':
            return cls.BIG_ENDIAN
        if marker == b'II':
            return cls.LITTLE_ENDIAN
        raise UnrecognizedEnumError(cls.__name__, bytes(marker))

    @property
    def marker(self) -> bytes:
        return b'MM' if self is ByteOrder.BIG_ENDIAN else b'II'

    @property
    def struct_prefix(self) -> str:
        """The struct module byte order character."""
        return '>' if self is ByteOrder.BIG_ENDIAN else '<'


class PrimitiveFormat(_WireEnum):
    """EXIF tag data formats, valued by their TIFF type code."""
    U8 = 1
    TEXT = 2
    U16 = 3
    U32 = 4
    URATIONAL = 5
    I8 = 6
    UNDEFINED = 7
    I16 = 8
    I32 = 9
    IRATIONAL = 10

    @property
    def element_size(self) -> int:
        """Size of one component in bytes."""
        return ELEMENT_SIZES[self]


# Static per-format component widths
ELEMENT_SIZES = {
    PrimitiveFormat.TEXT: 1,
    PrimitiveFormat.U8: 1,
    PrimitiveFormat.I8: 1,
    PrimitiveFormat.UNDEFINED: 1,
    PrimitiveFormat.U16: 2,
    PrimitiveFormat.I16: 2,
    PrimitiveFormat.U32: 4,
    PrimitiveFormat.I32: 4,
    PrimitiveFormat.URATIONAL: 8,
    PrimitiveFormat.IRATIONAL: 8,
}

# Widths of every TIFF 6.0 wire type, including FLOAT (11) and DOUBLE (12)
# which PrimitiveFormat does not represent
WIRE_TYPE_SIZES = {int(fmt): size for fmt, size in ELEMENT_SIZES.items()}
WIRE_TYPE_SIZES.update({11: 4, 12: 8})


class IFD(_WireEnum):
    """
    Image file directory kinds.

    An image file directory is a group of related EXIF tags. The kind is
    also needed to look a tag up, since the same code can name different
    tags in different directories.
    """
    IMAGE = 0
    THUMBNAIL = 1
    EXIF = 2
    GPS = 3
    INTEROPERABILITY = 4
    # The directory role could not be determined; lookups search all kinds
    UNKNOWN = 5


class SupportLevel(_WireEnum):
    """Requirement level of a standard tag within a directory."""
    NOT_ALLOWED = 0
    REQUIRED = 1
    OPTIONAL = 2
    UNKNOWN = 3


class DataEncoding(_WireEnum):
    """Encoding of the image the EXIF data belongs to."""
    CHUNKY = 0
    PLANAR = 1
    YCC = 2
    COMPRESSED = 3
    UNKNOWN = 4


class DataOption(IntFlag):
    """Options that affect loading and normalizing a dataset."""
    # Act as though tags missing from the tag dictionary don't exist
    IGNORE_UNKNOWN_TAGS = 1
    # Normalize the dataset to follow the EXIF specification after loading
    FOLLOW_SPECIFICATION = 2
    # Leave the maker note alone when normalizing
    DONT_CHANGE_MAKER_NOTE = 4


DEFAULT_OPTIONS = DataOption.IGNORE_UNKNOWN_TAGS


@dataclass(frozen=True)
class Rational:
    """
    A numerator/denominator pair.

    No reduction or division is ever performed: Rational(2, 4) and
    Rational(1, 2) are different values.
    """
    numerator: int
    denominator: int

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def to_float(self) -> Union[float, None]:
        """The numeric value, or None for a zero denominator."""
        if self.denominator == 0:
            return None
        return self.numerator / self.denominator
