# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Entry: a single tag record of a directory

Copyright 2025 DNAi inc.
"""

from typing import Optional, TYPE_CHECKING

from exifcodec.tag import Tag
from exifcodec.types import ByteOrder, PrimitiveFormat, WIRE_TYPE_SIZES
from exifcodec.value import Value, extract
from exifcodec.value_formatter import format_entry_value

if TYPE_CHECKING:
    from exifcodec.content import Directory


class Entry:
    """
    Data found in a single EXIF tag.

    An entry records the tag code, the wire format code, the component
    count and the location of its bytes inside the owning dataset's
    storage. The bytes are never copied into the entry; decoded values
    are produced on demand and never cached.
    """

    def __init__(
        self,
        tag: int,
        format_code: int,
        components: int,
        offset: int,
        size: int,
        directory: "Directory"
    ):
        self.tag_code = tag
        self.format_code = format_code
        self.components = components
        self._offset = offset
        self._size = size
        self._directory = directory

    def __repr__(self) -> str:
        return (
            f"Entry(tag=0x{self.tag_code:04X}, format={self.format_code}, "
            f"components={self.components}, size={self._size})"
        )

    @property
    def component_count(self) -> int:
        return self.components

    @property
    def size(self) -> int:
        """Length of the raw data in bytes."""
        return self._size

    @property
    def directory(self) -> "Directory":
        return self._directory

    @property
    def tag(self) -> Tag:
        return Tag(self.tag_code)

    @property
    def format(self) -> PrimitiveFormat:
        """
        Type of data contained in the entry.

        Raises:
            UnrecognizedEnumError: If the wire format code is not a PrimitiveFormat
        """
        return PrimitiveFormat.from_code(self.format_code)

    @property
    def element_size(self) -> Optional[int]:
        """Width of one component according to the wire format code."""
        return WIRE_TYPE_SIZES.get(self.format_code)

    def raw_data(self) -> memoryview:
        """Read-only view of the entry's bytes inside the dataset storage."""
        storage = self._directory.dataset.storage
        return memoryview(storage)[self._offset:self._offset + self._size]

    def value(self, byte_order: Optional[ByteOrder] = None) -> Value:
        """
        Return the interpreted value of the entry's data.

        Args:
            byte_order: Byte order to decode with (defaults to the dataset's)

        Raises:
            UnrecognizedEnumError: If the format code is not a PrimitiveFormat
            SizeMismatchError: If the bytes do not match format and count
            TextEncodingError: If a text entry is not valid UTF-8
        """
        if byte_order is None:
            byte_order = self._directory.dataset.byte_order
        return extract(self.raw_data(), self.format, self.components, byte_order)

    def text_value(self) -> str:
        """Return a human-readable rendering of the entry's data."""
        return format_entry_value(self)

    def _relocate(self, format_code: int, components: int, offset: int, size: int) -> None:
        """Point the entry at new bytes inside the dataset storage."""
        self.format_code = format_code
        self.components = components
        self._offset = offset
        self._size = size
