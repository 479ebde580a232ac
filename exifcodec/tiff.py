# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
TIFF structure parser

Reads the TIFF header and the IFD0 -> IFD1 chain of an EXIF block,
following the EXIF, GPS and Interoperability pointer tags, and builds a
Dataset whose entries point into the block.

The parser can run on a block that is still arriving. In that mode any
read past the end of the available bytes raises IncompleteData with the
number of bytes the read needs, so the caller can retry once they have
arrived.

Copyright 2025 DNAi inc.
"""

import logging
import struct
from typing import Optional, Set

from exifcodec.data import Dataset
from exifcodec.exceptions import CorruptDataError, TruncatedDataError, UnrecognizedEnumError
from exifcodec.exif_tags import (
    POINTER_TAGS,
    TAG_COMPRESSION,
    TAG_JPEG_INTERCHANGE_FORMAT,
    TAG_JPEG_INTERCHANGE_FORMAT_LENGTH,
    TAG_PHOTOMETRIC_INTERPRETATION,
    TAG_PLANAR_CONFIGURATION,
)
from exifcodec.tag import Tag
from exifcodec.types import (
    ByteOrder,
    DataEncoding,
    DataOption,
    DEFAULT_OPTIONS,
    IFD,
    WIRE_TYPE_SIZES,
)

logger = logging.getLogger(__name__)

TIFF_MAGIC = 42
HEADER_SIZE = 8
ENTRY_SIZE = 12
MAX_ENTRIES = 1000  # Sanity check


class IncompleteData(Exception):
    """
    More bytes are needed to finish parsing.

    ``required`` is the total buffer length the failed read needs.
    ``structural`` is True when the read was part of the header or a
    directory, False when it was an entry value or the thumbnail.
    """
    def __init__(self, required: int, structural: bool):
        self.required = required
        self.structural = structural
        super().__init__(f"Need {required} bytes")


class TiffParser:
    """
    Parser for the TIFF structure of an EXIF block.

    Directory structure errors are fatal. An entry whose value lies
    outside a complete block is dropped on its own, so that one bad
    record does not discard the rest of the data.
    """

    def __init__(
        self,
        data: bytes,
        base: int = 0,
        final: bool = True,
        options: DataOption = DEFAULT_OPTIONS,
        encoding: Optional[DataEncoding] = None,
        truncated: bool = False
    ):
        """
        Initialize the parser.

        Args:
            data: Buffer holding the TIFF block
            base: Offset of the TIFF header inside ``data``
            final: Whether ``data`` holds all bytes there will ever be
            options: Data options for the new dataset
            encoding: Data encoding if the container determines it
            truncated: Whether a final ``data`` ended before the block did
        """
        self.block = bytes(data[base:])
        self.base = base
        self.final = final
        self.options = DataOption(options)
        self.encoding = encoding
        self.truncated = truncated
        self.order = ByteOrder.BIG_ENDIAN
        self._visited: Set[int] = set()

    def parse(self) -> Dataset:
        """
        Parse the block into a Dataset.

        Raises:
            IncompleteData: If the block is not final and a read needs more bytes
            TruncatedDataError: If a final block is shorter than the TIFF header,
                or a truncated block ends inside a directory
            CorruptDataError: If the structure is invalid
        """
        if len(self.block) < HEADER_SIZE:
            if not self.final:
                raise IncompleteData(self.base + HEADER_SIZE, True)
            raise TruncatedDataError("EXIF data too short for TIFF header")

        try:
            self.order = ByteOrder.from_marker(self.block[:2])
        except UnrecognizedEnumError:
            raise CorruptDataError("Invalid TIFF header: bad byte order marker") from None

        magic = self._u16(2)
        if magic != TIFF_MAGIC:
            raise CorruptDataError(f"Invalid TIFF magic number: {magic}")

        ifd0_offset = self._u32(4)
        if ifd0_offset < HEADER_SIZE:
            raise CorruptDataError(f"Invalid IFD0 offset: {ifd0_offset}")

        dataset = Dataset(self.block, self.order, DataEncoding.UNKNOWN, self.options)
        next_offset = self._parse_ifd(dataset, IFD.IMAGE, ifd0_offset)
        if next_offset:
            self._parse_ifd(dataset, IFD.THUMBNAIL, next_offset)

        self._load_thumbnail(dataset)
        dataset.set_encoding(self.encoding if self.encoding is not None else self._infer_encoding(dataset))
        return dataset

    def _parse_ifd(self, dataset: Dataset, ifd: IFD, offset: int) -> int:
        """
        Parse one IFD and the sub-IFDs it points to.

        Returns:
            Offset of the next IFD in the chain, or 0
        """
        if offset in self._visited:
            raise CorruptDataError(f"IFD loop at offset {offset}")
        if offset < HEADER_SIZE:
            raise CorruptDataError(f"Invalid {ifd.name} IFD offset: {offset}")
        self._visited.add(offset)

        self._require(offset, 2, structural=True)
        num_entries = self._u16(offset)
        if num_entries > MAX_ENTRIES:
            raise CorruptDataError(f"Too many entries in {ifd.name} IFD: {num_entries}")
        self._require(offset + 2, num_entries * ENTRY_SIZE, structural=True)

        entry_offset = offset + 2
        for _ in range(num_entries):
            self._parse_entry(dataset, ifd, entry_offset)
            entry_offset += ENTRY_SIZE

        # The next IFD pointer is optional at the very end of the block
        if entry_offset + 4 <= len(self.block):
            return self._u32(entry_offset)
        if not self.final:
            raise IncompleteData(self.base + entry_offset + 4, True)
        return 0

    def _parse_entry(self, dataset: Dataset, ifd: IFD, entry_offset: int) -> None:
        tag_id, wire_type, count = struct.unpack(
            f'{self.order.struct_prefix}HHI',
            self.block[entry_offset:entry_offset + 8]
        )

        if tag_id in POINTER_TAGS:
            sub_offset = self._u32(entry_offset + 8)
            if sub_offset:
                self._parse_ifd(dataset, POINTER_TAGS[tag_id], sub_offset)
            return

        width = WIRE_TYPE_SIZES.get(wire_type)
        if width is None:
            logger.debug(f"Skipping tag 0x{tag_id:04X} in {ifd.name}: unknown type {wire_type}")
            return

        size = width * count
        if size <= 4:
            value_offset = entry_offset + 8
        else:
            value_offset = self._u32(entry_offset + 8)

        if value_offset + size > len(self.block):
            if not self.final:
                raise IncompleteData(self.base + value_offset + size, False)
            logger.warning(
                f"Dropping tag 0x{tag_id:04X} in {ifd.name}: value at "
                f"{value_offset}+{size} lies outside {len(self.block)} bytes"
            )
            return

        if self.options & DataOption.IGNORE_UNKNOWN_TAGS and not Tag(tag_id).is_known(ifd):
            logger.debug(f"Ignoring unknown tag 0x{tag_id:04X} in {ifd.name}")
            return

        dataset._add_entry(ifd, tag_id, wire_type, count, value_offset, size)

    def _load_thumbnail(self, dataset: Dataset) -> None:
        directory = dataset.directory(IFD.THUMBNAIL)
        offset_entry = directory.get_entry(TAG_JPEG_INTERCHANGE_FORMAT)
        length_entry = directory.get_entry(TAG_JPEG_INTERCHANGE_FORMAT_LENGTH)
        if offset_entry is None or length_entry is None:
            return
        offset = self._entry_integer(offset_entry.raw_data(), offset_entry.format_code)
        length = self._entry_integer(length_entry.raw_data(), length_entry.format_code)
        if offset is None or length is None or length == 0:
            return
        if offset + length > len(self.block):
            if not self.final:
                raise IncompleteData(self.base + offset + length, False)
            logger.warning(f"Thumbnail at {offset}+{length} lies outside the EXIF data")
            return
        dataset._set_thumbnail(offset, length)

    def _entry_integer(self, raw, wire_type: int) -> Optional[int]:
        """First value of a SHORT or LONG entry."""
        if wire_type == 3 and len(raw) >= 2:
            return struct.unpack(f'{self.order.struct_prefix}H', bytes(raw[:2]))[0]
        if wire_type == 4 and len(raw) >= 4:
            return struct.unpack(f'{self.order.struct_prefix}I', bytes(raw[:4]))[0]
        return None

    def _infer_encoding(self, dataset: Dataset) -> DataEncoding:
        """Derive the data encoding from the IFD0 image structure tags."""
        image = dataset.directory(IFD.IMAGE)
        values = {}
        for tag in (TAG_COMPRESSION, TAG_PHOTOMETRIC_INTERPRETATION, TAG_PLANAR_CONFIGURATION):
            entry = image.get_entry(tag)
            if entry is not None:
                values[tag] = self._entry_integer(entry.raw_data(), entry.format_code)
        if not values:
            return DataEncoding.UNKNOWN
        if values.get(TAG_COMPRESSION) in (6, 7):
            return DataEncoding.COMPRESSED
        if values.get(TAG_PHOTOMETRIC_INTERPRETATION) == 6:
            return DataEncoding.YCC
        if values.get(TAG_PLANAR_CONFIGURATION) == 2:
            return DataEncoding.PLANAR
        return DataEncoding.CHUNKY

    def _require(self, offset: int, length: int, structural: bool) -> None:
        if offset + length <= len(self.block):
            return
        if not self.final:
            raise IncompleteData(self.base + offset + length, structural)
        if self.truncated:
            raise TruncatedDataError(
                f"Input ended inside the directory at {offset}+{length}"
            )
        raise CorruptDataError(
            f"Directory at {offset}+{length} lies outside {len(self.block)} bytes of EXIF data"
        )

    def _u16(self, offset: int) -> int:
        self._require(offset, 2, structural=True)
        return struct.unpack(f'{self.order.struct_prefix}H', self.block[offset:offset + 2])[0]

    def _u32(self, offset: int) -> int:
        self._require(offset, 4, structural=True)
        return struct.unpack(f'{self.order.struct_prefix}I', self.block[offset:offset + 4])[0]
