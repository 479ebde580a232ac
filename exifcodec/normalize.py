# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Dataset normalization

Best-effort repair of non-conforming metadata so that a dataset follows
the EXIF specification as described by the tag dictionary:

1. Entries not allowed in their directory for the data encoding are
   removed, as are entries unknown to the dictionary when the
   IGNORE_UNKNOWN_TAGS option is set.
2. Integer entries stored in the wrong integer format are converted when
   every value fits the expected format.
3. Text entries stored as bytes are retyped as text, and text entries
   without a terminating NUL get one.
4. Entries with more components than the fixed count the dictionary
   prescribes are truncated to that count.
5. Required entries with a standard default value are added to
   directories that have entries but lack them.

The maker note is left alone when DONT_CHANGE_MAKER_NOTE is set.

Copyright 2025 DNAi inc.
"""

import logging
from typing import TYPE_CHECKING

from exifcodec.content import Directory
from exifcodec.entry import Entry
from exifcodec.exceptions import ExifCodecError, UnrecognizedEnumError
from exifcodec.exif_tags import EXIF_TAGS, TAG_MAKER_NOTE, TagInfo
from exifcodec.tag import Tag
from exifcodec.types import (
    DataEncoding,
    DataOption,
    IFD,
    PrimitiveFormat,
    SupportLevel,
)
from exifcodec.value import encode

if TYPE_CHECKING:
    from exifcodec.data import Dataset

logger = logging.getLogger(__name__)

# Value ranges of the integer formats
INTEGER_RANGES = {
    PrimitiveFormat.U8: (0, 0xFF),
    PrimitiveFormat.I8: (-0x80, 0x7F),
    PrimitiveFormat.U16: (0, 0xFFFF),
    PrimitiveFormat.I16: (-0x8000, 0x7FFF),
    PrimitiveFormat.U32: (0, 0xFFFFFFFF),
    PrimitiveFormat.I32: (-0x80000000, 0x7FFFFFFF),
}

_BYTE_FORMATS = (PrimitiveFormat.U8, PrimitiveFormat.UNDEFINED)


def normalize_dataset(dataset: "Dataset") -> int:
    """
    Apply the normalization rules to every directory of a dataset.

    Args:
        dataset: Dataset to repair in place

    Returns:
        Number of changes made
    """
    changes = 0
    for directory in dataset.directories():
        try:
            ifd = directory.kind
        except UnrecognizedEnumError as e:
            logger.debug(f"Skipping directory: {e}")
            continue
        changes += _normalize_directory(dataset, directory, ifd)
    if changes:
        logger.debug(f"Normalization made {changes} change(s)")
    return changes


def _normalize_directory(dataset: "Dataset", directory: Directory, ifd: IFD) -> int:
    changes = 0
    options = dataset.options
    encoding = dataset.encoding

    for entry in directory.entries():
        tag = entry.tag
        if options & DataOption.IGNORE_UNKNOWN_TAGS and not tag.is_known(ifd):
            logger.debug(f"Removing unknown tag 0x{entry.tag_code:04X} from {ifd.name}")
            dataset._remove_entry(entry)
            changes += 1
            continue
        if tag.support_level(ifd, encoding) is SupportLevel.NOT_ALLOWED:
            logger.debug(
                f"Removing tag 0x{entry.tag_code:04X}, not allowed in {ifd.name} "
                f"for {encoding.name} data"
            )
            dataset._remove_entry(entry)
            changes += 1
            continue
        if entry.tag_code == TAG_MAKER_NOTE and options & DataOption.DONT_CHANGE_MAKER_NOTE:
            continue
        info = tag.info(ifd)
        if info is not None and info.formats:
            changes += _fix_entry(dataset, entry, info)

    if len(directory):
        changes += _add_required_entries(dataset, directory, ifd, encoding)
    return changes


def _fix_entry(dataset: "Dataset", entry: Entry, info: TagInfo) -> int:
    """Fix format, terminator and component count of one entry."""
    try:
        fmt = entry.format
    except UnrecognizedEnumError:
        return 0

    changes = 0
    order = dataset.byte_order

    if fmt not in info.formats and fmt in INTEGER_RANGES:
        target = _fitting_integer_format(entry, info)
        if target is not None:
            values = entry.value(order).data
            dataset._replace_entry_data(entry, int(target), len(values), encode(target, values, order))
            logger.debug(f"Converted tag 0x{entry.tag_code:04X} from {fmt.name} to {target.name}")
            fmt = target
            changes += 1

    if PrimitiveFormat.TEXT in info.formats and fmt in _BYTE_FORMATS:
        raw = bytes(entry.raw_data())
        dataset._replace_entry_data(entry, int(PrimitiveFormat.TEXT), len(raw), raw)
        logger.debug(f"Retyped tag 0x{entry.tag_code:04X} from {fmt.name} to TEXT")
        fmt = PrimitiveFormat.TEXT
        changes += 1

    if fmt is PrimitiveFormat.TEXT:
        raw = bytes(entry.raw_data())
        if b'\x00' not in raw:
            dataset._replace_entry_data(entry, entry.format_code, len(raw) + 1, raw + b'\x00')
            logger.debug(f"Terminated text of tag 0x{entry.tag_code:04X}")
            changes += 1
    elif info.count is not None and entry.components > info.count:
        raw = bytes(entry.raw_data())
        size = fmt.element_size * info.count
        dataset._replace_entry_data(entry, entry.format_code, info.count, raw[:size])
        logger.debug(
            f"Truncated tag 0x{entry.tag_code:04X} from {entry.components} "
            f"to {info.count} components"
        )
        changes += 1

    return changes


def _fitting_integer_format(entry: Entry, info: TagInfo):
    """The first expected integer format holding every value of the entry."""
    try:
        values = entry.value().data
    except ExifCodecError:
        return None
    for candidate in info.formats:
        bounds = INTEGER_RANGES.get(candidate)
        if bounds is None:
            continue
        low, high = bounds
        if all(low <= v <= high for v in values):
            return candidate
    return None


def _add_required_entries(
    dataset: "Dataset",
    directory: Directory,
    ifd: IFD,
    encoding: DataEncoding
) -> int:
    changes = 0
    order = dataset.byte_order
    for info in EXIF_TAGS:
        if ifd not in info.support or info.default is None or info.code in directory:
            continue
        if Tag(info.code).support_level(ifd, encoding) is not SupportLevel.REQUIRED:
            continue
        fmt = info.formats[0]
        data = encode(fmt, info.default, order)
        components = len(data) if fmt is PrimitiveFormat.TEXT else len(info.default)
        dataset._append_entry(ifd, info.code, int(fmt), components, data)
        logger.debug(f"Added required tag {info.name} to {ifd.name}")
        changes += 1
    return changes
