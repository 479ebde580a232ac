# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Dataset: all EXIF data found in an image

A Dataset owns a single immutable byte arena holding the raw bytes of
every entry and of the thumbnail, plus one Directory per IFD kind.
Entries and directories only refer into the arena. Operations that change
entry bytes build a new arena, so views returned earlier keep describing
the bytes they were taken from.

Copyright 2025 DNAi inc.
"""

import logging
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple, Union

from exifcodec.content import Directory
from exifcodec.entry import Entry
from exifcodec.normalize import normalize_dataset
from exifcodec.types import (
    ByteOrder,
    DataEncoding,
    DataOption,
    DEFAULT_OPTIONS,
    IFD,
)
from exifcodec.value import reorder

logger = logging.getLogger(__name__)

# Directories of a dataset, in wire order
DIRECTORY_KINDS = (IFD.IMAGE, IFD.THUMBNAIL, IFD.EXIF, IFD.GPS, IFD.INTEROPERABILITY)


class Dataset:
    """
    Container for all EXIF data found in an image.

    Datasets are produced by the Loader (or Dataset.open). A dataset always
    has five directories, one per IFD kind, some of which may be empty.

    Example:
        >>> data = Dataset.open('image.jpg')
        >>> for directory in data.directories():
        ...     for entry in directory.entries():
        ...         print(entry.tag.title(directory.kind), entry.text_value())
    """

    def __init__(
        self,
        storage: bytes,
        byte_order: ByteOrder,
        encoding: DataEncoding = DataEncoding.UNKNOWN,
        options: DataOption = DEFAULT_OPTIONS
    ):
        """
        Initialize an empty dataset over a byte arena.

        Args:
            storage: Bytes that entry windows point into
            byte_order: Byte order of every entry
            encoding: Encoding of the image the data belongs to
            options: Data options
        """
        self._storage = bytes(storage)
        self._byte_order = byte_order
        self._encoding = encoding
        self._options = DataOption(options)
        self._directories = [Directory(int(kind), self) for kind in DIRECTORY_KINDS]
        self._thumbnail: Optional[Tuple[int, int]] = None

    def __repr__(self) -> str:
        counts = ", ".join(str(len(d)) for d in self._directories)
        return (
            f"Dataset(byte_order={self._byte_order.name}, "
            f"encoding={self._encoding.name}, entries=[{counts}])"
        )

    @classmethod
    def open(
        cls,
        file_path: Union[str, Path],
        chunk_size: int = 1024,
        **loader_kwargs
    ) -> "Dataset":
        """
        Load the EXIF data of an image file.

        The file is streamed into a Loader in ``chunk_size`` pieces until
        the loader has seen the whole metadata segment.

        Args:
            file_path: Path to a JPEG, TIFF or RAF file, or a bare EXIF block
            chunk_size: Size of each read
            **loader_kwargs: Passed on to Loader (options, max_size)

        Raises:
            OSError: If the file cannot be read
            LoadError: If the file holds no valid EXIF data
        """
        from exifcodec.loader import Loader

        loader = Loader(**loader_kwargs)
        with open(file_path, 'rb') as f:
            while True:
                chunk = f.read(chunk_size)
                if not chunk or not loader.feed(chunk):
                    break
        return loader.finish()

    @property
    def storage(self) -> bytes:
        """The byte arena entry windows point into."""
        return self._storage

    @property
    def byte_order(self) -> ByteOrder:
        return self._byte_order

    def set_byte_order(self, byte_order: ByteOrder) -> None:
        """
        Set the byte order of the dataset.

        The raw bytes of every entry are converted to the new byte order,
        so decoded values stay the same.
        """
        if byte_order is self._byte_order:
            return
        source = self._byte_order
        self._rebuild(lambda entry, raw: reorder(raw, entry.format_code, source, byte_order))
        self._byte_order = byte_order
        logger.debug(f"Byte order changed from {source.name} to {byte_order.name}")

    @property
    def encoding(self) -> DataEncoding:
        return self._encoding

    def set_encoding(self, encoding: DataEncoding) -> None:
        self._encoding = encoding

    @property
    def options(self) -> DataOption:
        return self._options

    def set_option(self, option: DataOption) -> None:
        """Enable a data option."""
        self._options |= option

    def unset_option(self, option: DataOption) -> None:
        """Disable a data option."""
        self._options &= ~option

    def directories(self) -> Tuple[Directory, ...]:
        """The directories of the dataset, one per IFD kind in wire order."""
        return tuple(self._directories)

    def __iter__(self) -> Iterator[Directory]:
        return iter(self._directories)

    def directory(self, ifd: IFD) -> Directory:
        """The directory of the given kind."""
        for directory in self._directories:
            if directory.ifd_code == ifd:
                return directory
        raise KeyError(ifd)

    def find_entry(self, tag: int, ifd: Optional[IFD] = None) -> Optional[Entry]:
        """
        First entry with the tag code, in one directory or in all of them.

        ``None`` and ``IFD.UNKNOWN`` both search every directory.
        """
        if ifd is None or ifd is IFD.UNKNOWN:
            directories = self._directories
        else:
            directories = [self.directory(ifd)]
        for directory in directories:
            entry = directory.get_entry(tag)
            if entry is not None:
                return entry
        return None

    @property
    def thumbnail(self) -> Optional[bytes]:
        """The compressed thumbnail image, if the data carries one."""
        if self._thumbnail is None:
            return None
        offset, size = self._thumbnail
        return self._storage[offset:offset + size]

    def normalize(self) -> int:
        """
        Fix the data to make it comply with the EXIF specification.

        This is a best-effort repair of non-conforming metadata; see
        exifcodec.normalize for the rules applied.

        Returns:
            Number of changes made
        """
        return normalize_dataset(self)

    def dump(self) -> str:
        """Text listing of all non-empty directories and their entries."""
        lines = [
            f"  Encoding:   {self._encoding.name.title()}",
            f"  Byte Order: {'BigEndian' if self._byte_order is ByteOrder.BIG_ENDIAN else 'LittleEndian'}",
        ]
        for directory in self._directories:
            if not len(directory):
                continue
            kind = directory.kind
            lines.append(f"[{(' ' + kind.name.title() + ' '):=>31}{'':=>46}]")
            for entry in directory.entries():
                title = entry.tag.title(kind) or f"Tag 0x{entry.tag_code:04X}"
                lines.append(f" {title:<30} = {entry.text_value()}")
        return "\n".join(lines)

    # Arena management used by the loader and by normalize

    def _add_entry(
        self,
        ifd: IFD,
        tag: int,
        format_code: int,
        components: int,
        offset: int,
        size: int
    ) -> Entry:
        """Add an entry whose bytes already lie in the arena."""
        if offset < 0 or offset + size > len(self._storage):
            raise ValueError(f"Entry window {offset}+{size} outside storage")
        directory = self.directory(ifd)
        entry = Entry(tag, format_code, components, offset, size, directory)
        directory._add(entry)
        return entry

    def _append_entry(
        self,
        ifd: IFD,
        tag: int,
        format_code: int,
        components: int,
        data: bytes
    ) -> Entry:
        """Add an entry with new bytes appended to the arena."""
        offset = self._append(data)
        return self._add_entry(ifd, tag, format_code, components, offset, len(data))

    def _replace_entry_data(
        self,
        entry: Entry,
        format_code: int,
        components: int,
        data: bytes
    ) -> None:
        offset = self._append(data)
        entry._relocate(format_code, components, offset, len(data))

    def _remove_entry(self, entry: Entry) -> None:
        entry.directory._remove(entry)

    def _set_thumbnail(self, offset: int, size: int) -> None:
        if offset < 0 or offset + size > len(self._storage):
            raise ValueError(f"Thumbnail window {offset}+{size} outside storage")
        self._thumbnail = (offset, size)

    def _append(self, data: bytes) -> int:
        offset = len(self._storage)
        self._storage = self._storage + bytes(data)
        return offset

    def _rebuild(self, transform: Callable[[Entry, memoryview], bytes]) -> None:
        """Build a compact arena holding transformed entry bytes and the thumbnail."""
        parts: List[bytes] = []
        position = 0
        moves = []
        for directory in self._directories:
            for entry in directory.entries():
                data = bytes(transform(entry, entry.raw_data()))
                moves.append((entry, position, len(data)))
                parts.append(data)
                position += len(data)
        thumbnail = self.thumbnail
        if thumbnail is not None:
            parts.append(thumbnail)
            self._thumbnail = (position, len(thumbnail))
        self._storage = b''.join(parts)
        for entry, offset, size in moves:
            entry._relocate(entry.format_code, entry.components, offset, size)
