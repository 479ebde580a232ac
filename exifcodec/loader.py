# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Incremental loader

Accepts the bytes of an image file in chunks of any size and produces a
Dataset once it has seen a complete metadata segment. The caller does the
reading; the loader never performs I/O.

Supported containers:
- JPEG: marker segments are walked until the first APP1 segment with an
  EXIF header. Other segments are skipped without being buffered.
- EXIF block: the raw APP1 payload, starting with "Exif\\0\\0".
- TIFF: the file itself is the EXIF block.
- Fujifilm RAF: the embedded JPEG is located through the RAF header.

Copyright 2025 DNAi inc.
"""

import logging
import struct
from enum import Enum
from typing import Optional

from exifcodec.data import Dataset
from exifcodec.exceptions import CorruptDataError, LoadError, TruncatedDataError
from exifcodec.tiff import IncompleteData, TiffParser
from exifcodec.types import DataEncoding, DataOption, DEFAULT_OPTIONS

logger = logging.getLogger(__name__)

EXIF_HEADER = b'Exif\x00\x00'
JPEG_SOI = b'\xff\xd8'
TIFF_LE_HEADER = b'II*\x00'
TIFF_BE_HEADER = b'MM\x00*'
RAF_MAGIC = b'FUJIFILM'

# RAF header field holding the offset of the embedded JPEG
RAF_JPEG_OFFSET_POSITION = 84
RAF_HEADER_SIZE = 88

# JPEG markers
MARKER_APP1 = 0xE1
MARKER_SOS = 0xDA
MARKER_EOI = 0xD9
STANDALONE_MARKERS = {0x01, 0xD8} | set(range(0xD0, 0xD8))

SIGNATURES = {
    JPEG_SOI: 'jpeg',
    EXIF_HEADER: 'exif',
    TIFF_LE_HEADER: 'tiff',
    TIFF_BE_HEADER: 'tiff',
    RAF_MAGIC: 'raf',
}


class LoaderState(Enum):
    """State of a Loader."""
    EMPTY = 'empty'
    ACCUMULATING = 'accumulating'
    READY = 'ready'
    FAILED = 'failed'


class Loader:
    """
    Builds a Dataset from an image file fed in chunks.

    Example:
        >>> loader = Loader()
        >>> with open('image.jpg', 'rb') as f:
        ...     while loader.feed(f.read(1024)):
        ...         pass
        >>> data = loader.finish()

    Once the loader is ready or has failed, further feeds are ignored.
    """

    DEFAULT_MAX_SIZE = 64 * 1024 * 1024

    def __init__(self, options: DataOption = DEFAULT_OPTIONS, max_size: int = DEFAULT_MAX_SIZE):
        """
        Initialize the loader.

        Args:
            options: Data options for the resulting dataset
            max_size: Maximum number of bytes buffered at any time
        """
        self.options = DataOption(options)
        self.max_size = max_size
        self._state = LoaderState.EMPTY
        self._buffer = bytearray()
        self._container: Optional[str] = None
        self._skip = 0
        self._required = 0
        self._embedded = False
        self._dataset: Optional[Dataset] = None
        self._error: Optional[LoadError] = None

    def __repr__(self) -> str:
        return f"Loader(state={self._state.name}, buffered={len(self._buffer)})"

    @property
    def state(self) -> LoaderState:
        return self._state

    @property
    def dataset(self) -> Optional[Dataset]:
        """The loaded dataset, once the loader is ready."""
        return self._dataset

    @property
    def error(self) -> Optional[LoadError]:
        """The failure, once the loader has failed."""
        return self._error

    def feed(self, chunk: bytes) -> bool:
        """
        Append newly read bytes.

        Args:
            chunk: Next bytes of the file, possibly empty

        Returns:
            True if the loader wants more bytes
        """
        if self._state in (LoaderState.READY, LoaderState.FAILED):
            return False
        if not chunk:
            return True

        self._state = LoaderState.ACCUMULATING
        try:
            self._advance(chunk)
        except LoadError as e:
            self._fail(e)
        return self._state is LoaderState.ACCUMULATING

    def finish(self) -> Dataset:
        """
        Signal the end of the input and return the dataset.

        Raises:
            TruncatedDataError: If the input ended before a complete segment
            CorruptDataError: If the input is structurally invalid
        """
        if self._state is LoaderState.READY:
            return self._dataset
        if self._state is LoaderState.EMPTY:
            self._fail(TruncatedDataError("No data"))
        elif self._state is LoaderState.ACCUMULATING:
            try:
                self._finish_block()
            except LoadError as e:
                self._fail(e)

        if self._state is LoaderState.FAILED:
            raise self._error
        return self._dataset

    def _advance(self, chunk: bytes) -> None:
        data = memoryview(chunk)
        if self._skip:
            skipped = min(self._skip, len(data))
            self._skip -= skipped
            data = data[skipped:]
        self._buffer += data
        self._process()
        if len(self._buffer) > self.max_size:
            raise CorruptDataError(f"EXIF data exceeds {self.max_size} bytes")

    def _process(self) -> None:
        while self._state is LoaderState.ACCUMULATING and not self._skip:
            if self._container is None:
                if not self._sniff():
                    return
            elif self._container == 'jpeg':
                if not self._advance_jpeg():
                    return
            elif self._container == 'raf':
                if not self._advance_raf():
                    return
            else:
                self._advance_block()
                return

    def _sniff(self) -> bool:
        """Detect the container from the first bytes."""
        buf = bytes(self._buffer[:8])
        for signature, container in SIGNATURES.items():
            if buf.startswith(signature):
                if self._embedded and container != 'jpeg':
                    raise CorruptDataError("RAF file does not embed a JPEG image")
                self._container = container
                logger.debug(f"Detected {container} container")
                if container == 'jpeg':
                    del self._buffer[:len(JPEG_SOI)]
                elif container == 'exif':
                    del self._buffer[:len(EXIF_HEADER)]
                return True
        if any(signature.startswith(buf) for signature in SIGNATURES):
            return False
        raise CorruptDataError("Unrecognized file format")

    def _advance_jpeg(self) -> bool:
        """
        Consume one JPEG marker segment.

        Returns:
            True if a segment was consumed, False if more bytes are needed
        """
        buf = self._buffer
        if len(buf) < 2:
            return False
        if buf[0] != 0xFF:
            raise CorruptDataError(f"Invalid JPEG marker byte 0x{buf[0]:02X}")
        marker = buf[1]
        if marker == 0xFF:
            # Fill byte
            del buf[:1]
            return True
        if marker in STANDALONE_MARKERS:
            del buf[:2]
            return True
        if marker in (MARKER_SOS, MARKER_EOI):
            raise CorruptDataError("No EXIF segment found before image data")
        if len(buf) < 4:
            return False

        length = struct.unpack('>H', bytes(buf[2:4]))[0]
        if length < 2:
            raise CorruptDataError(f"Invalid JPEG segment length: {length}")
        payload_size = length - 2

        if marker == MARKER_APP1:
            if len(buf) < 4 + payload_size:
                return False
            payload = bytes(buf[4:4 + payload_size])
            del buf[:4 + payload_size]
            if payload.startswith(EXIF_HEADER):
                logger.debug(f"Found EXIF segment of {payload_size} bytes")
                parser = TiffParser(
                    payload,
                    base=len(EXIF_HEADER),
                    final=True,
                    options=self.options,
                    encoding=DataEncoding.COMPRESSED
                )
                self._ready(parser.parse())
            return True

        logger.debug(f"Skipping JPEG segment 0x{marker:02X} of {length} bytes")
        del buf[:4]
        skipped = min(payload_size, len(buf))
        del buf[:skipped]
        self._skip = payload_size - skipped
        return True

    def _advance_raf(self) -> bool:
        """Jump from the RAF header to the embedded JPEG."""
        if len(self._buffer) < RAF_HEADER_SIZE:
            return False
        position = RAF_JPEG_OFFSET_POSITION
        jpeg_offset = struct.unpack('>I', bytes(self._buffer[position:position + 4]))[0]
        if jpeg_offset < RAF_HEADER_SIZE:
            raise CorruptDataError(f"Invalid RAF JPEG offset: {jpeg_offset}")
        logger.debug(f"RAF embedded JPEG at offset {jpeg_offset}")

        skipped = min(jpeg_offset, len(self._buffer))
        del self._buffer[:skipped]
        self._skip = jpeg_offset - skipped
        self._container = None
        self._embedded = True
        return True

    def _advance_block(self) -> None:
        """Try to parse a TIFF or EXIF block once enough bytes have arrived."""
        if len(self._buffer) < self._required:
            return
        try:
            dataset = self._parse_block(final=False)
        except IncompleteData as e:
            self._required = e.required
            logger.debug(f"Waiting for {e.required} bytes, have {len(self._buffer)}")
            return
        self._ready(dataset)

    def _finish_block(self) -> None:
        if self._container not in ('tiff', 'exif'):
            raise TruncatedDataError("Input ended before a complete EXIF segment")
        try:
            dataset = self._parse_block(final=False)
        except IncompleteData as e:
            if e.structural:
                raise TruncatedDataError(
                    f"Input ended after {len(self._buffer)} bytes, {e.required} needed"
                ) from None
            # Only entry values are missing; drop those entries
            dataset = self._parse_block(final=True, truncated=True)
        self._ready(dataset)

    def _parse_block(self, final: bool, truncated: bool = False) -> Dataset:
        encoding = DataEncoding.COMPRESSED if self._container == 'exif' else None
        parser = TiffParser(
            self._buffer,
            final=final,
            options=self.options,
            encoding=encoding,
            truncated=truncated
        )
        return parser.parse()

    def _ready(self, dataset: Dataset) -> None:
        if self.options & DataOption.FOLLOW_SPECIFICATION:
            dataset.normalize()
        self._dataset = dataset
        self._state = LoaderState.READY
        self._buffer = bytearray()
        logger.debug(f"Loader ready: {dataset!r}")

    def _fail(self, error: LoadError) -> None:
        self._error = error
        self._state = LoaderState.FAILED
        self._buffer = bytearray()
        logger.warning(f"Loading EXIF data failed: {error}")
