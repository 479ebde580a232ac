# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for exifcodec

Decoding errors are raised to the immediate caller so that a caller
iterating over a dataset can skip the offending entry and carry on.
Loader errors are terminal for the loader that raised them.

Copyright 2025 DNAi inc.
"""

from typing import Optional


class ExifCodecError(Exception):
    """
    Base exception for all exifcodec errors.

    All exifcodec exceptions inherit from this class, allowing
    catch-all error handling for any decoding or loading error.
    """
    def __init__(self, message: str = ""):
        """
        Initialize the exception with an optional error message.

        Args:
            message: Descriptive error message explaining what went wrong
        """
        self.message = message
        super().__init__(message)


class SizeMismatchError(ExifCodecError):
    """
    Raised when a byte window does not match its declared shape.

    The byte length of an entry must equal the element size of its
    format multiplied by its component count. Anything else is
    structural corruption and is never decoded.
    """
    def __init__(self, expected: int, actual: int, message: str = ""):
        self.expected = expected
        self.actual = actual
        super().__init__(
            message or f"Size mismatch: expected {expected} bytes, got {actual}"
        )


class UnrecognizedEnumError(ExifCodecError):
    """
    Raised when a wire code has no mapping in an enumeration.

    The enumeration that failed to resolve is available as
    ``enum_name`` and the offending value as ``code``.
    """
    def __init__(self, enum_name: str, code: object):
        self.enum_name = enum_name
        self.code = code
        super().__init__(f"Unrecognized {enum_name} code: {code!r}")


class TextEncodingError(ExifCodecError):
    """Raised when the bytes of a text entry are not valid UTF-8."""
    def __init__(self, raw: bytes, reason: Optional[str] = None):
        self.raw = raw
        detail = f": {reason}" if reason else ""
        super().__init__(f"Text entry is not valid UTF-8{detail}")


class LoadError(ExifCodecError):
    """
    Raised when the loader cannot produce a dataset.

    Once a loader has raised a LoadError it stays failed; no partial
    dataset is ever produced.
    """
    pass


class TruncatedDataError(LoadError):
    """
    Raised when the input ended before a complete metadata segment.

    This exception is raised when:
    - No bytes were supplied at all
    - The stream stopped inside the EXIF segment
    - A directory offset points past the end of a finished TIFF stream
    """
    pass


class CorruptDataError(LoadError):
    """
    Raised when the accumulated bytes are structurally invalid.

    This exception is raised when:
    - The container is not JPEG, TIFF, RAF or a bare EXIF block
    - The TIFF header has a bad byte order marker or magic number
    - A directory offset is inside the header or loops back on itself
    - A JPEG stream reaches its image data without an EXIF segment
    - The stream exceeds the configured size cap
    """
    pass
