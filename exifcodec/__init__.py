# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
exifcodec - EXIF metadata decoding in pure Python

Loads the EXIF data of JPEG, TIFF and RAF files incrementally, exposes it
as directories of entries, and decodes entry values on demand.

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

from exifcodec.content import Directory
from exifcodec.data import Dataset
from exifcodec.entry import Entry
from exifcodec.exceptions import (
    CorruptDataError,
    ExifCodecError,
    LoadError,
    SizeMismatchError,
    TextEncodingError,
    TruncatedDataError,
    UnrecognizedEnumError,
)
from exifcodec.loader import Loader, LoaderState
from exifcodec.tag import Tag
from exifcodec.types import (
    ByteOrder,
    DataEncoding,
    DataOption,
    DEFAULT_OPTIONS,
    IFD,
    PrimitiveFormat,
    Rational,
    SupportLevel,
)
from exifcodec.value import Value, encode, extract

__all__ = [
    'ByteOrder',
    'CorruptDataError',
    'DataEncoding',
    'DataOption',
    'Dataset',
    'DEFAULT_OPTIONS',
    'Directory',
    'Entry',
    'ExifCodecError',
    'IFD',
    'LoadError',
    'Loader',
    'LoaderState',
    'PrimitiveFormat',
    'Rational',
    'SizeMismatchError',
    'SupportLevel',
    'Tag',
    'TextEncodingError',
    'TruncatedDataError',
    'UnrecognizedEnumError',
    'Value',
    'encode',
    'extract',
]
