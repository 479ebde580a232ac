# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Value formatter for rendering entries as human-readable text.

Used for diagnostic dumps. Rendering never fails on well-formed entries:
numbers are rendered as text, text that is not valid UTF-8 is decoded with
the encoding chardet detects, and opaque payloads are summarized.

Copyright 2025 DNAi inc.
"""

import logging
import math
from typing import Any, Dict, List, TYPE_CHECKING

import chardet

from exifcodec.exceptions import ExifCodecError, UnrecognizedEnumError
from exifcodec.primitives import read_f32, read_f64
from exifcodec.types import ByteOrder, IFD, PrimitiveFormat, Rational
from exifcodec.value import Value

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from exifcodec.entry import Entry


ENUM_MAPS: Dict[str, Dict[int, str]] = {
    'Compression': {
        1: 'Uncompressed',
        2: 'CCITT 1D',
        3: 'Group 3 Fax',
        4: 'Group 4 Fax',
        5: 'LZW',
        6: 'JPEG compression',
        7: 'JPEG',
        8: 'Deflate',
        32773: 'PackBits',
    },
    'PhotometricInterpretation': {
        0: 'WhiteIsZero',
        1: 'BlackIsZero',
        2: 'RGB',
        3: 'RGB Palette',
        4: 'Transparency Mask',
        5: 'CMYK',
        6: 'YCbCr',
        8: 'CIELab',
    },
    'Orientation': {
        1: 'Top-left',
        2: 'Top-right',
        3: 'Bottom-right',
        4: 'Bottom-left',
        5: 'Left-top',
        6: 'Right-top',
        7: 'Right-bottom',
        8: 'Left-bottom',
    },
    'ResolutionUnit': {
        1: 'None',
        2: 'Inch',
        3: 'Centimeter',
    },
    'YCbCrPositioning': {
        1: 'Centered',
        2: 'Co-sited',
    },
    'PlanarConfiguration': {
        1: 'Chunky format',
        2: 'Planar format',
    },
    'ExposureProgram': {
        0: 'Not defined',
        1: 'Manual',
        2: 'Normal program',
        3: 'Aperture priority',
        4: 'Shutter priority',
        5: 'Creative program (biased toward depth of field)',
        6: 'Action program (biased toward fast shutter speed)',
        7: 'Portrait mode',
        8: 'Landscape mode',
    },
    'MeteringMode': {
        0: 'Unknown',
        1: 'Average',
        2: 'Center-weighted average',
        3: 'Spot',
        4: 'Multi spot',
        5: 'Pattern',
        6: 'Partial',
        255: 'Other',
    },
    'LightSource': {
        0: 'Unknown',
        1: 'Daylight',
        2: 'Fluorescent',
        3: 'Tungsten incandescent light',
        4: 'Flash',
        9: 'Fine weather',
        10: 'Cloudy weather',
        11: 'Shade',
        12: 'Daylight fluorescent',
        13: 'Day white fluorescent',
        14: 'Cool white fluorescent',
        15: 'White fluorescent',
        17: 'Standard light A',
        18: 'Standard light B',
        19: 'Standard light C',
        20: 'D55',
        21: 'D65',
        22: 'D75',
        24: 'ISO studio tungsten',
        255: 'Other',
    },
    'SensingMethod': {
        1: 'Not defined',
        2: 'One-chip color area sensor',
        3: 'Two-chip color area sensor',
        4: 'Three-chip color area sensor',
        5: 'Color sequential area sensor',
        7: 'Trilinear sensor',
        8: 'Color sequential linear sensor',
    },
    'ColorSpace': {
        1: 'sRGB',
        2: 'Adobe RGB',
        0xFFFF: 'Uncalibrated',
    },
    'CustomRendered': {
        0: 'Normal process',
        1: 'Custom process',
    },
    'ExposureMode': {
        0: 'Auto exposure',
        1: 'Manual exposure',
        2: 'Auto bracket',
    },
    'WhiteBalance': {
        0: 'Auto white balance',
        1: 'Manual white balance',
    },
    'SceneCaptureType': {
        0: 'Standard',
        1: 'Landscape',
        2: 'Portrait',
        3: 'Night scene',
    },
    'GainControl': {
        0: 'Normal',
        1: 'Low gain up',
        2: 'High gain up',
        3: 'Low gain down',
        4: 'High gain down',
    },
    'Contrast': {0: 'Normal', 1: 'Soft', 2: 'Hard'},
    'Saturation': {0: 'Normal', 1: 'Low saturation', 2: 'High saturation'},
    'Sharpness': {0: 'Normal', 1: 'Soft', 2: 'Hard'},
    'SubjectDistanceRange': {
        0: 'Unknown',
        1: 'Macro',
        2: 'Close view',
        3: 'Distant view',
    },
    'FileSource': {
        0: 'Others',
        1: 'Scanner of transparent type',
        2: 'Scanner of reflex type',
        3: 'DSC',
    },
    'SceneType': {1: 'Directly photographed'},
    'GPSAltitudeRef': {0: 'Sea level', 1: 'Sea level reference'},
    'GPSDifferential': {0: 'Without correction', 1: 'Correction applied'},
}
ENUM_MAPS['FocalPlaneResolutionUnit'] = ENUM_MAPS['ResolutionUnit']

_VERSION_TAGS = {
    'ExifVersion': 'Exif Version',
    'FlashPixVersion': 'FlashPix Version',
    'InteroperabilityVersion': 'Interoperability Version',
}

_COMPONENT_NAMES = {0: '-', 1: 'Y', 2: 'Cb', 3: 'Cr', 4: 'R', 5: 'G', 6: 'B'}

# Character code prefixes of UserComment and the GPS text tags
_CHARSET_PREFIXES = {
    b'ASCII\x00\x00\x00': 'ascii',
    b'UNICODE\x00': 'utf-16',
    b'JIS\x00\x00\x00\x00\x00': 'shift_jis',
    b'\x00' * 8: None,
}


def format_entry_value(entry: "Entry") -> str:
    """
    Render an entry as display text.

    Args:
        entry: Entry to render

    Returns:
        Human-readable string for the entry
    """
    directory = entry.directory
    order = directory.dataset.byte_order
    try:
        ifd = directory.kind
    except UnrecognizedEnumError:
        ifd = IFD.UNKNOWN
    tag_name = entry.tag.name(ifd) or ''

    try:
        fmt = entry.format
    except UnrecognizedEnumError:
        return _format_wire_value(entry, order)

    if fmt is PrimitiveFormat.TEXT:
        return decode_text(bytes(entry.raw_data()))

    try:
        value = entry.value(order)
    except ExifCodecError as e:
        return f"({e.message})"
    return format_value(tag_name, value)


def format_value(tag_name: str, value: Value) -> str:
    """
    Format a decoded value for a tag name.

    Args:
        tag_name: Tag name (e.g. "Orientation"), or '' for unknown tags
        value: Decoded value

    Returns:
        Formatted string value
    """
    data = value.data
    if value.format is PrimitiveFormat.TEXT:
        return data
    if not data:
        return ''

    if value.format is PrimitiveFormat.UNDEFINED:
        return _format_undefined(tag_name, bytes(data))

    if tag_name in ENUM_MAPS and len(data) == 1 and isinstance(data[0], int):
        mapping = ENUM_MAPS[tag_name]
        return mapping.get(data[0], f"Unknown value {data[0]}")

    if tag_name == 'Flash' and isinstance(data[0], int):
        return _format_flash(data[0])

    if tag_name == 'GPSVersionID':
        return '.'.join(str(v) for v in data)

    if isinstance(data[0], Rational):
        return _format_rationals(tag_name, data)

    return ', '.join(str(v) for v in data)


def decode_text(raw: bytes) -> str:
    """
    Decode text bytes up to the first NUL.

    Bytes that are not valid UTF-8 are decoded with the encoding chardet
    detects, falling back to Latin-1.
    """
    nul = raw.find(b'\x00')
    if nul >= 0:
        raw = raw[:nul]
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError:
        pass
    detected = chardet.detect(raw)
    encoding = detected.get('encoding')
    if encoding:
        try:
            return raw.decode(encoding, errors='replace')
        except LookupError:
            pass
    return raw.decode('latin-1')


def _format_undefined(tag_name: str, data: bytes) -> str:
    if tag_name in _VERSION_TAGS and len(data) == 4:
        return f"{_VERSION_TAGS[tag_name]} {_format_version(data)}"

    if tag_name == 'ComponentsConfiguration':
        return ' '.join(_COMPONENT_NAMES.get(b, 'Reserved') for b in data)

    if tag_name in ('FileSource', 'SceneType') and len(data) == 1:
        return ENUM_MAPS[tag_name].get(data[0], f"Unknown value {data[0]}")

    if tag_name in ('UserComment', 'GPSProcessingMethod', 'GPSAreaInformation'):
        return _format_comment(data)

    return f"{len(data)} bytes undefined data"


def _format_version(data: bytes) -> str:
    """'0220' -> '2.2', '0221' -> '2.21', '0100' -> '1.0'."""
    text = data.decode('ascii', errors='replace')
    if not text[:2].isdigit():
        return text
    minor = text[2:].rstrip('0') or '0'
    return f"{int(text[:2])}.{minor}"


def _format_comment(data: bytes) -> str:
    prefix, body = data[:8], data[8:]
    if len(data) < 8 or prefix not in _CHARSET_PREFIXES:
        return decode_text(data)
    encoding = _CHARSET_PREFIXES[prefix]
    if encoding is None:
        return decode_text(body).strip()
    return body.decode(encoding, errors='replace').rstrip('\x00').strip()


def _format_flash(value: int) -> str:
    if value & 0x20:
        return 'No flash function'
    parts = ['Flash fired' if value & 0x01 else 'Flash did not fire']
    returned = (value >> 1) & 0x03
    if returned == 2:
        parts.append('strobe return light not detected')
    elif returned == 3:
        parts.append('strobe return light detected')
    mode = (value >> 3) & 0x03
    if mode == 1:
        parts.append('compulsory flash mode')
    elif mode == 2:
        parts.append('compulsory flash suppression')
    elif mode == 3:
        parts.append('auto mode')
    if value & 0x40:
        parts.append('red-eye reduction mode')
    return ', '.join(parts)


def _format_rationals(tag_name: str, data: List[Rational]) -> str:
    first = data[0].to_float()
    if len(data) == 1 and first is not None:
        if tag_name == 'ExposureTime':
            if 0 < first < 1:
                return f"1/{round(1 / first)} sec."
            return f"{_decimal(first)} sec."
        if tag_name == 'FNumber':
            return f"f/{first:.1f}"
        if tag_name == 'FocalLength':
            return f"{first:.1f} mm"
        if tag_name in ('ApertureValue', 'MaxApertureValue', 'ShutterSpeedValue'):
            try:
                return _format_apex(tag_name, first)
            except OverflowError:
                logger.debug(f"{tag_name} value {first} outside APEX range")
        if tag_name in ('ExposureBiasValue', 'BrightnessValue'):
            return f"{first:+.2f} EV"
        if tag_name in ('SubjectDistance', 'GPSAltitude'):
            return f"{_decimal(first)} m"
    if tag_name == 'GPSTimeStamp' and len(data) == 3:
        parts = [r.to_float() for r in data]
        if None not in parts:
            return f"{int(parts[0]):02d}:{int(parts[1]):02d}:{parts[2]:05.2f}"
    return ', '.join(_format_rational(r) for r in data)


def _format_apex(tag_name: str, value: float) -> str:
    """
    Render an APEX aperture or shutter speed value.

    Raises:
        OverflowError: If the value has no finite f-number or exposure time
    """
    if tag_name == 'ShutterSpeedValue':
        seconds = math.pow(2, -value)
        if 0 < seconds < 1:
            return f"{value:.2f} EV (1/{round(1 / seconds)} sec.)"
        return f"{value:.2f} EV ({_decimal(seconds)} sec.)"
    return f"{value:.2f} EV (f/{math.pow(2, value / 2):.1f})"


def _format_rational(value: Rational) -> str:
    number = value.to_float()
    if number is None:
        return str(value)
    return _decimal(number)


def _decimal(number: float) -> str:
    if number == int(number):
        return str(int(number))
    return f"{number:.2f}"


def _format_wire_value(entry: "Entry", order: ByteOrder) -> str:
    """Render entries whose wire type is outside PrimitiveFormat."""
    raw = entry.raw_data()
    readers: Dict[int, Any] = {11: (4, read_f32), 12: (8, read_f64)}
    if entry.format_code in readers:
        size, read = readers[entry.format_code]
        if len(raw) == size * entry.components:
            values = [read(raw[i * size:(i + 1) * size], order) for i in range(entry.components)]
            return ', '.join(f"{v:g}" for v in values)
    return f"{len(raw)} bytes unknown data"
