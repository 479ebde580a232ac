"""
Byte-stream builders for synthetic EXIF test images

Entries are (tag, wire_type, count, data) tuples whose data is already
encoded in the byte order of the image being built.
"""

import struct

from exifcodec.loader import Loader

# 13 is the TIFF IFD type, which the parser does not decode
TYPE_SIZES = {1: 1, 2: 1, 3: 2, 4: 4, 5: 8, 6: 1, 7: 1, 8: 2, 9: 4, 10: 8, 11: 4, 12: 8, 13: 4}

# Values filled in once the layout is known
_POINTER = None

_DIRECTORY_ORDER = ('ifd0', 'exif', 'gps', 'interop', 'ifd1')


def ascii_entry(tag, text):
    data = text.encode('utf-8') + b'\x00'
    return (tag, 2, len(data), data)


def short_entry(tag, *values, order='>'):
    return (tag, 3, len(values), b''.join(struct.pack(f'{order}H', v) for v in values))


def long_entry(tag, *values, order='>'):
    return (tag, 4, len(values), b''.join(struct.pack(f'{order}I', v) for v in values))


def rational_entry(tag, *pairs, order='>'):
    data = b''.join(struct.pack(f'{order}II', n, d) for n, d in pairs)
    return (tag, 5, len(pairs), data)


def undefined_entry(tag, data):
    return (tag, 7, len(data), bytes(data))


def build_tiff(ifd0=(), exif=(), gps=(), interop=(), ifd1=(), thumbnail=None, order='>'):
    """
    Build a TIFF block with the given directories.

    Pointer tags for the EXIF, GPS and Interoperability directories and
    the thumbnail tags are added automatically.
    """
    dirs = {
        'ifd0': list(ifd0),
        'exif': list(exif),
        'gps': list(gps),
        'interop': list(interop),
        'ifd1': list(ifd1),
    }
    if dirs['exif'] or dirs['interop']:
        dirs['ifd0'].append((0x8769, 4, 1, _POINTER))
    if dirs['gps']:
        dirs['ifd0'].append((0x8825, 4, 1, _POINTER))
    if dirs['interop']:
        dirs['exif'].append((0xA005, 4, 1, _POINTER))
    if thumbnail is not None:
        dirs['ifd1'].append((0x0201, 4, 1, _POINTER))
        dirs['ifd1'].append(long_entry(0x0202, len(thumbnail), order=order))

    names = [name for name in _DIRECTORY_ORDER if dirs[name] or name == 'ifd0']

    offsets = {}
    position = 8
    for name in names:
        offsets[name] = position
        position += 2 + 12 * len(dirs[name]) + 4
        for _, wire_type, count, _ in dirs[name]:
            size = TYPE_SIZES[wire_type] * count
            if size > 4:
                position += size + (size & 1)
    thumbnail_offset = position

    pointers = {
        0x8769: offsets.get('exif'),
        0x8825: offsets.get('gps'),
        0xA005: offsets.get('interop'),
        0x0201: thumbnail_offset,
    }

    out = bytearray(b'MM' if order == '>' else b'II')
    out += struct.pack(f'{order}HI', 42, 8)
    for name in names:
        entries = dirs[name]
        data_offset = offsets[name] + 2 + 12 * len(entries) + 4
        table = bytearray(struct.pack(f'{order}H', len(entries)))
        extra = bytearray()
        for tag, wire_type, count, data in entries:
            if data is _POINTER:
                data = struct.pack(f'{order}I', pointers[tag])
            size = TYPE_SIZES[wire_type] * count
            assert len(data) == size
            if size <= 4:
                field = data.ljust(4, b'\x00')
            else:
                field = struct.pack(f'{order}I', data_offset + len(extra))
                extra += data
                if size & 1:
                    extra += b'\x00'
            table += struct.pack(f'{order}HHI', tag, wire_type, count) + field
        next_ifd = offsets['ifd1'] if name == 'ifd0' and 'ifd1' in offsets else 0
        table += struct.pack(f'{order}I', next_ifd)
        out += table + extra
    if thumbnail is not None:
        out += thumbnail
    return bytes(out)


def segment(marker, payload):
    return bytes([0xFF, marker]) + struct.pack('>H', len(payload) + 2) + payload


def build_jpeg(tiff=None, before=(), after=()):
    """
    Build a JPEG stream with an optional EXIF APP1 segment.

    ``before`` and ``after`` are extra segments placed around it.
    """
    out = bytearray(b'\xff\xd8')
    out += segment(0xE0, b'JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00')
    for extra in before:
        out += extra
    if tiff is not None:
        out += segment(0xE1, b'Exif\x00\x00' + tiff)
    for extra in after:
        out += extra
    out += segment(0xDB, bytes(65))
    out += segment(0xDA, b'\x01\x01\x00\x00\x3f\x00')
    out += b'\x12\x34\x56\x78' * 16
    out += b'\xff\xd9'
    return bytes(out)


def build_raf(jpeg, jpeg_offset=160):
    """Build a Fujifilm RAF file embedding a JPEG."""
    header = bytearray(b'FUJIFILMCCD-RAW 0201FF383501')
    header = header.ljust(84, b'\x00')
    header += struct.pack('>II', jpeg_offset, len(jpeg))
    header = header.ljust(jpeg_offset, b'\x00')
    return bytes(header) + jpeg + bytes(32)


def minimal_tiff():
    """Big-endian TIFF with a single Orientation entry in IFD0."""
    return build_tiff(ifd0=[(0x0112, 3, 1, b'\x00\x01')])


THUMBNAIL = b'\xff\xd8' + b'\x00' * 30 + b'\xff\xd9'


def sample_tiff(order='>'):
    """TIFF block with entries in every directory and a thumbnail."""
    return build_tiff(
        ifd0=[
            ascii_entry(0x010F, 'Canon'),
            ascii_entry(0x0110, 'Canon EOS 40D'),
            short_entry(0x0112, 6, order=order),
            rational_entry(0x011A, (72, 1), order=order),
            rational_entry(0x011B, (72, 1), order=order),
            short_entry(0x0128, 2, order=order),
        ],
        exif=[
            rational_entry(0x829A, (1, 160), order=order),
            rational_entry(0x829D, (71, 10), order=order),
            undefined_entry(0x9000, b'0221'),
            ascii_entry(0x9003, '2008:05:30 15:56:01'),
            short_entry(0xA001, 1, order=order),
        ],
        gps=[
            (0x0000, 1, 4, b'\x02\x02\x00\x00'),
            ascii_entry(0x0001, 'N'),
            rational_entry(0x0002, (43, 1), (28, 1), (0, 1), order=order),
        ],
        interop=[
            ascii_entry(0x0001, 'R98'),
            undefined_entry(0x0002, b'0100'),
        ],
        ifd1=[
            short_entry(0x0103, 6, order=order),
            rational_entry(0x011A, (72, 1), order=order),
            rational_entry(0x011B, (72, 1), order=order),
            short_entry(0x0128, 2, order=order),
        ],
        thumbnail=THUMBNAIL,
        order=order,
    )


def load(data, chunk_size=None, **kwargs):
    """Feed bytes to a new Loader and return the finished dataset."""
    loader = Loader(**kwargs)
    chunk_size = chunk_size or len(data) or 1
    for start in range(0, len(data), chunk_size):
        if not loader.feed(data[start:start + chunk_size]):
            break
    return loader.finish()
