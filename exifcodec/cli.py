# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Command-line interface for exifcodec

Prints the EXIF data of image files, one section per file.

Copyright 2025 DNAi inc.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from exifcodec import __version__
from exifcodec.data import Dataset
from exifcodec.exceptions import ExifCodecError
from exifcodec.types import ByteOrder, DataOption, DEFAULT_OPTIONS


def dataset_to_dict(data: Dataset) -> Dict[str, object]:
    """
    Collect the rendered values of a dataset, grouped by directory.

    Args:
        data: Loaded dataset

    Returns:
        Dictionary with encoding, byte order and one mapping of
        tag title to text value per non-empty directory
    """
    result: Dict[str, object] = {
        'Encoding': data.encoding.name.title(),
        'ByteOrder': 'BigEndian' if data.byte_order is ByteOrder.BIG_ENDIAN else 'LittleEndian',
    }
    for directory in data.directories():
        if not len(directory):
            continue
        kind = directory.kind
        values = {}
        for entry in directory.entries():
            title = entry.tag.title(kind) or f"Tag 0x{entry.tag_code:04X}"
            values[title] = entry.text_value()
        result[kind.name.title()] = values
    return result


def format_output(data: Dataset, format_type: str = "text") -> str:
    """
    Format a dataset based on format type.

    Args:
        data: Loaded dataset
        format_type: Output format ('text' or 'json')

    Returns:
        Formatted output string
    """
    if format_type == "json":
        return json.dumps(dataset_to_dict(data), indent=2, ensure_ascii=False)
    return data.dump()


def read_file(
    file_path: Path,
    options: DataOption = DEFAULT_OPTIONS,
    fix: bool = False,
    format_type: str = "text"
) -> str:
    """
    Load one file and format its EXIF data.

    Raises:
        OSError: If the file cannot be read
        ExifCodecError: If the file holds no valid EXIF data
    """
    data = Dataset.open(file_path, options=options)
    if fix:
        data.normalize()
    return format_output(data, format_type)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='exifcodec',
        description="exifcodec - Print the EXIF data of image files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print all EXIF data
  exifcodec image.jpg

  # Print in JSON format
  exifcodec -j image.jpg

  # Repair the data before printing, keeping unknown tags
  exifcodec --fix --all-tags image.tif
        """
    )
    parser.add_argument('files', nargs='+', type=Path, help='Image file(s) to read')
    parser.add_argument('-j', '--json', action='store_true', help='Output in JSON format')
    parser.add_argument('--fix', action='store_true', help='Normalize the data before printing')
    parser.add_argument('--all-tags', action='store_true', help='Keep tags unknown to the tag dictionary')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log loader details')
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {__version__}')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    options = DEFAULT_OPTIONS
    if args.all_tags:
        options &= ~DataOption.IGNORE_UNKNOWN_TAGS
    format_type = 'json' if args.json else 'text'

    status = 0
    for index, file_path in enumerate(args.files):
        if len(args.files) > 1:
            if index:
                print()
            print(f"======== {file_path}")
        try:
            print(read_file(file_path, options=options, fix=args.fix, format_type=format_type))
        except (OSError, ExifCodecError) as e:
            print(f"Error: {file_path}: {e}", file=sys.stderr)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
