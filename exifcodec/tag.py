# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Tag lookups

Copyright 2025 DNAi inc.
"""

from typing import Optional

from exifcodec.exif_tags import TagInfo, get_tag_info
from exifcodec.types import DataEncoding, IFD, SupportLevel


class Tag:
    """
    An EXIF tag code.

    Names, titles and descriptions depend on the directory the tag is
    found in, since the same code means different things in different
    directories (0x0001 is GPSLatitudeRef in the GPS directory and
    InteroperabilityIndex in the Interoperability directory).
    """

    def __init__(self, code: int):
        self.code = code

    def __repr__(self) -> str:
        return f"Tag(0x{self.code:04X})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Tag) and other.code == self.code

    def __hash__(self) -> int:
        return hash(self.code)

    def info(self, ifd: IFD) -> Optional[TagInfo]:
        """The dictionary record, if the tag is recorded in the directory."""
        info = get_tag_info(self.code, ifd)
        if info is None or (ifd is not IFD.UNKNOWN and not info.recorded_in(ifd)):
            return None
        return info

    def is_known(self, ifd: IFD) -> bool:
        return self.info(ifd) is not None

    def name(self, ifd: IFD) -> Optional[str]:
        """The name of the tag when found in the given directory."""
        info = self.info(ifd)
        return info.name if info else None

    def title(self, ifd: IFD) -> Optional[str]:
        """The title of the tag when found in the given directory."""
        info = self.info(ifd)
        return info.title if info else None

    def description(self, ifd: IFD) -> Optional[str]:
        """A verbose description of the tag when found in the given directory."""
        info = self.info(ifd)
        return info.description if info else None

    def support_level(self, ifd: IFD, encoding: DataEncoding) -> SupportLevel:
        """
        The tag's support level in a directory for a data encoding.

        For an unknown encoding the level is only reported when it is the
        same for every encoding, otherwise SupportLevel.UNKNOWN.
        """
        info = get_tag_info(self.code, ifd)
        if info is None or ifd not in info.support:
            return SupportLevel.UNKNOWN
        levels = info.support[ifd]
        if encoding is DataEncoding.UNKNOWN:
            if all(level == levels[0] for level in levels):
                return levels[0]
            return SupportLevel.UNKNOWN
        return levels[encoding]
