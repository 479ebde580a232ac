# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Directory: the entries of a single IFD

Copyright 2025 DNAi inc.
"""

from typing import List, Optional, Tuple, TYPE_CHECKING

from exifcodec.entry import Entry
from exifcodec.types import IFD

if TYPE_CHECKING:
    from exifcodec.data import Dataset


class Directory:
    """
    Container for all EXIF entries of a single image file directory.

    Entries keep the order they were read in. The kind is stored as its
    wire code and resolved on access, so an unrecognized kind surfaces as
    an error to the caller rather than a guess.
    """

    def __init__(self, ifd_code: int, dataset: "Dataset"):
        self.ifd_code = ifd_code
        self._dataset = dataset
        self._entries: List[Entry] = []

    def __repr__(self) -> str:
        return f"Directory(ifd={self.ifd_code}, entries={len(self._entries)})"

    @property
    def dataset(self) -> "Dataset":
        return self._dataset

    @property
    def kind(self) -> IFD:
        """
        The kind of the directory.

        Raises:
            UnrecognizedEnumError: If the stored code is not an IFD
        """
        return IFD.from_code(self.ifd_code)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __contains__(self, tag: int) -> bool:
        return self.get_entry(tag) is not None

    def entries(self) -> Tuple[Entry, ...]:
        """The entries of the directory, in order."""
        return tuple(self._entries)

    def get_entry(self, tag: int) -> Optional[Entry]:
        """The first entry with the given tag code, if any."""
        for entry in self._entries:
            if entry.tag_code == tag:
                return entry
        return None

    def _add(self, entry: Entry) -> None:
        self._entries.append(entry)

    def _remove(self, entry: Entry) -> None:
        self._entries.remove(entry)
