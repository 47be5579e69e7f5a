from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import bincopy

if TYPE_CHECKING:
    from .format import FileType


@dataclass(frozen=True)
class ImageSegment:
    """Contiguous program data at a byte address."""

    address: int
    data: bytes

    @property
    def size(self):
        return len(self.data)

    @property
    def end(self):
        return self.address + self.size


class ProgramImage:
    """Program data parsed from an object file container."""

    def __init__(self, file_type: FileType, segments):
        """
        Do not call directly - use FileType.parse_xxx() methods.

        file_type - FileType this image was parsed from.
        segments - iterable of ImageSegment.
        """
        self.file_type = file_type
        self.segments: list[ImageSegment] = sorted(segments, key=lambda seg: seg.address)

    @classmethod
    def from_binfile(cls, file_type: FileType, binfile: bincopy.BinFile) -> ProgramImage:
        return cls(file_type, [ImageSegment(seg.minimum_address, bytes(seg.data)) for seg in binfile.segments])

    def to_binfile(self) -> bincopy.BinFile:
        binfile = bincopy.BinFile()
        for segment in self.segments:
            binfile.add_binary(segment.data, segment.address)
        return binfile

    @property
    def is_empty(self):
        return all(seg.size == 0 for seg in self.segments)

    @property
    def size(self):
        """Total number of data bytes."""
        return sum(seg.size for seg in self.segments)

    def build_fileobj(self, fileobj):
        """Write the image back to a file object in its container format."""
        self.file_type.build_fileobj(self, fileobj)

    def build_file(self, path):
        with Path(path).open('wb') as fileobj:
            self.build_fileobj(fileobj)

    def build_bytes(self) -> bytes:
        fileobj = io.BytesIO()
        self.build_fileobj(fileobj)
        return fileobj.getvalue()
