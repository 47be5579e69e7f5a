from __future__ import annotations

import abc
import io
import logging
from collections.abc import Iterable
from pathlib import Path

from picdisasm.db import DatabaseEntry
from picdisasm.errors import DecodeError, UnknownFileTypeError, UnrecognizedExtensionError, warning
from picdisasm.disasm import Disassembler, DecodeResult
from .image import ProgramImage


logger = logging.getLogger(__name__)


class FileType(DatabaseEntry, metaclass=abc.ABCMeta):
    """
    Represents an object file container format.

    Every FileType is bound to exactly one decoding entry point, `disassemble_fileobj()`.
    """

    _not_found_error = UnknownFileTypeError

    def __init__(self, *,
        name: str,
        description: str,
        extensions: Iterable[str] = () #File name extensions used for inference, without the '.'
    ):
        super().__init__(name)
        self.description = description
        self.extensions = [ext.lower() for ext in extensions]

    @abc.abstractmethod
    def parse_fileobj(self, fileobj) -> ProgramImage:
        """Parse a binary file object and return a ProgramImage. Raise a DecodeError on malformed input."""
        pass

    @abc.abstractmethod
    def build_fileobj(self, image: ProgramImage, fileobj):
        """Write an image to a binary file object in this format."""
        pass

    def parse_file(self, path):
        """Parse the file at the given path and return a ProgramImage."""
        with Path(path).open('rb') as fileobj:
            return self.parse_fileobj(fileobj)

    def parse_bytes(self, data):
        """Parse the given bytes and return a ProgramImage."""
        return self.parse_fileobj(io.BytesIO(data))

    def disassemble_fileobj(self, output, fileobj, options, arch) -> DecodeResult:
        """
        Decoding entry point: parse the container and write one listing line per program word to `output`.

        Decode failures are logged and returned in the DecodeResult, never raised.
        Lines already written when a failure occurs are kept.
        """
        lines = 0
        try:
            image = self.parse_fileobj(fileobj)
            if image.is_empty:
                warning(f'{self.description} file contains no program data')
            for line in Disassembler(arch, options).listing(image):
                output.write(line + '\n')
                lines += 1
        except DecodeError as e:
            logger.error(str(e))
            return DecodeResult(lines, e)
        logger.debug(f'disassembled {lines} words')
        return DecodeResult(lines)

    def _read_text(self, fileobj):
        try:
            return fileobj.read().decode('UTF-8')
        except UnicodeDecodeError as e:
            raise DecodeError(f'{self.description} file is not valid text: {e}') from e

    @staticmethod
    def by_extension(extension):
        """Return the FileType with the given file extension (without the .), or None if not found."""
        extension = extension.lower()
        for instance in FileType.all():
            if extension in instance.extensions:
                return instance
        return None


def resolve_file_type(name: str = None, filename=None) -> FileType:
    """
    Resolve the file type from an explicit name, or failing that, from the filename extension.

    The explicit name is matched case-insensitively; an unknown name raises an `UnknownFileTypeError`.
    Without a name, the text after the last '.' of the filename must be a known extension,
    otherwise an `UnrecognizedExtensionError` is raised. File contents are never inspected.
    """
    if name:
        file_type = FileType.by_name(name)
        logger.debug(f'file type {file_type.name} given explicitly')
        return file_type

    _, dot, extension = str(filename or '').rpartition('.')
    file_type = FileType.by_extension(extension) if dot else None
    if file_type is None:
        raise UnrecognizedExtensionError(filename)
    logger.debug(f'file type {file_type.name} inferred from extension .{extension}')
    return file_type


def select_entry_point(file_type: FileType):
    """Return the decoding entry point bound to the given FileType."""
    return file_type.disassemble_fileobj
