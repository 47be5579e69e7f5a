from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from picdisasm.arch import Architecture, resolve_arch
from picdisasm.errors import NoInputFileError, CannotOpenInputError
from picdisasm.files import FileType, resolve_file_type, select_entry_point
from picdisasm.options import FormattingOptions, LiteralBase


logger = logging.getLogger(__name__)


@dataclass
class RawOptions:
    """Option values as parsed from the command line, before any validation."""

    arch: str = None
    file_type: str = None
    address_label: str = None
    no_addresses: bool = False
    no_destination_comments: bool = False
    literal_base: LiteralBase = None #Last literal base flag given
    literal_ascii: bool = False
    input_file: str = None


@dataclass(frozen=True)
class DisassemblyJob:
    """Fully resolved configuration of a single disassembly run."""

    arch: Architecture
    file_type: FileType
    options: FormattingOptions
    input_path: Path
    output: object
    decode: Callable #Entry point selected for file_type

    def run(self):
        """
        Open the input, invoke the decoding entry point once and close the input.

        Raise a `CannotOpenInputError` if the input can't be opened.
        """
        try:
            fileobj = self.input_path.open('rb')
        except OSError as e:
            raise CannotOpenInputError(self.input_path, e.strerror or str(e)) from e

        with fileobj:
            logger.debug(f'decoding {self.input_path} as {self.file_type.name} for {self.arch.name}')
            return self.decode(self.output, fileobj, self.options, self.arch)


def resolve(raw: RawOptions):
    """
    Validate raw options and return (architecture, file type, formatting options).

    Raise a `NoInputFileError` if no input file was given, or the resolvers' errors.
    """
    if not raw.input_file:
        raise NoInputFileError()

    arch = resolve_arch(raw.arch)
    file_type = resolve_file_type(raw.file_type, raw.input_file)
    options = FormattingOptions.from_flags(
        no_addresses=raw.no_addresses,
        no_destination_comments=raw.no_destination_comments,
        literal_base=raw.literal_base,
        literal_ascii=raw.literal_ascii,
        address_label=raw.address_label
    )
    return arch, file_type, options


def create_job(arch, file_type, options, input_file, output) -> DisassemblyJob:
    """Bind the resolved configuration to its decoding entry point. Nothing is opened here."""
    return DisassemblyJob(
        arch=arch,
        file_type=file_type,
        options=options,
        input_path=Path(input_file),
        output=output,
        decode=select_entry_point(file_type)
    )


def resolve_job(raw: RawOptions, output) -> DisassemblyJob:
    return create_job(*resolve(raw), raw.input_file, output)
