from __future__ import annotations

from dataclasses import dataclass

from picdisasm.arch import Architecture, Instruction
from picdisasm.errors import DecodeError
from picdisasm.options import FormattingOptions
from picdisasm.listing import ListingFormatter


WORD_SIZE = 2 #Program words are stored as little endian 16-bit values


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of a decoding entry point call."""

    lines: int
    error: DecodeError = None

    @property
    def ok(self):
        return self.error is None


class Disassembler:
    """Decodes program images and renders them as listings."""

    def __init__(self, arch: Architecture, options: FormattingOptions = None):
        """
        Create a new disassembler.

        `arch` - The architecture.
        `options` - Listing formatting options (defaults if not given).
        """
        self.arch = arch
        self.options = options if options is not None else FormattingOptions()
        self.formatter = ListingFormatter(self.options)

    def words(self, segment):
        """
        Yield (word address, word) pairs for a segment.

        Raise a `DecodeError` if the segment is misaligned or ends in the middle of a word.
        """
        if segment.address % WORD_SIZE != 0:
            raise DecodeError(f'Program data at odd byte address 0x{segment.address:x}')

        base = segment.address // WORD_SIZE
        full_size = segment.size - segment.size % WORD_SIZE
        for offset in range(0, full_size, WORD_SIZE):
            word = int.from_bytes(segment.data[offset:offset + WORD_SIZE], 'little')
            yield base + offset // WORD_SIZE, word

        if full_size != segment.size:
            raise DecodeError(f'Truncated program word at byte address 0x{segment.address + full_size:x}')

    def disassemble(self, image):
        """Decode an image and yield Instructions in address order."""
        for segment in image.segments:
            for address, word in self.words(segment):
                yield self.arch.disassemble_one(word, address)

    def listing(self, image):
        """Decode an image and yield one rendered line per instruction."""
        for insn in self.disassemble(image):
            yield self.format_instruction(insn)

    def format_instruction(self, insn: Instruction) -> str:
        return self.formatter.format_instruction(insn)
