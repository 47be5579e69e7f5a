from __future__ import annotations

import logging

from picdisasm.db import DatabaseEntry
from picdisasm.errors import UnknownArchitectureError
from picdisasm.util import bits_to_mask
from .isa import InstructionSet


logger = logging.getLogger(__name__)


DEFAULT_ARCH_NAME = 'midrange'


class Architecture(DatabaseEntry):
    """Contains information about an 8-bit PIC core."""

    _not_found_error = UnknownArchitectureError

    def __init__(self, *,
        name: str,
        description: str,               #Human readable name shown in usage
        isa: InstructionSet,
        pc_bits: int                    #Width of the program counter, in word address bits
    ):
        super().__init__(name)
        self.description = description
        self.isa = isa
        self.pc_bits = pc_bits
        self.pc_mask = bits_to_mask(pc_bits)
        self.word_bits = isa.word_bits

        isa.arch = self

    def disassemble(self, words, address=0):
        """Decode consecutive program words starting at the given word address."""
        return self.isa.disassemble(words, address)

    def disassemble_one(self, word, address=0):
        return self.isa.disassemble_one(word, address)


def resolve_arch(name: str = None) -> Architecture:
    """
    Resolve a user supplied architecture name (case-insensitive).

    No name (or an empty one) selects the mid-range core.
    Raise an `UnknownArchitectureError` for any other unrecognized name.
    """
    arch = Architecture.by_name(name or DEFAULT_ARCH_NAME)
    logger.debug(f'resolved architecture {arch.name}')
    return arch
