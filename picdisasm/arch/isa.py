from __future__ import annotations

import typing
from collections.abc import Iterable
from dataclasses import dataclass

from picdisasm.util import bits_to_mask, sign_extend
from .disasm import Instruction, Operand, OperandType, IndexMode, DATA_MNEMONIC


if typing.TYPE_CHECKING:
    from .architecture import Architecture


class Field:
    """An operand encoded as a bit field of the instruction word."""

    def __init__(self, type: OperandType, shift: int, bits: int, *, signed=False):
        self.type = type
        self.shift = shift
        self.bits = bits
        self.signed = signed

    def extract(self, word):
        value = (word >> self.shift) & bits_to_mask(self.bits)
        if self.signed:
            value = sign_extend(value, self.bits)
        return value

    def decode(self, word) -> Operand:
        return Operand(self.type, self.extract(word), self.bits)


class IndexedField(Field):
    """k[FSRn]: 6-bit signed offset in bits 0-5, FSR number in bit 6."""

    def __init__(self):
        super().__init__(OperandType.INDEXED, 0, 6, signed=True)

    def decode(self, word):
        return Operand(self.type, self.extract(word), self.bits, fsr=(word >> 6) & 1)


class AutoIndexField(Field):
    """Pre/post increment/decrement of FSRn: mode in bits 0-1, FSR number in bit 2."""

    def __init__(self):
        super().__init__(OperandType.AUTO_INDEX, 0, 2)

    def decode(self, word):
        mode = IndexMode(self.extract(word))
        return Operand(self.type, mode.value, self.bits, fsr=(word >> 2) & 1, mode=mode)


@dataclass(frozen=True)
class Opcode:
    mnemonic: str
    pattern: int
    mask: int
    fields: tuple = ()

    def matches(self, word):
        return word & self.mask == self.pattern


def opcode(mnemonic, pattern, mask, *fields):
    return Opcode(mnemonic, pattern, mask, tuple(fields))


class InstructionSet:
    """
    Table driven decoder for one PIC instruction word format.

    Opcodes are tried in table order and the first match wins, so exact encodings
    must precede wider masks that overlap them.
    """

    def __init__(self, *,
        name: str,
        word_bits: int,               #Width of an instruction word
        opcodes: Iterable[Opcode]
    ):
        self.name = name
        self.word_bits = word_bits
        self.word_mask = bits_to_mask(word_bits)
        self.opcodes = tuple(opcodes)
        self.arch: Architecture = None #Will be set by Architecture when added

        for op in self.opcodes:
            if op.pattern & ~op.mask or op.mask & ~self.word_mask:
                raise ValueError(f'Invalid encoding for {op.mnemonic}: {op.pattern:04x}/{op.mask:04x}')

    def lookup(self, word) -> Opcode | None:
        """Return the Opcode matching the given word, or None."""
        if word & ~self.word_mask:
            return None
        for op in self.opcodes:
            if op.matches(word):
                return op
        return None

    def disassemble_one(self, word, address=0) -> Instruction:
        """
        Decode a single program word at the given word address.

        Words that don't match any opcode decode to a `dw` data instruction.
        """
        op = self.lookup(word)
        if op is None:
            return Instruction(self.arch, address, word, DATA_MNEMONIC, [Operand(OperandType.DATA, word, 16)])
        return Instruction(self.arch, address, word, op.mnemonic, [field.decode(word) for field in op.fields])

    def disassemble(self, words, address=0):
        """Decode consecutive program words starting at the given word address."""
        for i, word in enumerate(words):
            yield self.disassemble_one(word, address + i)

    @property
    def mnemonics(self):
        return sorted(set(op.mnemonic for op in self.opcodes))

    def __repr__(self):
        return f"<{self.__class__.__name__} '{self.name}'>"
