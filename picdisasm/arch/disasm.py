from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .architecture import Architecture


DATA_MNEMONIC = 'dw'


class OperandType(enum.Enum):
    FILE_REGISTER = enum.auto()
    DESTINATION = enum.auto()  #W or F
    BIT = enum.auto()
    LITERAL = enum.auto()
    ADDRESS = enum.auto()      #Absolute program address
    RELATIVE = enum.auto()     #Signed offset from the next instruction
    FSR = enum.auto()
    INDEXED = enum.auto()      #k[FSRn]
    AUTO_INDEX = enum.auto()   #++FSRn, --FSRn, FSRn++, FSRn--
    DATA = enum.auto()         #Raw word that didn't decode


class IndexMode(enum.Enum):
    """moviw/movwi pre/post increment/decrement mode, by its mm encoding."""

    PRE_INC = 0
    PRE_DEC = 1
    POST_INC = 2
    POST_DEC = 3

    def format(self, fsr: int) -> str:
        reg = f'FSR{fsr}'
        if self is IndexMode.PRE_INC:
            return f'++{reg}'
        if self is IndexMode.PRE_DEC:
            return f'--{reg}'
        if self is IndexMode.POST_INC:
            return f'{reg}++'
        return f'{reg}--'


@dataclass(frozen=True)
class Operand:
    type: OperandType
    value: int
    bits: int
    fsr: int = None
    mode: IndexMode = None

    @property
    def is_byte_literal(self):
        """True for 8-bit literals, which are the ones with an ASCII interpretation."""
        return self.type is OperandType.LITERAL and self.bits == 8 and self.value >= 0


class Instruction:
    """A decoded program word."""

    def __init__(self, arch: Architecture, address: int, word: int, mnemonic: str, operands=()):
        self.arch = arch
        self.address = address #Word address
        self.word = word
        self.mnemonic = mnemonic
        self.operands: list[Operand] = list(operands)

    @property
    def num_operands(self):
        return len(self.operands)

    @property
    def is_data(self):
        """True if the word didn't decode to an instruction."""
        return self.mnemonic == DATA_MNEMONIC

    @property
    def is_relative(self):
        """True if this is a relative branch."""
        return any(op.type is OperandType.RELATIVE for op in self.operands)

    @property
    def is_absolute(self):
        """True if this is an absolute jump/call."""
        return any(op.type is OperandType.ADDRESS for op in self.operands)

    @property
    def target(self) -> int | None:
        """Resolved absolute destination of a branch, or None."""
        for op in self.operands:
            if op.type is OperandType.RELATIVE:
                return (self.address + 1 + op.value) & self.arch.pc_mask
            if op.type is OperandType.ADDRESS:
                return op.value
        return None

    def __repr__(self):
        return f'<{self.__class__.__name__} 0x{self.address:X}: {self.word:04x}  {self.mnemonic}>'

    def __eq__(self, other):
        """Compare both the instruction word and the address."""
        if not isinstance(other, Instruction):
            return False
        return self.address == other.address and self.word == other.word

    def __hash__(self):
        return hash((self.address, self.word))
