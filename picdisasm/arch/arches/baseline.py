from ..architecture import Architecture
from ..isa import InstructionSet, Field, opcode
from ..disasm import OperandType


FILE = Field(OperandType.FILE_REGISTER, 0, 5)
DEST = Field(OperandType.DESTINATION, 5, 1)
BIT = Field(OperandType.BIT, 5, 3)
LITERAL = Field(OperandType.LITERAL, 0, 8)


BASELINE_OPCODES = [
    opcode('nop', 0x000, 0xFFF),
    opcode('option', 0x002, 0xFFF),
    opcode('sleep', 0x003, 0xFFF),
    opcode('clrwdt', 0x004, 0xFFF),
    opcode('tris', 0x004, 0xFFC, Field(OperandType.FILE_REGISTER, 0, 3)),
    opcode('movwf', 0x020, 0xFE0, FILE),
    opcode('clrw', 0x040, 0xFFF),
    opcode('clrf', 0x060, 0xFE0, FILE),

    opcode('subwf', 0x080, 0xFC0, FILE, DEST),
    opcode('decf', 0x0C0, 0xFC0, FILE, DEST),
    opcode('iorwf', 0x100, 0xFC0, FILE, DEST),
    opcode('andwf', 0x140, 0xFC0, FILE, DEST),
    opcode('xorwf', 0x180, 0xFC0, FILE, DEST),
    opcode('addwf', 0x1C0, 0xFC0, FILE, DEST),
    opcode('movf', 0x200, 0xFC0, FILE, DEST),
    opcode('comf', 0x240, 0xFC0, FILE, DEST),
    opcode('incf', 0x280, 0xFC0, FILE, DEST),
    opcode('decfsz', 0x2C0, 0xFC0, FILE, DEST),
    opcode('rrf', 0x300, 0xFC0, FILE, DEST),
    opcode('rlf', 0x340, 0xFC0, FILE, DEST),
    opcode('swapf', 0x380, 0xFC0, FILE, DEST),
    opcode('incfsz', 0x3C0, 0xFC0, FILE, DEST),

    opcode('bcf', 0x400, 0xF00, FILE, BIT),
    opcode('bsf', 0x500, 0xF00, FILE, BIT),
    opcode('btfsc', 0x600, 0xF00, FILE, BIT),
    opcode('btfss', 0x700, 0xF00, FILE, BIT),

    opcode('retlw', 0x800, 0xF00, LITERAL),
    opcode('call', 0x900, 0xF00, Field(OperandType.ADDRESS, 0, 8)),
    opcode('goto', 0xA00, 0xE00, Field(OperandType.ADDRESS, 0, 9)),
    opcode('movlw', 0xC00, 0xF00, LITERAL),
    opcode('iorlw', 0xD00, 0xF00, LITERAL),
    opcode('andlw', 0xE00, 0xF00, LITERAL),
    opcode('xorlw', 0xF00, 0xF00, LITERAL),
]


BASELINE_ISA = InstructionSet(
    name='baseline',
    word_bits=12,
    opcodes=BASELINE_OPCODES
)

ARCH_BASELINE = Architecture(
    name='baseline',
    description='Baseline',
    isa=BASELINE_ISA,
    pc_bits=11
)
