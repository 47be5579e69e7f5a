from ..architecture import Architecture
from ..isa import InstructionSet, Field, opcode
from ..disasm import OperandType


FILE = Field(OperandType.FILE_REGISTER, 0, 7)
DEST = Field(OperandType.DESTINATION, 7, 1)
BIT = Field(OperandType.BIT, 7, 3)
LITERAL = Field(OperandType.LITERAL, 0, 8)
ADDRESS = Field(OperandType.ADDRESS, 0, 11)
TRIS_PORT = Field(OperandType.FILE_REGISTER, 0, 3)


#Shared with the enhanced mid-range core, which keeps these encodings unchanged.
FILE_OPCODES = [
    opcode('movwf', 0x0080, 0x3F80, FILE),
    opcode('clrw', 0x0100, 0x3F80),
    opcode('clrf', 0x0180, 0x3F80, FILE),

    opcode('subwf', 0x0200, 0x3F00, FILE, DEST),
    opcode('decf', 0x0300, 0x3F00, FILE, DEST),
    opcode('iorwf', 0x0400, 0x3F00, FILE, DEST),
    opcode('andwf', 0x0500, 0x3F00, FILE, DEST),
    opcode('xorwf', 0x0600, 0x3F00, FILE, DEST),
    opcode('addwf', 0x0700, 0x3F00, FILE, DEST),
    opcode('movf', 0x0800, 0x3F00, FILE, DEST),
    opcode('comf', 0x0900, 0x3F00, FILE, DEST),
    opcode('incf', 0x0A00, 0x3F00, FILE, DEST),
    opcode('decfsz', 0x0B00, 0x3F00, FILE, DEST),
    opcode('rrf', 0x0C00, 0x3F00, FILE, DEST),
    opcode('rlf', 0x0D00, 0x3F00, FILE, DEST),
    opcode('swapf', 0x0E00, 0x3F00, FILE, DEST),
    opcode('incfsz', 0x0F00, 0x3F00, FILE, DEST),

    opcode('bcf', 0x1000, 0x3C00, FILE, BIT),
    opcode('bsf', 0x1400, 0x3C00, FILE, BIT),
    opcode('btfsc', 0x1800, 0x3C00, FILE, BIT),
    opcode('btfss', 0x1C00, 0x3C00, FILE, BIT),

    opcode('call', 0x2000, 0x3800, ADDRESS),
    opcode('goto', 0x2800, 0x3800, ADDRESS),
]

SPECIAL_OPCODES = [
    opcode('option', 0x0062, 0x3FFF),
    opcode('sleep', 0x0063, 0x3FFF),
    opcode('clrwdt', 0x0064, 0x3FFF),
    opcode('tris', 0x0064, 0x3FFC, TRIS_PORT),
]


MIDRANGE_OPCODES = [
    opcode('return', 0x0008, 0x3FFF),
    opcode('retfie', 0x0009, 0x3FFF),
    *SPECIAL_OPCODES,
    opcode('nop', 0x0000, 0x3F9F),
    *FILE_OPCODES,

    opcode('movlw', 0x3000, 0x3C00, LITERAL),
    opcode('retlw', 0x3400, 0x3C00, LITERAL),
    opcode('iorlw', 0x3800, 0x3F00, LITERAL),
    opcode('andlw', 0x3900, 0x3F00, LITERAL),
    opcode('xorlw', 0x3A00, 0x3F00, LITERAL),
    opcode('sublw', 0x3C00, 0x3E00, LITERAL),
    opcode('addlw', 0x3E00, 0x3E00, LITERAL),
]


MIDRANGE_ISA = InstructionSet(
    name='midrange',
    word_bits=14,
    opcodes=MIDRANGE_OPCODES
)

ARCH_MIDRANGE = Architecture(
    name='midrange',
    description='Mid-Range',
    isa=MIDRANGE_ISA,
    pc_bits=13
)
