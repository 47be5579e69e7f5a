from ..architecture import Architecture
from ..isa import InstructionSet, Field, IndexedField, AutoIndexField, opcode
from ..disasm import OperandType
from .midrange import FILE, DEST, LITERAL, FILE_OPCODES, SPECIAL_OPCODES


ENHANCED_OPCODES = [
    opcode('nop', 0x0000, 0x3FFF),
    opcode('reset', 0x0001, 0x3FFF),
    opcode('return', 0x0008, 0x3FFF),
    opcode('retfie', 0x0009, 0x3FFF),
    opcode('callw', 0x000A, 0x3FFF),
    opcode('brw', 0x000B, 0x3FFF),
    opcode('moviw', 0x0010, 0x3FF8, AutoIndexField()),
    opcode('movwi', 0x0018, 0x3FF8, AutoIndexField()),
    opcode('movlb', 0x0020, 0x3FE0, Field(OperandType.LITERAL, 0, 5)),
    *SPECIAL_OPCODES,
    *FILE_OPCODES,

    opcode('movlw', 0x3000, 0x3F00, LITERAL),
    opcode('addfsr', 0x3100, 0x3F80, Field(OperandType.FSR, 6, 1), Field(OperandType.LITERAL, 0, 6, signed=True)),
    opcode('movlp', 0x3180, 0x3F80, Field(OperandType.LITERAL, 0, 7)),
    opcode('bra', 0x3200, 0x3E00, Field(OperandType.RELATIVE, 0, 9, signed=True)),
    opcode('retlw', 0x3400, 0x3F00, LITERAL),
    opcode('lslf', 0x3500, 0x3F00, FILE, DEST),
    opcode('lsrf', 0x3600, 0x3F00, FILE, DEST),
    opcode('asrf', 0x3700, 0x3F00, FILE, DEST),
    opcode('iorlw', 0x3800, 0x3F00, LITERAL),
    opcode('andlw', 0x3900, 0x3F00, LITERAL),
    opcode('xorlw', 0x3A00, 0x3F00, LITERAL),
    opcode('subwfb', 0x3B00, 0x3F00, FILE, DEST),
    opcode('sublw', 0x3C00, 0x3F00, LITERAL),
    opcode('addwfc', 0x3D00, 0x3F00, FILE, DEST),
    opcode('addlw', 0x3E00, 0x3F00, LITERAL),
    opcode('moviw', 0x3F00, 0x3F80, IndexedField()),
    opcode('movwi', 0x3F80, 0x3F80, IndexedField()),
]


ENHANCED_ISA = InstructionSet(
    name='enhanced',
    word_bits=14,
    opcodes=ENHANCED_OPCODES
)

ARCH_ENHANCED = Architecture(
    name='enhanced',
    description='Enhanced Mid-Range',
    isa=ENHANCED_ISA,
    pc_bits=15
)
