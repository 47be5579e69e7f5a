from .architecture import Architecture, resolve_arch, DEFAULT_ARCH_NAME
from .isa import InstructionSet, Opcode, Field
from .disasm import Instruction, Operand, OperandType, IndexMode

from .arches import *
