from __future__ import annotations

from picdisasm.arch import Instruction, Operand, OperandType
from picdisasm.options import FormattingOptions
from picdisasm.util import is_printable_ascii


class ListingFormatter:
    """
    Renders instructions as tab separated listing lines:

        [label:]  [address:]  mnemonic  [operands]  [; comments]
    """

    def __init__(self, options: FormattingOptions):
        self.options = options
        self.width = options.address_field_width

    def format_instruction(self, insn: Instruction) -> str:
        parts = []
        if self.options.labels_enabled:
            parts.append(self.format_label(insn.address) + ':')
        if self.options.show_address:
            parts.append(f'{insn.address:{self.width}x}:')
        parts.append(insn.mnemonic)
        if insn.num_operands > 0:
            parts.append(', '.join(self.format_operand(insn, op) for op in insn.operands))

        line = '\t'.join(parts)
        comments = self.comments(insn)
        if len(comments) > 0:
            line += '\t; ' + ', '.join(comments)
        return line

    def format_label(self, address):
        return f'{self.options.address_label}{address:0{self.width}x}'

    def format_target(self, address):
        if self.options.labels_enabled:
            return self.format_label(address)
        return f'0x{address:0{self.width}x}'

    def format_operand(self, insn: Instruction, op: Operand) -> str:
        base = self.options.literal_base
        if op.type is OperandType.FILE_REGISTER:
            return f'0x{op.value:02x}'
        if op.type is OperandType.DESTINATION:
            return 'F' if op.value else 'W'
        if op.type is OperandType.BIT:
            return str(op.value)
        if op.type is OperandType.LITERAL:
            return base.format(op.value)
        if op.type is OperandType.ADDRESS:
            return self.format_target(op.value)
        if op.type is OperandType.RELATIVE:
            if self.options.labels_enabled:
                return self.format_label(insn.target)
            #MPASM style, relative to the branch itself
            return f'${op.value + 1:+d}'
        if op.type is OperandType.FSR:
            return f'FSR{op.value}'
        if op.type is OperandType.INDEXED:
            return f'{base.format(op.value)}[FSR{op.fsr}]'
        if op.type is OperandType.AUTO_INDEX:
            return op.mode.format(op.fsr)
        return f'0x{op.value:04x}'

    def comments(self, insn: Instruction) -> list[str]:
        comments = []
        if insn.is_relative and self.options.show_destination_comment:
            comments.append(f'0x{insn.target:0{self.width}x}')
        if self.options.literal_show_ascii:
            for op in insn.operands:
                if op.is_byte_literal and is_printable_ascii(op.value):
                    comments.append(f"'{chr(op.value)}'")
        return comments
