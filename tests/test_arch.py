import pytest

from picdisasm import (Architecture, InstructionSet, OperandType, IndexMode, ARCH_BASELINE, ARCH_MIDRANGE, ARCH_ENHANCED,
    UnknownArchitectureError, NotFoundError, resolve_arch)
from picdisasm.arch.isa import opcode


def decode(arch, word, address=0):
    return arch.disassemble_one(word, address)


def test_all():
    assert list(Architecture.all()) == [ARCH_BASELINE, ARCH_MIDRANGE, ARCH_ENHANCED]

def test_names():
    assert Architecture.all_names_registered() == ['baseline', 'enhanced', 'midrange']

def test_repr():
    assert 'Architecture' in repr(ARCH_MIDRANGE)

def test_isa_arch(arch):
    assert arch.isa.arch is arch

def test_word_bits():
    assert ARCH_BASELINE.word_bits == 12
    assert ARCH_MIDRANGE.word_bits == 14
    assert ARCH_ENHANCED.word_bits == 14

@pytest.mark.parametrize('name, expected', [
    ('baseline', ARCH_BASELINE),
    ('midrange', ARCH_MIDRANGE),
    ('enhanced', ARCH_ENHANCED),
    ('BASELINE', ARCH_BASELINE),
    ('MidRange', ARCH_MIDRANGE),
    ('eNhAnCeD', ARCH_ENHANCED),
])
def test_resolve(name, expected):
    assert resolve_arch(name) is expected

@pytest.mark.parametrize('name', [None, ''])
def test_resolve_default(name):
    assert resolve_arch(name) is ARCH_MIDRANGE

@pytest.mark.parametrize('name', ['mid', 'base', 'pic18', 'midrange ', 'enhanced-midrange'])
def test_resolve_unknown(name):
    with pytest.raises(UnknownArchitectureError) as info:
        resolve_arch(name)
    assert info.value.token == name
    assert name in str(info.value)

def test_not_found():
    with pytest.raises(NotFoundError):
        Architecture.by_name('fake')

def test_double_register():
    with pytest.raises(RuntimeError):
        Architecture._db.register(ARCH_MIDRANGE)

def test_bad_encoding():
    with pytest.raises(ValueError):
        InstructionSet(name='bad', word_bits=12, opcodes=[opcode('bad', 0x001, 0xFF0)])


@pytest.mark.parametrize('word, mnemonic', [
    (0x000, 'nop'),
    (0x002, 'option'),
    (0x003, 'sleep'),
    (0x004, 'clrwdt'),
    (0x040, 'clrw'),
])
def test_baseline_no_operands(word, mnemonic):
    insn = decode(ARCH_BASELINE, word)
    assert insn.mnemonic == mnemonic
    assert insn.num_operands == 0

def test_baseline_tris():
    insn = decode(ARCH_BASELINE, 0x006)
    assert insn.mnemonic == 'tris'
    assert insn.operands[0].type is OperandType.FILE_REGISTER
    assert insn.operands[0].value == 6

def test_baseline_byte_op():
    insn = decode(ARCH_BASELINE, 0x1E5)
    assert insn.mnemonic == 'addwf'
    assert [op.type for op in insn.operands] == [OperandType.FILE_REGISTER, OperandType.DESTINATION]
    assert [op.value for op in insn.operands] == [0x05, 1]

def test_baseline_bit_op():
    insn = decode(ARCH_BASELINE, 0x5A6)
    assert insn.mnemonic == 'bsf'
    assert [op.value for op in insn.operands] == [0x06, 5]

def test_baseline_movwf_clrf():
    assert decode(ARCH_BASELINE, 0x025).mnemonic == 'movwf'
    assert decode(ARCH_BASELINE, 0x025).operands[0].value == 0x05
    assert decode(ARCH_BASELINE, 0x066).mnemonic == 'clrf'

@pytest.mark.parametrize('word, mnemonic, target', [
    (0x905, 'call', 0x005),
    (0xA1F, 'goto', 0x01F),
    (0xBFF, 'goto', 0x1FF),
])
def test_baseline_jumps(word, mnemonic, target):
    insn = decode(ARCH_BASELINE, word, 0x10)
    assert insn.mnemonic == mnemonic
    assert insn.is_absolute
    assert not insn.is_relative
    assert insn.target == target

def test_baseline_literal():
    insn = decode(ARCH_BASELINE, 0xC41)
    assert insn.mnemonic == 'movlw'
    assert insn.operands[0].is_byte_literal
    assert insn.operands[0].value == 0x41

@pytest.mark.parametrize('word', [0x001, 0x041, 0x1000, 0xFFFF])
def test_baseline_data(word):
    insn = decode(ARCH_BASELINE, word)
    assert insn.is_data
    assert insn.operands[0].type is OperandType.DATA
    assert insn.operands[0].value == word


@pytest.mark.parametrize('word, mnemonic', [
    (0x0000, 'nop'),
    (0x0060, 'nop'),
    (0x0008, 'return'),
    (0x0009, 'retfie'),
    (0x0062, 'option'),
    (0x0063, 'sleep'),
    (0x0064, 'clrwdt'),
    (0x0100, 'clrw'),
])
def test_midrange_no_operands(word, mnemonic):
    insn = decode(ARCH_MIDRANGE, word)
    assert insn.mnemonic == mnemonic
    assert insn.num_operands == 0

@pytest.mark.parametrize('word, mnemonic, values', [
    (0x0066, 'tris', [6]),
    (0x00A0, 'movwf', [0x20]),
    (0x01FF, 'clrf', [0x7F]),
    (0x0820, 'movf', [0x20, 0]),
    (0x07A0, 'addwf', [0x20, 1]),
    (0x0FFF, 'incfsz', [0x7F, 1]),
    (0x1683, 'bsf', [0x03, 5]),
    (0x1C7F, 'btfss', [0x7F, 0]),
    (0x3041, 'movlw', [0x41]),
    (0x3741, 'retlw', [0x41]),
    (0x3C05, 'sublw', [0x05]),
    (0x3FFF, 'addlw', [0xFF]),
])
def test_midrange_operands(word, mnemonic, values):
    insn = decode(ARCH_MIDRANGE, word)
    assert insn.mnemonic == mnemonic
    assert [op.value for op in insn.operands] == values

def test_midrange_call():
    insn = decode(ARCH_MIDRANGE, 0x2123)
    assert insn.mnemonic == 'call'
    assert insn.target == 0x123

@pytest.mark.parametrize('word', [0x0001, 0x000B, 0x3B00, 0x4000])
def test_midrange_data(word):
    assert decode(ARCH_MIDRANGE, word).is_data


@pytest.mark.parametrize('word, mnemonic', [
    (0x0000, 'nop'),
    (0x0001, 'reset'),
    (0x000A, 'callw'),
    (0x000B, 'brw'),
])
def test_enhanced_no_operands(word, mnemonic):
    insn = decode(ARCH_ENHANCED, word)
    assert insn.mnemonic == mnemonic
    assert insn.num_operands == 0

def test_enhanced_old_nop_alias():
    assert decode(ARCH_ENHANCED, 0x0060).is_data

def test_enhanced_movlb():
    insn = decode(ARCH_ENHANCED, 0x0021)
    assert insn.mnemonic == 'movlb'
    assert insn.operands[0].value == 1
    assert not insn.operands[0].is_byte_literal

def test_enhanced_movlp():
    insn = decode(ARCH_ENHANCED, 0x3185)
    assert insn.mnemonic == 'movlp'
    assert insn.operands[0].value == 5

def test_enhanced_addfsr():
    insn = decode(ARCH_ENHANCED, 0x317F)
    assert insn.mnemonic == 'addfsr'
    assert insn.operands[0].type is OperandType.FSR
    assert insn.operands[0].value == 1
    assert insn.operands[1].value == -1

@pytest.mark.parametrize('word, mnemonic, fsr, mode', [
    (0x0010, 'moviw', 0, IndexMode.PRE_INC),
    (0x0012, 'moviw', 0, IndexMode.POST_INC),
    (0x001D, 'movwi', 1, IndexMode.PRE_DEC),
    (0x001F, 'movwi', 1, IndexMode.POST_DEC),
])
def test_enhanced_auto_index(word, mnemonic, fsr, mode):
    insn = decode(ARCH_ENHANCED, word)
    assert insn.mnemonic == mnemonic
    op = insn.operands[0]
    assert op.type is OperandType.AUTO_INDEX
    assert op.fsr == fsr
    assert op.mode is mode

@pytest.mark.parametrize('word, mnemonic, fsr, offset', [
    (0x3F7F, 'moviw', 1, -1),
    (0x3F1F, 'moviw', 0, 31),
    (0x3FC0, 'movwi', 1, 0),
    (0x3FA0, 'movwi', 0, -32),
])
def test_enhanced_indexed(word, mnemonic, fsr, offset):
    insn = decode(ARCH_ENHANCED, word)
    assert insn.mnemonic == mnemonic
    assert insn.operands[0].type is OperandType.INDEXED
    assert insn.operands[0].fsr == fsr
    assert insn.operands[0].value == offset

@pytest.mark.parametrize('word, address, target', [
    (0x3202, 0, 3),
    (0x33FF, 6, 6),
    (0x3300, 0x100, 0x001),
    (0x3200, 0x7FFF, 0x0000),
])
def test_enhanced_bra(word, address, target):
    insn = decode(ARCH_ENHANCED, word, address)
    assert insn.mnemonic == 'bra'
    assert insn.is_relative
    assert not insn.is_absolute
    assert insn.target == target

@pytest.mark.parametrize('word, mnemonic', [
    (0x35A0, 'lslf'),
    (0x3620, 'lsrf'),
    (0x37A0, 'asrf'),
    (0x3BA0, 'subwfb'),
    (0x3DA0, 'addwfc'),
])
def test_enhanced_shift_ops(word, mnemonic):
    insn = decode(ARCH_ENHANCED, word)
    assert insn.mnemonic == mnemonic
    assert insn.operands[0].value == 0x20

def test_enhanced_literals_narrowed():
    assert decode(ARCH_ENHANCED, 0x3041).mnemonic == 'movlw'
    assert decode(ARCH_ENHANCED, 0x3441).mnemonic == 'retlw'
    assert decode(ARCH_ENHANCED, 0x3C41).mnemonic == 'sublw'
    assert decode(ARCH_ENHANCED, 0x3E41).mnemonic == 'addlw'

def test_disassemble_addresses(arch):
    insns = list(arch.disassemble([0, 0, 0], address=0x10))
    assert [insn.address for insn in insns] == [0x10, 0x11, 0x12]

def test_insn_eq():
    assert decode(ARCH_MIDRANGE, 0x3041, 1) == decode(ARCH_ENHANCED, 0x3041, 1)
    assert decode(ARCH_MIDRANGE, 0x3041, 1) != decode(ARCH_MIDRANGE, 0x3041, 2)
    assert len({decode(ARCH_MIDRANGE, 0, 1), decode(ARCH_MIDRANGE, 0, 1)}) == 1

def test_mnemonics_superset():
    assert set(ARCH_MIDRANGE.isa.mnemonics) <= set(ARCH_ENHANCED.isa.mnemonics)
    assert len(ARCH_BASELINE.isa.mnemonics) == 33
    assert len(ARCH_MIDRANGE.isa.mnemonics) == 37
