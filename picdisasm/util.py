def bits_to_mask(bits):
    return (1 << bits) - 1


def sign_extend(value, bits):
    """Interpret the low `bits` bits of value as a two's complement number."""
    value &= bits_to_mask(bits)
    if value & (1 << (bits - 1)):
        return value - (1 << bits)
    return value


def is_printable_ascii(value):
    return 0x20 <= value < 0x7F
