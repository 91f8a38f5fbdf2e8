"""Tabular display of bitwise operations on 16-bit values."""

MASK = 0x8000
_USHORT = 0xFFFF
_HEADER = "Expressão       binary              decimal  octal  hex"


def format_bits(number, mask=MASK):
    """Render the bits of ``number`` selected by ``mask`` and every lower bit."""
    digits = []
    while mask > 0:
        digits.append("1" if number & mask else "0")
        mask >>= 1
    return "".join(digits)


def _row(label, value):
    return f"{label:<16}{format_bits(value)}  {value:7d}  {value:5o}  {value:3x}"


def display_bit_ops(um, dois):
    """Return a table of AND, OR, XOR and AND-NOT applied to two 16-bit values."""
    um &= _USHORT
    dois &= _USHORT
    rows = [
        ("um", um),
        ("dois", dois),
        ("um & dois", um & dois),
        ("um | dois", um | dois),
        ("um ^ dois", um ^ dois),
        ("um &~ dois", um & ~dois & _USHORT),
    ]
    lines = [_HEADER, *(_row(label, value) for label, value in rows)]
    return "\n".join(lines) + "\n"