from __future__ import annotations

import enum
from dataclasses import dataclass, field

from picdisasm.errors import InvalidOptionError


ADDRESS_FIELD_WIDTH = 3 #In address digits. Not user configurable in this version.


class LiteralBase(enum.Enum):
    """Numeral base used to render literal operands."""

    HEX = 'hex'
    DEC = 'dec'
    BIN = 'bin'

    def format(self, value: int) -> str:
        """Render a literal. Negative values get a leading '-' followed by the magnitude."""
        sign = '-' if value < 0 else ''
        value = abs(value)
        if self is LiteralBase.HEX:
            return f'{sign}0x{value:02x}'
        if self is LiteralBase.BIN:
            return f'{sign}0b{value:08b}'
        return f'{sign}{value}'

    @classmethod
    def parse(cls, name) -> LiteralBase:
        """Parse a base name (hex, dec or bin) case-insensitively."""
        try:
            return cls(name.lower())
        except ValueError:
            raise InvalidOptionError(f'Unknown literal base "{name}"') from None


@dataclass(frozen=True)
class FormattingOptions:
    """
    Presentation toggles honored by every decoding routine.

    Built once per run and shared read-only with the decoding entry point.
    """

    show_address: bool = True
    show_destination_comment: bool = True #Absolute target comment on relative branches
    literal_base: LiteralBase = LiteralBase.HEX
    literal_show_ascii: bool = False #ASCII comment on byte literals
    address_label: str | None = None #Label prefix, None disables label generation
    address_field_width: int = field(default=ADDRESS_FIELD_WIDTH, init=False)

    def __post_init__(self):
        if not isinstance(self.literal_base, LiteralBase):
            raise InvalidOptionError(f'Invalid literal base {self.literal_base!r}')

    @classmethod
    def from_flags(cls, *,
        no_addresses=False,
        no_destination_comments=False,
        literal_base=None,
        literal_ascii=False,
        address_label=None
    ) -> FormattingOptions:
        """
        Build options from parsed command line flags.

        `literal_base` may be a LiteralBase, a base name or None (hex).
        Conflicting base flags are resolved by the flag parser before reaching here.
        """
        if literal_base is None:
            literal_base = LiteralBase.HEX
        elif not isinstance(literal_base, LiteralBase):
            literal_base = LiteralBase.parse(literal_base)

        return cls(
            show_address=not no_addresses,
            show_destination_comment=not no_destination_comments,
            literal_base=literal_base,
            literal_show_ascii=literal_ascii,
            address_label=address_label
        )

    @property
    def labels_enabled(self):
        return self.address_label is not None
