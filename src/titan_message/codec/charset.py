"""Full-width/ASCII substitution for the game character set."""

from typing import Mapping

from titan_message.core.constants import FULLWIDTH_TO_ASCII


# Build reverse mapping
ASCII_TO_FULLWIDTH: dict[str, str] = {
    ascii_char: wide for wide, ascii_char in FULLWIDTH_TO_ASCII.items()
}


def build_decode_table(overrides: Mapping[str, str] | None = None) -> dict[str, str]:
    """Game character -> readable character, overrides taking precedence."""
    table = dict(FULLWIDTH_TO_ASCII)
    if overrides:
        table.update(overrides)
    return table


def build_encode_table(overrides: Mapping[str, str] | None = None) -> dict[str, str]:
    """Readable character -> game character, overrides taking precedence."""
    overrides = overrides or {}
    table = {
        ascii_char: wide
        for wide, ascii_char in FULLWIDTH_TO_ASCII.items()
        if wide not in overrides
    }
    table.update({readable: game for game, readable in overrides.items()})
    return table


def fullwidth_to_ascii(text: str) -> str:
    """Replace full-width characters with their ASCII stand-ins."""
    return ''.join(FULLWIDTH_TO_ASCII.get(char, char) for char in text)


def ascii_to_fullwidth(text: str) -> str:
    """Replace ASCII characters with their full-width game counterparts."""
    return ''.join(ASCII_TO_FULLWIDTH.get(char, char) for char in text)
