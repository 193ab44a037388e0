"""Transcoding between game text data and the readable bracketed form."""

import re
from types import MappingProxyType
from typing import Mapping

from titan_message.codec.charset import build_decode_table, build_encode_table
from titan_message.codec.control_codes import ControlCode
from titan_message.core.constants import (
    CONTROL_ARG_SEPARATOR,
    CONTROL_BEGIN,
    CONTROL_END,
    GAME_CODEPAGE,
    LINE_BREAK,
    PAGE_BREAK,
    PAGE_KEYWORD,
    TERMINATOR,
)


PAGE_MARKER = f"{CONTROL_BEGIN}{PAGE_KEYWORD}{CONTROL_END}"

# Unsigned 16-bit decimal argument, optional sign and surrounding whitespace
ARGUMENT_PATTERN = re.compile(r'\s*\+?([0-9]+)\s*')

_LINE_BREAK_BYTES = LINE_BREAK.to_bytes(2, 'big')
_PAGE_BREAK_BYTES = PAGE_BREAK.to_bytes(2, 'big')


class TextCodec:
    """
    Converts game text between its binary and readable forms.

    The binary form is a stream of big-endian 2-byte units: code page 932
    characters interleaved with reserved opcodes. The readable form spells
    opcodes as bracketed markers (``[Item:0042]``), line breaks as newlines
    and page breaks as ``[Page]`` followed by a blank line.

    A codec is configured once with an optional character-override table
    (game character -> readable character) layered over the built-in
    full-width/ASCII table, and is not modified afterwards, so a single
    instance can be shared by every file of a batch.
    """

    def __init__(self, overrides: Mapping[str, str] | None = None):
        self.overrides = MappingProxyType(dict(overrides or {}))
        self._to_readable = build_decode_table(self.overrides)
        self._to_game = build_encode_table(self.overrides)

    def decode(self, data: bytes) -> str:
        """Convert raw text data to its readable form.

        Stops at the ``FF FF`` terminator or when fewer than two bytes
        remain. Never fails: undecodable units come out as replacement
        characters.
        """
        parts: list[str] = []
        size = len(data)
        idx = 0

        while idx + 1 < size:
            value = data[idx] << 8 | data[idx + 1]
            if value == TERMINATOR:
                break

            if value == LINE_BREAK:
                parts.append('\n')
            elif value == PAGE_BREAK:
                parts.append(f"{PAGE_MARKER}\n\n")
            else:
                code = ControlCode.from_opcode(value)
                if code is None:
                    parts.append(self.decode_char(data[idx:idx + 2]))
                elif code.has_argument and idx + 3 < size:
                    argument = data[idx + 2] | data[idx + 3] << 8
                    parts.append(f"{CONTROL_BEGIN}{code.render(argument)}{CONTROL_END}")
                    idx += 2
                else:
                    parts.append(f"{CONTROL_BEGIN}{code.render()}{CONTROL_END}")

            idx += 2

        return ''.join(parts)

    def encode(self, text: str) -> bytes:
        """Convert readable text back to raw text data (no terminator).

        Bracketed markers that are not well-formed or name no known control
        code are encoded as literal characters.
        """
        result = bytearray()
        idx = 0

        while idx < len(text):
            char = text[idx]

            if char == '\r':
                idx += 1
                continue

            if char == '\n':
                result.extend(_LINE_BREAK_BYTES)
            elif char == CONTROL_BEGIN:
                end = find_control_end(text, idx + 1)
                if end != -1:
                    name, _, argument = text[idx + 1:end].partition(CONTROL_ARG_SEPARATOR)

                    if name == PAGE_KEYWORD:
                        result.extend(_PAGE_BREAK_BYTES)
                        idx = skip_line_breaks(text, end + 1, limit=2)
                        continue

                    code = ControlCode.from_label(name)
                    if code is not None:
                        result.extend(code.to_bytes(2, 'big'))
                        value = parse_argument(argument)
                        if value is not None:
                            result.extend(value.to_bytes(2, 'little'))
                        idx = end + 1
                        continue

                result.extend(self.encode_char(char))
            else:
                result.extend(self.encode_char(char))

            idx += 1

        return bytes(result)

    def decode_char(self, unit: bytes) -> str:
        """Decode one 2-byte unit that is not a control code."""
        text = unit.decode(GAME_CODEPAGE, errors='replace')
        return ''.join(self._to_readable.get(char, char) for char in text)

    def encode_char(self, char: str) -> bytes:
        """Encode one readable character as game character bytes."""
        game_char = self._to_game.get(char, char)
        return game_char.encode(GAME_CODEPAGE, errors='replace')


def find_control_end(text: str, start: int) -> int:
    """Index of the closing bracket for a marker whose body starts at ``start``.

    Returns -1 if another opening bracket or the end of text comes first.
    """
    for idx in range(start, len(text)):
        if text[idx] == CONTROL_BEGIN:
            break
        if text[idx] == CONTROL_END:
            return idx
    return -1


def skip_line_breaks(text: str, start: int, limit: int) -> int:
    """Index just past at most ``limit`` line breaks beginning at ``start``."""
    idx = start
    for _ in range(limit):
        if text.startswith('\r\n', idx):
            idx += 2
        elif text.startswith('\n', idx):
            idx += 1
        else:
            break
    return idx


def parse_argument(argument: str) -> int | None:
    """Parse a marker argument as an unsigned 16-bit integer, or None."""
    match = ARGUMENT_PATTERN.fullmatch(argument)
    if match is None:
        return None
    value = int(match.group(1))
    return value if value <= 0xFFFF else None
