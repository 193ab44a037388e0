"""Pytest configuration and in-memory game binary builders."""

import struct
from pathlib import Path

import pytest

from titan_message.codec.text_codec import TextCodec


# "AB" and "あ" in the game encoding
TEXT_AB = b"\x82\x60\x82\x61"
TEXT_A_HIRAGANA = b"\x82\xa0"
TERMINATOR = b"\xff\xff"


def make_mbm(
    messages: list[tuple[int, bytes | None]],
    valid_count: int | None = None,
) -> bytes:
    """
    Build a message binary the way the game lays them out.

    Each message is ``(id, text bytes)``; ``None`` text makes an empty
    table slot. Texts follow the table back to back.
    """
    table_size = len(messages) * 0x10
    text_start = 0x20 + table_size

    table = bytearray()
    texts = bytearray()
    for message_id, payload in messages:
        if payload is None:
            table += struct.pack('<IIII', message_id & 0xFFFFFFFF, 0, 0, 0)
        else:
            table += struct.pack('<IIII', message_id, len(payload), text_start + len(texts), 0)
            texts += payload

    empty = sum(1 for _, payload in messages if payload is None)
    if valid_count is None:
        valid_count = len(messages) - empty
    file_size = text_start + len(texts) - empty * 0x10

    header = struct.pack('<I4sIIII8x', 0, b"MSG2", 0x10000, file_size, valid_count, 0x20)
    return header + bytes(table) + bytes(texts)


def make_tbl(payloads: list[bytes]) -> bytes:
    """Build a string table from already-encoded strings."""
    offsets = []
    end = 0
    for payload in payloads:
        end += len(payload) + 1
        offsets.append(end)

    data = struct.pack(f'<H{len(offsets)}H', len(payloads), *offsets)
    return data + b''.join(payload + b'\x00' for payload in payloads)


def read_mbm_table(data: bytes, slots: int) -> list[tuple[int, int, int, int]]:
    """Unpack the raw message table of an exported binary."""
    table_offset = struct.unpack_from('<I', data, 0x14)[0]
    return [
        struct.unpack_from('<IIII', data, table_offset + index * 0x10)
        for index in range(slots)
    ]


@pytest.fixture
def codec() -> TextCodec:
    """Codec without character overrides."""
    return TextCodec()


@pytest.fixture
def sample_mbm() -> bytes:
    """Message binary with an empty slot between two messages."""
    return make_mbm([
        (1, TEXT_AB + TERMINATOR),
        (0, None),
        (3, TEXT_A_HIRAGANA + b"\xf8\x41\x2a\x00" + TERMINATOR),
    ])


@pytest.fixture
def sample_tbl() -> bytes:
    """String table with two names and an empty string."""
    return make_tbl([TEXT_AB, b"", TEXT_A_HIRAGANA])


@pytest.fixture
def romfs_tree(tmp_path: Path, sample_mbm: bytes, sample_tbl: bytes) -> Path:
    """A small RomFS-like source tree including files the default filter skips."""
    root = tmp_path / "romfs"
    (root / "Event").mkdir(parents=True)
    (root / "Data").mkdir()
    (root / "TestData").mkdir()

    (root / "Event" / "e001.mbm").write_bytes(sample_mbm)
    (root / "Data" / "itemnametable.tbl").write_bytes(sample_tbl)
    (root / "Data" / "misc.tbl").write_bytes(sample_tbl)
    (root / "TestData" / "t001.mbm").write_bytes(sample_mbm)
    (root / "Event" / "seaevent.mbm").write_bytes(sample_mbm)
    (root / "Event" / "notes.txt").write_text("not a binary")
    return root
