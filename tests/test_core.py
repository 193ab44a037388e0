"""Tests for core data structures (no external files needed)."""

import pytest

from titan_message.core import RecordKind, TranslatableEntry, TranslationRecord
from titan_message.core.buffer import ByteReader, ByteWriter
from titan_message.errors import TruncatedInputError


class TestTranslatableEntry:
    """Tests for TranslatableEntry dataclass."""

    def test_translation_defaults_to_original(self) -> None:
        entry = TranslatableEntry(id=4, original="Sword")
        assert entry.translation == "Sword"
        assert entry.notes == ""
        assert entry.is_translated is False

    def test_explicit_translation(self) -> None:
        entry = TranslatableEntry(id=4, original="剣", translation="Sword")
        assert entry.translation == "Sword"
        assert entry.is_translated is True

    def test_empty_translation_is_kept(self) -> None:
        entry = TranslatableEntry(id=4, original="剣", translation="")
        assert entry.translation == ""

    def test_placeholder(self) -> None:
        entry = TranslatableEntry.placeholder()
        assert entry.id == -1
        assert entry.original == ""
        assert entry.is_placeholder is True
        assert TranslatableEntry(id=0).is_placeholder is False


class TestTranslationRecord:
    """Tests for TranslationRecord."""

    def test_kind_extension(self) -> None:
        assert RecordKind.MESSAGE_BINARY.extension == ".mbm"
        assert RecordKind.STRING_TABLE.extension == ".tbl"
        assert RecordKind("string-table") is RecordKind.STRING_TABLE

    def test_counts(self) -> None:
        record = TranslationRecord(
            kind=RecordKind.MESSAGE_BINARY,
            relative_path="e001.mbm",
            entries=[
                TranslatableEntry(id=1, original="a", translation="b"),
                TranslatableEntry.placeholder(),
                TranslatableEntry(id=2, original="c"),
            ],
        )
        assert len(record) == 3
        assert record.valid_count == 2
        assert record.placeholder_count == 1
        assert record.translated_count == 1
        assert [entry.id for entry in record] == [1, -1, 2]


class TestByteReader:
    """Tests for ByteReader."""

    def test_reads_little_endian(self) -> None:
        reader = ByteReader(b"\x01\x02\x03\x04\x05\x06\xff\xff\xff\xff")
        assert reader.read_u16() == 0x0201
        assert reader.read_u32() == 0x06050403
        assert reader.read_i32() == -1
        assert reader.remaining() == 0

    def test_read_past_end(self) -> None:
        reader = ByteReader(b"\x01\x02")
        reader.read_u8()
        with pytest.raises(TruncatedInputError):
            reader.read_u16()

    def test_seek(self) -> None:
        reader = ByteReader(b"abcd")
        reader.seek(2)
        assert reader.read(2) == b"cd"
        reader.seek(4)
        with pytest.raises(TruncatedInputError):
            reader.seek(5)

    def test_skip(self) -> None:
        reader = ByteReader(b"abcd")
        reader.skip(3)
        assert reader.read(1) == b"d"


class TestByteWriter:
    """Tests for ByteWriter."""

    def test_write_returns_start(self) -> None:
        writer = ByteWriter()
        assert writer.write(b"ab") == 0
        assert writer.write_u16(0x0201) == 2
        assert writer.getvalue() == b"ab\x01\x02"

    def test_overwrite_inside_buffer(self) -> None:
        writer = ByteWriter()
        writer.write_zeros(8)
        writer.seek(4)
        writer.write_u32(0xAABBCCDD)
        writer.seek(0)
        writer.write(b"\x01")
        assert writer.getvalue() == b"\x01\x00\x00\x00\xdd\xcc\xbb\xaa"

    def test_seek_past_end_pads(self) -> None:
        writer = ByteWriter()
        writer.seek(3)
        writer.write(b"x")
        assert writer.getvalue() == b"\x00\x00\x00x"
        writer.seek_end()
        assert writer.position == 4
