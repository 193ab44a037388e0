"""TBL (string table) import and export.

Layout, all integers little-endian::

    u16           string count
    u16 * count   end offset of each string, relative to the string data
    ...           NUL-terminated strings, back to back

Strings have no stored identifiers; their index is their id.
"""

import logging
from pathlib import PurePath

from titan_message.codec.text_codec import TextCodec
from titan_message.core.buffer import ByteReader, ByteWriter
from titan_message.core.entry import TranslatableEntry
from titan_message.core.record import RecordKind, TranslationRecord
from titan_message.errors import FormatMismatchError, TableOverflowError

log = logging.getLogger(__name__)


MAX_U16 = 0xFFFF


def import_string_table(
    data: bytes,
    origin_path: str | PurePath,
    codec: TextCodec | None = None,
) -> TranslationRecord:
    """Import a string table into a translation record."""
    codec = codec or TextCodec()
    reader = ByteReader(data)

    count = reader.read_u16()
    end_offsets = [reader.read_u16() for _ in range(count)]
    region_start = reader.position

    entries: list[TranslatableEntry] = []
    for index, end_offset in enumerate(end_offsets):
        start = reader.position
        length = region_start + end_offset - start - 1
        if length < 0:
            raise FormatMismatchError(
                f"String {index} ends at 0x{end_offset:X}, before its start "
                f"0x{start - region_start:X}"
            )

        text = codec.decode(reader.read(length))
        reader.skip(1)  # NUL

        entries.append(TranslatableEntry(id=index, original=text))

    log.debug("%s: %d strings", origin_path, count)

    return TranslationRecord(
        kind=RecordKind.STRING_TABLE,
        relative_path=PurePath(origin_path).as_posix(),
        entries=entries,
    )


def export_string_table(
    record: TranslationRecord,
    codec: TextCodec | None = None,
) -> bytes:
    """Build a string table from a translation record, one string per entry."""
    codec = codec or TextCodec()
    count = len(record.entries)
    if count > MAX_U16:
        raise TableOverflowError(f"Too many strings for a string table: {count}")

    writer = ByteWriter()
    writer.write_u16(count)
    offsets_position = writer.write_zeros(count * 2)

    end_offsets: list[int] = []
    current_end = 0
    for entry in record.entries:
        text = codec.encode(entry.translation) + b'\x00'
        writer.write(text)

        current_end += len(text)
        if current_end > MAX_U16:
            raise TableOverflowError(
                f"String {entry.id} ends at 0x{current_end:X}, past the 16-bit offset limit"
            )
        end_offsets.append(current_end)

    writer.seek(offsets_position)
    for end_offset in end_offsets:
        writer.write_u16(end_offset)

    return writer.getvalue()
