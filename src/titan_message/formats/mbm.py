"""MBM (message binary) import and export.

Layout, all integers little-endian::

    0x00  u32  reserved (0)
    0x04  4s   magic "MSG2"
    0x08  u32  version
    0x0C  u32  file size, not counting empty table slots
    0x10  u32  number of non-empty messages
    0x14  u32  message table offset
    0x18  8    padding

The message table is a run of 16-byte records ``(id, byte length, text
offset, reserved)``. Empty slots have a byte length of zero; their
position in the table is significant and survives a round trip as a
placeholder entry.
"""

import logging
from dataclasses import dataclass
from pathlib import PurePath

from titan_message.codec.text_codec import TextCodec
from titan_message.core.buffer import ByteReader, ByteWriter
from titan_message.core.constants import TERMINATOR
from titan_message.core.entry import TranslatableEntry
from titan_message.core.record import RecordKind, TranslationRecord
from titan_message.errors import FormatMismatchError, TableOverflowError, TruncatedInputError

log = logging.getLogger(__name__)


MBM_MAGIC = b"MSG2"
MBM_VERSION = 0x10000
HEADER_SIZE = 0x20
TABLE_OFFSET = 0x20
RECORD_SIZE = 0x10

# Ids are stored as 32 bits; both signed and unsigned readings are accepted
MIN_ID = -0x80000000
MAX_ID = 0xFFFFFFFF

HEADER_STRUCT = '<I4sIIII'
RECORD_STRUCT = '<iIII'

TERMINATOR_BYTES = TERMINATOR.to_bytes(2, 'big')


@dataclass
class MbmHeader:
    """Fixed header fields of a message binary."""
    magic: bytes
    version: int
    file_size: int
    valid_count: int
    table_offset: int


def parse_header(data: bytes) -> MbmHeader:
    """Parse and validate the header of a message binary."""
    if data[4:8] != MBM_MAGIC:
        raise FormatMismatchError("Magic number mismatch; not an MBM file?")

    reader = ByteReader(data)
    _, magic, version, file_size, valid_count, table_offset = reader.unpack(HEADER_STRUCT)
    return MbmHeader(
        magic=magic,
        version=version,
        file_size=file_size,
        valid_count=valid_count,
        table_offset=table_offset,
    )


def import_message_binary(
    data: bytes,
    origin_path: str | PurePath,
    codec: TextCodec | None = None,
) -> TranslationRecord:
    """
    Import a message binary into a translation record.

    Table records are read in order until as many non-empty messages as
    the header declares have been found. Every empty record passed on the
    way becomes a placeholder entry so export can restore the slot.

    The table is assumed to end where the first message text begins. If
    the scan reaches that point before the declared count it stops there;
    if it runs off the end of the buffer, TruncatedInputError is raised.
    """
    codec = codec or TextCodec()
    header = parse_header(data)

    reader = ByteReader(data)
    reader.seek(header.table_offset)

    entries: list[TranslatableEntry] = []
    found = 0
    table_end = len(data)

    while found < header.valid_count:
        if reader.position + RECORD_SIZE > table_end:
            if table_end == len(data):
                raise TruncatedInputError(
                    f"Message table ends after {found} of {header.valid_count} messages"
                )
            log.warning(
                "%s: message table reaches text data after %d of %d messages",
                origin_path, found, header.valid_count,
            )
            break

        message_id, length, offset, _ = reader.unpack(RECORD_STRUCT)
        if length == 0:
            entries.append(TranslatableEntry.placeholder())
            continue

        if offset >= header.table_offset:
            table_end = min(table_end, offset)

        table_position = reader.position
        reader.seek(offset)
        text = codec.decode(reader.read(length))
        reader.seek(table_position)

        entries.append(TranslatableEntry(id=message_id, original=text))
        found += 1

    log.debug("%s: %d messages, %d empty slots", origin_path, found, len(entries) - found)

    return TranslationRecord(
        kind=RecordKind.MESSAGE_BINARY,
        relative_path=PurePath(origin_path).as_posix(),
        entries=entries,
    )


def export_message_binary(
    record: TranslationRecord,
    codec: TextCodec | None = None,
) -> bytes:
    """
    Build a message binary from a translation record.

    Table slots follow entry order; placeholder entries keep their slot
    zero-filled and contribute no text.
    """
    codec = codec or TextCodec()
    writer = ByteWriter()

    writer.write_u32(0)
    writer.write(MBM_MAGIC)
    writer.write_u32(MBM_VERSION)
    size_position = writer.write_u32(0)
    writer.write_u32(record.valid_count)
    writer.write_u32(TABLE_OFFSET)
    writer.write_zeros(HEADER_SIZE - writer.position)

    table_start = writer.write_zeros(len(record.entries) * RECORD_SIZE)

    for index, entry in enumerate(record.entries):
        if entry.is_placeholder:
            continue
        if not MIN_ID <= entry.id <= MAX_ID:
            raise TableOverflowError(f"Message id {entry.id} does not fit a 32-bit table field")

        text = codec.encode(entry.translation) + TERMINATOR_BYTES
        text_position = writer.write(text)

        writer.seek(table_start + index * RECORD_SIZE)
        writer.pack('<IIII', entry.id & 0xFFFFFFFF, len(text), text_position, 0)
        writer.seek_end()

    # Size field excludes the empty table slots
    writer.seek(size_position)
    writer.write_u32(len(writer) - record.placeholder_count * RECORD_SIZE)

    return writer.getvalue()
