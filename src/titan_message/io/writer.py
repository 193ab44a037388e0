"""Write translation records back to game binaries."""

from pathlib import Path
from typing import Callable

from titan_message.codec.text_codec import TextCodec
from titan_message.core.record import RecordKind, TranslationRecord
from titan_message.errors import UnknownRecordKindError
from titan_message.formats.mbm import export_message_binary
from titan_message.formats.tbl import export_string_table


Exporter = Callable[[TranslationRecord, "TextCodec | None"], bytes]

EXPORTERS: dict[RecordKind, Exporter] = {
    RecordKind.MESSAGE_BINARY: export_message_binary,
    RecordKind.STRING_TABLE: export_string_table,
}


def export_record(record: TranslationRecord, codec: TextCodec | None = None) -> bytes:
    """Build the binary for a record, dispatching on its kind."""
    exporter = EXPORTERS.get(record.kind)
    if exporter is None:
        raise UnknownRecordKindError(f"Unrecognized translation type {record.kind!r}")
    return exporter(record, codec)


def save_binary(
    record: TranslationRecord,
    path: str | Path,
    codec: TextCodec | None = None,
) -> None:
    """
    Export a record to disk.

    The binary is built completely before the file is opened, so a failed
    export leaves no partial output behind.
    """
    path = Path(path)
    data = export_record(record, codec)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'wb') as f:
        f.write(data)
