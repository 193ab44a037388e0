"""Load game binaries as translation records."""

from pathlib import Path, PurePath
from typing import Callable

from titan_message.codec.text_codec import TextCodec
from titan_message.core.record import RecordKind, TranslationRecord
from titan_message.errors import UnknownRecordKindError
from titan_message.formats.mbm import import_message_binary
from titan_message.formats.tbl import import_string_table


Importer = Callable[[bytes, "str | PurePath", "TextCodec | None"], TranslationRecord]

IMPORTERS: dict[RecordKind, Importer] = {
    RecordKind.MESSAGE_BINARY: import_message_binary,
    RecordKind.STRING_TABLE: import_string_table,
}


def kind_for_path(path: str | PurePath) -> RecordKind:
    """Determine the container format from a file extension."""
    suffix = PurePath(path).suffix.lower()
    for kind in RecordKind:
        if kind.extension == suffix:
            return kind
    raise UnknownRecordKindError(f"Unrecognized file extension {suffix or '(none)'!r}")


def import_file(
    path: str | Path,
    root: str | Path | None = None,
    codec: TextCodec | None = None,
) -> TranslationRecord:
    """
    Load an .mbm or .tbl file from disk.

    The record's relative path is the file's location below ``root``;
    without a root it is just the file name.
    """
    path = Path(path)
    kind = kind_for_path(path)
    relative_path = path.relative_to(root) if root is not None else PurePath(path.name)

    data = path.read_bytes()
    return IMPORTERS[kind](data, relative_path, codec)
