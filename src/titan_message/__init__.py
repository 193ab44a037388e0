"""
titan-message: Etrian Odyssey IV text converter

Convert the game's message binaries (.mbm) and string tables (.tbl) to
editable JSON translation files and back again.

Quick Start:
    >>> import titan_message as tm
    >>> record = tm.import_file("RomFS/Event/e001.mbm", root="RomFS")
    >>> tm.save_json(record, "json/Event/e001.json")
    >>> record = tm.load_json("json/Event/e001.json")
    >>> tm.save_binary(record, "out/" + record.relative_path)

Features:
    - Double-byte text with inline control codes shown as [Name:0001] markers
    - Unmodified text re-encodes to the exact original bytes
    - Placeholder entries keep empty message table slots in place
    - Optional character-override tables for custom font glyphs
    - Batch conversion of whole directory trees from the command line
"""

__version__ = "0.1.0"

# Core types
from titan_message.core.entry import PLACEHOLDER_ID, TranslatableEntry
from titan_message.core.record import RecordKind, TranslationRecord

# Text codec
from titan_message.codec.control_codes import ControlCode
from titan_message.codec.text_codec import TextCodec

# Container formats
from titan_message.formats.mbm import export_message_binary, import_message_binary
from titan_message.formats.tbl import export_string_table, import_string_table

# Convenience functions
from titan_message.io.json_format import load_json, save_json
from titan_message.io.reader import import_file
from titan_message.io.writer import export_record, save_binary

# Errors
from titan_message.errors import (
    FormatMismatchError,
    InterchangeError,
    TableOverflowError,
    TitanMessageError,
    TruncatedInputError,
    UnknownRecordKindError,
)

__all__ = [
    # Version
    "__version__",
    # Core types
    "PLACEHOLDER_ID",
    "TranslatableEntry",
    "RecordKind",
    "TranslationRecord",
    # Codec
    "ControlCode",
    "TextCodec",
    # Formats
    "import_message_binary",
    "export_message_binary",
    "import_string_table",
    "export_string_table",
    # I/O
    "import_file",
    "export_record",
    "save_binary",
    "load_json",
    "save_json",
    # Errors
    "TitanMessageError",
    "FormatMismatchError",
    "TruncatedInputError",
    "TableOverflowError",
    "UnknownRecordKindError",
    "InterchangeError",
]
