"""Container formats holding game text."""

from titan_message.formats.mbm import export_message_binary, import_message_binary
from titan_message.formats.tbl import export_string_table, import_string_table

__all__ = [
    "import_message_binary",
    "export_message_binary",
    "import_string_table",
    "export_string_table",
]
