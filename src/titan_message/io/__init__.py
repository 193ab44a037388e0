"""File I/O for game binaries and translation files."""

from titan_message.io.json_format import load_json, save_json
from titan_message.io.reader import import_file
from titan_message.io.writer import export_record, save_binary

__all__ = ["import_file", "export_record", "save_binary", "load_json", "save_json"]
