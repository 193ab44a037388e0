"""Translation records as editable JSON.

Example output:
{
  "kind": "message-binary",
  "relative_path": "Event/Message/e001.mbm",
  "entries": [
    {"id": 1, "original": "Hello[Item:0012]", "translation": "Hallo[Item:0012]", "notes": ""},
    {"id": -1, "original": "", "translation": "", "notes": ""}
  ]
}
"""

import json
from pathlib import Path
from typing import Any

from titan_message.core.entry import TranslatableEntry
from titan_message.core.record import RecordKind, TranslationRecord
from titan_message.errors import InterchangeError, UnknownRecordKindError


def record_to_dict(record: TranslationRecord) -> dict[str, Any]:
    """Convert a record to plain JSON-compatible data."""
    return {
        "kind": record.kind.value,
        "relative_path": record.relative_path,
        "entries": [
            {
                "id": entry.id,
                "original": entry.original,
                "translation": entry.translation,
                "notes": entry.notes,
            }
            for entry in record.entries
        ],
    }


def record_from_dict(data: Any) -> TranslationRecord:
    """Build a record from parsed JSON data."""
    if not isinstance(data, dict):
        raise InterchangeError("Translation file must contain a JSON object")

    try:
        kind = RecordKind(data["kind"])
    except KeyError:
        raise InterchangeError("Translation file has no 'kind'") from None
    except ValueError:
        raise UnknownRecordKindError(f"Unrecognized translation type {data['kind']!r}") from None

    relative_path = data.get("relative_path")
    if not isinstance(relative_path, str) or not relative_path:
        raise InterchangeError("Translation file has no 'relative_path'")

    raw_entries = data.get("entries", [])
    if not isinstance(raw_entries, list):
        raise InterchangeError("'entries' must be a list")

    entries = [_entry_from_dict(index, item) for index, item in enumerate(raw_entries)]

    return TranslationRecord(kind=kind, relative_path=relative_path, entries=entries)


def _entry_from_dict(index: int, item: Any) -> TranslatableEntry:
    if not isinstance(item, dict):
        raise InterchangeError(f"Entry #{index} must be a JSON object")

    entry_id = item.get("id")
    # bool is an int subclass
    if not isinstance(entry_id, int) or isinstance(entry_id, bool):
        raise InterchangeError(f"Entry #{index} has no integer 'id'")

    original = item.get("original", "")
    translation = item.get("translation", original)
    notes = item.get("notes", "")
    for name, value in (("original", original), ("translation", translation), ("notes", notes)):
        if not isinstance(value, str):
            raise InterchangeError(f"Entry #{index}: '{name}' must be a string")

    return TranslatableEntry(id=entry_id, original=original, translation=translation, notes=notes)


def dumps(record: TranslationRecord, indent: int | None = 2) -> str:
    """Serialize a record to a JSON string."""
    return json.dumps(record_to_dict(record), indent=indent, ensure_ascii=False)


def loads(text: str) -> TranslationRecord:
    """Parse a record from a JSON string."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InterchangeError(f"Invalid JSON: {e}") from e
    return record_from_dict(data)


def save_json(record: TranslationRecord, path: str | Path) -> None:
    """Write a record to a JSON file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps(record) + "\n", encoding="utf-8")


def load_json(path: str | Path) -> TranslationRecord:
    """Read a record from a JSON file."""
    path = Path(path)
    try:
        return loads(path.read_text(encoding="utf-8-sig"))
    except UnicodeDecodeError as e:
        raise InterchangeError(f"{path}: not UTF-8 text: {e}") from e
    except InterchangeError as e:
        raise InterchangeError(f"{path}: {e}") from e
