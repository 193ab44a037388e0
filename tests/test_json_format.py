"""Tests for the JSON translation file format."""

import json
from pathlib import Path

import pytest

from titan_message import InterchangeError, RecordKind, TranslatableEntry, TranslationRecord, UnknownRecordKindError
from titan_message.io.json_format import dumps, load_json, loads, record_from_dict, record_to_dict, save_json


@pytest.fixture
def record() -> TranslationRecord:
    return TranslationRecord(
        kind=RecordKind.MESSAGE_BINARY,
        relative_path="Event/e001.mbm",
        entries=[
            TranslatableEntry(id=1, original="あ[Item:0042]", translation="Ah[Item:0042]", notes="check name"),
            TranslatableEntry.placeholder(),
        ],
    )


class TestRecordDict:
    """Tests for record_to_dict / record_from_dict."""

    def test_to_dict(self, record: TranslationRecord) -> None:
        data = record_to_dict(record)
        assert data["kind"] == "message-binary"
        assert data["relative_path"] == "Event/e001.mbm"
        assert data["entries"][0] == {
            "id": 1,
            "original": "あ[Item:0042]",
            "translation": "Ah[Item:0042]",
            "notes": "check name",
        }
        assert data["entries"][1]["id"] == -1

    def test_from_dict(self, record: TranslationRecord) -> None:
        assert record_from_dict(record_to_dict(record)) == record

    def test_missing_translation_defaults_to_original(self) -> None:
        data = {
            "kind": "string-table",
            "relative_path": "a.tbl",
            "entries": [{"id": 0, "original": "Sword"}],
        }
        record = record_from_dict(data)
        assert record.entries[0].translation == "Sword"
        assert record.entries[0].notes == ""

    def test_unknown_kind(self) -> None:
        with pytest.raises(UnknownRecordKindError):
            record_from_dict({"kind": "font", "relative_path": "a.bin", "entries": []})

    def test_missing_kind(self) -> None:
        with pytest.raises(InterchangeError):
            record_from_dict({"relative_path": "a.tbl", "entries": []})

    def test_missing_relative_path(self) -> None:
        with pytest.raises(InterchangeError):
            record_from_dict({"kind": "string-table", "entries": []})

    def test_malformed_entry(self) -> None:
        with pytest.raises(InterchangeError):
            record_from_dict({"kind": "string-table", "relative_path": "a.tbl", "entries": [{"original": "x"}]})

    def test_not_an_object(self) -> None:
        with pytest.raises(InterchangeError):
            record_from_dict([1, 2, 3])


class TestJsonText:
    """Tests for dumps / loads and file helpers."""

    def test_non_ascii_is_written_verbatim(self, record: TranslationRecord) -> None:
        text = dumps(record)
        assert "あ[Item:0042]" in text
        assert json.loads(text)["entries"][0]["notes"] == "check name"

    def test_loads_invalid_json(self) -> None:
        with pytest.raises(InterchangeError):
            loads("{not json")

    def test_save_and_load(self, tmp_path: Path, record: TranslationRecord) -> None:
        path = tmp_path / "nested" / "e001.json"
        save_json(record, path)

        assert path.exists()
        assert load_json(path) == record

    def test_load_reports_path(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(InterchangeError, match="broken.json"):
            load_json(path)


class TestEntryValidation:
    """Entry fields must have their JSON types; nothing is coerced."""

    @pytest.mark.parametrize("entry", [
        {"id": 1.9, "original": "x"},
        {"id": True, "original": "x"},
        {"id": "7", "original": "x"},
        {"id": None, "original": "x"},
        {"id": 1, "original": None},
        {"id": 1, "original": "x", "translation": None},
        {"id": 1, "original": "x", "translation": 5},
        {"id": 1, "original": "x", "notes": None},
        "not an object",
    ])
    def test_rejected(self, entry) -> None:
        data = {"kind": "string-table", "relative_path": "a.tbl", "entries": [entry]}
        with pytest.raises(InterchangeError):
            record_from_dict(data)

    def test_negative_id_is_accepted(self) -> None:
        data = {"kind": "message-binary", "relative_path": "a.mbm", "entries": [{"id": -1}]}
        entry = record_from_dict(data).entries[0]
        assert entry.is_placeholder
        assert entry.original == entry.translation == ""
