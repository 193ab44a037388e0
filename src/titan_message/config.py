"""Conversion options and character-override loading."""

import json
from dataclasses import dataclass, field
from pathlib import Path, PurePath

from titan_message.codec.text_codec import TextCodec
from titan_message.errors import InterchangeError


@dataclass
class FileFilter:
    """
    Selects which binaries under a source tree are converted.

    Defaults reproduce the rules used for the game's RomFS: every .mbm
    file, only the known-good .tbl files, and none of the test data or
    incompatible leftovers.
    """
    table_name_suffixes: tuple[str, ...] = ("nametable.tbl",)
    table_names: tuple[str, ...] = ("skyitemname.tbl",)
    excluded_directories: tuple[str, ...] = ("TestData",)
    excluded_prefixes: tuple[str, ...] = ("sea", "FacilityEntranceText")
    all_tables: bool = False

    @classmethod
    def accept_all(cls) -> "FileFilter":
        """A filter selecting every .mbm and .tbl file."""
        return cls(excluded_directories=(), excluded_prefixes=(), all_tables=True)

    def accepts(self, relative_path: str | PurePath) -> bool:
        """Check a path relative to the source root."""
        path = PurePath(relative_path)
        name = path.name
        suffix = path.suffix.lower()

        if suffix == ".mbm":
            selected = True
        elif suffix == ".tbl":
            selected = (
                self.all_tables
                or name.endswith(self.table_name_suffixes)
                or name in self.table_names
            )
        else:
            selected = False

        if not selected:
            return False
        if any(excluded in part for part in path.parent.parts for excluded in self.excluded_directories):
            return False
        return not name.startswith(self.excluded_prefixes)


@dataclass
class ConversionOptions:
    """Settings shared by every file of a batch conversion."""
    overwrite: bool = False
    keep_going: bool = False
    codec: TextCodec = field(default_factory=TextCodec)
    file_filter: FileFilter = field(default_factory=FileFilter)


def load_char_overrides(path: str | Path) -> dict[str, str]:
    """
    Load a character-override table from a JSON file.

    The file holds a single object mapping game characters to the
    characters shown in translation files, e.g. ``{"Ⅰ": "ä"}``.
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8-sig') as f:
            data = json.load(f)
    except UnicodeDecodeError as e:
        raise InterchangeError(f"{path}: not UTF-8 text: {e}") from e
    except json.JSONDecodeError as e:
        raise InterchangeError(f"{path}: invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise InterchangeError(f"{path}: expected a JSON object")

    for game_char, readable in data.items():
        if not isinstance(readable, str) or len(game_char) != 1 or len(readable) != 1:
            raise InterchangeError(
                f"{path}: override {game_char!r} -> {readable!r} must map one character to one character"
            )
    return dict(data)


def build_codec(charmap: str | Path | None = None) -> TextCodec:
    """Create the text codec for a batch, with overrides if a file is given."""
    if charmap is None:
        return TextCodec()
    return TextCodec(load_char_overrides(charmap))
