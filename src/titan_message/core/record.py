"""TranslationRecord - intermediate form of one game binary."""

from dataclasses import dataclass, field
from enum import Enum

from titan_message.core.entry import TranslatableEntry


class RecordKind(str, Enum):
    """Container format a record was imported from."""
    MESSAGE_BINARY = "message-binary"
    STRING_TABLE = "string-table"

    @property
    def extension(self) -> str:
        """File extension of binaries of this kind."""
        return ".mbm" if self is RecordKind.MESSAGE_BINARY else ".tbl"


@dataclass
class TranslationRecord:
    """
    All translatable strings of one binary, in on-disk table order.

    ``relative_path`` is the location of the source binary relative to the
    conversion root, so export can rebuild the destination tree without
    depending on where the interchange file itself lives.
    """
    kind: RecordKind
    relative_path: str
    entries: list[TranslatableEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    @property
    def placeholder_count(self) -> int:
        """Number of placeholder entries."""
        return sum(1 for entry in self.entries if entry.is_placeholder)

    @property
    def valid_count(self) -> int:
        """Number of entries carrying real strings."""
        return len(self.entries) - self.placeholder_count

    @property
    def translated_count(self) -> int:
        """Number of entries whose translation differs from the original."""
        return sum(1 for entry in self.entries if entry.is_translated)
