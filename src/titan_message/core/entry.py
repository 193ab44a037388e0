"""TranslatableEntry - atomic unit of game text."""

from dataclasses import dataclass

# Identifier of an empty MBM table slot
PLACEHOLDER_ID = -1


@dataclass
class TranslatableEntry:
    """
    A single string from a game binary.

    ``original`` holds the text as decoded on import and is kept as-is;
    ``translation`` starts out equal to it and is what gets encoded on
    export. ``notes`` is free-form and never read by the codecs.
    """
    id: int
    original: str = ""
    translation: str | None = None
    notes: str = ""

    def __post_init__(self) -> None:
        if self.translation is None:
            self.translation = self.original

    @classmethod
    def placeholder(cls) -> "TranslatableEntry":
        """Create an entry standing in for a zero-length MBM slot."""
        return cls(id=PLACEHOLDER_ID)

    @property
    def is_placeholder(self) -> bool:
        return self.id == PLACEHOLDER_ID

    @property
    def is_translated(self) -> bool:
        """True if the translation differs from the original text."""
        return self.translation != self.original
