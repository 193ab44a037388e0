"""Core data structures for translatable game text."""

from titan_message.core.entry import PLACEHOLDER_ID, TranslatableEntry
from titan_message.core.record import RecordKind, TranslationRecord

__all__ = ["PLACEHOLDER_ID", "TranslatableEntry", "RecordKind", "TranslationRecord"]
