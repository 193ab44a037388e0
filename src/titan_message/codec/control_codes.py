"""Inline control codes of the game text encoding."""

from enum import IntEnum


class ControlCode(IntEnum):
    """
    Reserved 2-byte opcodes rendered as bracketed markers.

    Each member carries the label used in the readable form and whether
    the opcode is followed by a little-endian 16-bit argument. Line and
    page breaks are not listed here; they have dedicated renderings.
    """

    def __new__(cls, opcode: int, label: str, has_argument: bool):
        member = int.__new__(cls, opcode)
        member._value_ = opcode
        member.label = label
        member.has_argument = has_argument
        return member

    COLOR = (0xF804, "Color", True)
    NUMBER = (0xF810, "Number", True)
    VARIABLE1 = (0xF811, "Variable1", True)
    VARIABLE2 = (0xF815, "Variable2", True)
    VARIABLE3 = (0xF819, "Variable3", True)
    GUILD = (0xF840, "Guild", False)
    ITEM = (0xF841, "Item", True)
    ENEMY1 = (0xF842, "Enemy1", True)
    CHARACTER = (0xF843, "Character", True)
    SKYSHIP = (0xF844, "Skyship", False)
    LOCATION = (0xF847, "Location", False)
    ENEMY2 = (0xF848, "Enemy2", True)
    ITEM2 = (0xF849, "Item2", True)
    COUNT = (0xF84A, "Count", True)
    QUEST = (0xF850, "Quest", False)
    VARIABLE4 = (0xF851, "Variable4", False)

    @classmethod
    def from_opcode(cls, opcode: int) -> "ControlCode | None":
        """Look up a control code by its 2-byte value."""
        return _BY_OPCODE.get(opcode)

    @classmethod
    def from_label(cls, label: str) -> "ControlCode | None":
        """Look up a control code by its readable label (case-sensitive)."""
        return _BY_LABEL.get(label)

    def render(self, argument: int | None = None) -> str:
        """Render the readable marker body, without brackets."""
        if argument is None:
            return self.label
        return f"{self.label}:{argument:04d}"


_BY_OPCODE: dict[int, ControlCode] = {int(code): code for code in ControlCode}
_BY_LABEL: dict[str, ControlCode] = {code.label: code for code in ControlCode}
