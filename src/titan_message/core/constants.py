"""Shared constants for game text processing."""

# Code page underlying the double-byte game encoding
GAME_CODEPAGE = "cp932"

# Reserved 2-byte units (big-endian within text data)
TERMINATOR = 0xFFFF
LINE_BREAK = 0xF801
PAGE_BREAK = 0xF802

# Readable-form markup
CONTROL_BEGIN = "["
CONTROL_END = "]"
CONTROL_ARG_SEPARATOR = ":"
PAGE_KEYWORD = "Page"

# Full-width game characters and their plain ASCII stand-ins
FULLWIDTH_TO_ASCII: dict[str, str] = {
    # Punctuation
    '　': ' ', '，': ',', '．': '.', '：': ':',
    '；': ';', '？': '?', '！': '!', '－': '-',
    '／': '/', '～': '~', '’': "'", '”': '"',
    '（': '(', '）': ')', '［': '[', '］': ']',
    '〈': '<', '〉': '>', '＋': '+', '＊': '*',
    '＆': '&',
    # Digits
    **{chr(0xFF10 + i): chr(ord('0') + i) for i in range(10)},
    # Latin letters
    **{chr(0xFF21 + i): chr(ord('A') + i) for i in range(26)},
    **{chr(0xFF41 + i): chr(ord('a') + i) for i in range(26)},
}
