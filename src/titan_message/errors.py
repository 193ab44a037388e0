"""Error definitions for titan-message."""


class TitanMessageError(Exception):
    """Base exception for all custom errors."""


class FormatMismatchError(TitanMessageError):
    """Raised when a binary does not have the expected layout or signature."""


class TruncatedInputError(TitanMessageError):
    """Raised when a header or table points past the end of the buffer."""


class TableOverflowError(TitanMessageError):
    """Raised when exported data does not fit the format's field widths."""


class UnknownRecordKindError(TitanMessageError):
    """Raised when a record kind or file extension has no codec."""


class InterchangeError(TitanMessageError):
    """Raised when an interchange or character-override file is malformed."""
