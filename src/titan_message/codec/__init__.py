"""Encoding/decoding for game text."""

from titan_message.codec.charset import ascii_to_fullwidth, fullwidth_to_ascii
from titan_message.codec.control_codes import ControlCode
from titan_message.codec.text_codec import TextCodec

__all__ = ["ascii_to_fullwidth", "fullwidth_to_ascii", "ControlCode", "TextCodec"]
