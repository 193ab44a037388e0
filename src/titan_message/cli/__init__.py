"""Command-line interface for titan-message."""

from titan_message.cli.app import create_app
from titan_message.cli.main import main

__all__ = ["create_app", "main"]
