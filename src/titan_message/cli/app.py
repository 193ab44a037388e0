"""Typer CLI application with command groups."""

import logging
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from titan_message.config import ConversionOptions, FileFilter, build_codec
from titan_message.convert import ConversionSummary, binaries_to_json, json_to_binaries
from titan_message.errors import TitanMessageError
from titan_message.io.reader import import_file


CharmapOption = Annotated[
    Optional[Path],
    typer.Option("--charmap", "-c", help="JSON file of character overrides (game char -> display char)"),
]
OverwriteOption = Annotated[bool, typer.Option("--overwrite", "-o", help="Allow overwriting of existing files")]
KeepGoingOption = Annotated[bool, typer.Option("--keep-going", "-k", help="Skip files that fail instead of aborting")]


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="titan-message",
        help="Convert Etrian Odyssey IV message binaries and string tables to and from JSON.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    @app.callback()
    def setup(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug output")] = False,
    ) -> None:
        """Titan's Message - Etrian Odyssey IV text converter."""
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.INFO,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False, markup=False)],
            force=True,
        )

    def fail(error: Exception) -> NoReturn:
        err_console.print(f"[red]Error:[/] {escape(str(error))}")
        raise typer.Exit(1)

    def report(summary: ConversionSummary) -> None:
        console.print(
            f"\n[bold]Converted {len(summary.converted)} files[/], "
            f"skipped {len(summary.skipped)}, failed {len(summary.failed)}"
        )
        for path, message in summary.failed:
            console.print(f"  [red]{escape(str(path))}[/]: {escape(message)}")
        if not summary.ok:
            raise typer.Exit(1)

    @app.command("to-json")
    def to_json(
        source: Annotated[Path, typer.Argument(help="Directory containing .mbm/.tbl files", exists=True, file_okay=False)],
        target: Annotated[Path, typer.Argument(help="Directory to write JSON files to")],
        overwrite: OverwriteOption = False,
        keep_going: KeepGoingOption = False,
        all_files: Annotated[bool, typer.Option("--all-files", "-a", help="Convert every .mbm/.tbl file, ignoring the built-in exclusions")] = False,
        charmap: CharmapOption = None,
    ) -> None:
        """Convert binary files to JSON files."""
        try:
            options = ConversionOptions(
                overwrite=overwrite,
                keep_going=keep_going,
                codec=build_codec(charmap),
                file_filter=FileFilter.accept_all() if all_files else FileFilter(),
            )
            summary = binaries_to_json(source, target, options)
        except (TitanMessageError, OSError) as e:
            fail(e)
        report(summary)

    @app.command("to-binary")
    def to_binary(
        source: Annotated[Path, typer.Argument(help="Directory containing JSON files", exists=True, file_okay=False)],
        target: Annotated[Path, typer.Argument(help="Directory to write binary files to")],
        overwrite: OverwriteOption = False,
        keep_going: KeepGoingOption = False,
        charmap: CharmapOption = None,
    ) -> None:
        """Convert JSON files to binary files."""
        try:
            options = ConversionOptions(
                overwrite=overwrite,
                keep_going=keep_going,
                codec=build_codec(charmap),
            )
            summary = json_to_binaries(source, target, options)
        except (TitanMessageError, OSError) as e:
            fail(e)
        report(summary)

    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(help="An .mbm or .tbl file", exists=True, dir_okay=False)],
        charmap: CharmapOption = None,
    ) -> None:
        """List the strings of a single binary."""
        try:
            record = import_file(path, codec=build_codec(charmap))
        except (TitanMessageError, OSError) as e:
            fail(e)

        table = Table(title=f"{escape(path.name)} ({record.kind.value})")
        table.add_column("#", justify="right", style="dim")
        table.add_column("ID", justify="right")
        table.add_column("Text")
        for index, entry in enumerate(record.entries):
            text = Text("(empty slot)", style="dim") if entry.is_placeholder else Text(entry.original)
            table.add_row(str(index), str(entry.id), text)

        console.print(table)
        console.print(f"{record.valid_count} strings, {record.placeholder_count} empty slots")

    return app
