"""Batch conversion between binary trees and translation file trees."""

import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from titan_message.config import ConversionOptions, FileFilter
from titan_message.errors import InterchangeError, TitanMessageError
from titan_message.io.json_format import load_json, save_json
from titan_message.io.reader import import_file
from titan_message.io.writer import save_binary

log = logging.getLogger(__name__)


@dataclass
class ConversionSummary:
    """Outcome of a batch conversion."""
    converted: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True if no file failed."""
        return not self.failed


def find_binaries(source_root: Path, file_filter: FileFilter) -> list[Path]:
    """All files below ``source_root`` accepted by the filter, sorted."""
    return sorted(
        path for path in source_root.rglob("*")
        if path.is_file() and file_filter.accepts(path.relative_to(source_root))
    )


def find_translations(source_root: Path) -> list[Path]:
    """All translation files below ``source_root``, sorted."""
    return sorted(path for path in source_root.rglob("*.json") if path.is_file())


def binaries_to_json(
    source_root: str | Path,
    target_root: str | Path,
    options: ConversionOptions | None = None,
) -> ConversionSummary:
    """
    Convert every selected binary below ``source_root`` to a JSON file.

    Output mirrors the source tree: ``a/b/c.mbm`` becomes ``a/b/c.json``
    below ``target_root``. Existing outputs are left alone unless
    ``options.overwrite`` is set.
    """
    source_root, target_root = Path(source_root), Path(target_root)
    options = options or ConversionOptions()
    summary = ConversionSummary()
    # Output path -> binary that produced it in this run
    claimed: dict[Path, Path] = {}

    for path in find_binaries(source_root, options.file_filter):
        relative = path.relative_to(source_root)
        output = target_root / relative.parent / f"{path.stem}.json"

        if output in claimed:
            log.warning(
                "%s and %s both convert to %s, skipping %s",
                claimed[output].relative_to(source_root), relative, output, relative,
            )
            summary.skipped.append(output)
            continue
        claimed[output] = path

        if output.exists() and not options.overwrite:
            log.info("File %s already exists, skipping", output)
            summary.skipped.append(output)
            continue

        log.info("Converting binary %s to JSON", relative)
        try:
            record = import_file(path, root=source_root, codec=options.codec)
            save_json(record, output)
        except (TitanMessageError, OSError) as e:
            if not options.keep_going:
                raise
            log.error("Failed to convert %s: %s", relative, e)
            summary.failed.append((path, str(e)))
            continue

        summary.converted.append(output)

    return summary


def json_to_binaries(
    source_root: str | Path,
    target_root: str | Path,
    options: ConversionOptions | None = None,
) -> ConversionSummary:
    """
    Convert every JSON file below ``source_root`` back to a binary.

    Each binary is written to ``target_root`` joined with the relative
    path recorded at import time, regardless of where the JSON file sits.
    """
    source_root, target_root = Path(source_root), Path(target_root)
    options = options or ConversionOptions()
    summary = ConversionSummary()

    for path in find_translations(source_root):
        relative = path.relative_to(source_root)
        try:
            record = load_json(path)
            output = target_root / safe_relative_path(record.relative_path)

            if output.exists() and not options.overwrite:
                log.info("File %s already exists, skipping", output)
                summary.skipped.append(output)
                continue

            log.info("Converting JSON %s to binary", relative)
            save_binary(record, output, codec=options.codec)
        except (TitanMessageError, OSError) as e:
            if not options.keep_going:
                raise
            log.error("Failed to convert %s: %s", relative, e)
            summary.failed.append((path, str(e)))
            continue

        summary.converted.append(output)

    return summary


def safe_relative_path(relative_path: str) -> PurePosixPath:
    """Validate a recorded relative path so it stays inside the target root."""
    path = PurePosixPath(relative_path.replace("\\", "/"))
    if path.is_absolute() or ".." in path.parts or not path.parts:
        raise InterchangeError(f"Refusing to write outside the target directory: {relative_path!r}")
    return path
