"""Typer-based command line interface for docmerge.

``docmerge merge`` expands the given file patterns, extracts the plain text of
every matching document and writes the merged result to a single file.
``docmerge extract`` does the same for one document and prints the text.

Exit codes
----------
0 success
1 no input files matched the given patterns
2 usage error
3 I/O error (unreadable package, output not writable)
4 configuration error
5 extraction error (missing markup part, malformed markup, undecodable text)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .extract import extract_docx
from .io import expand_patterns, write_merged_text
from .merge import merge_docx_files
from .utils.errors import ArchiveReadError, ExtractionError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

logger = get_logger(__name__)

app = typer.Typer(
    name="docmerge",
    help="Merge plain text extracted from DOCX files. Use 'docmerge merge' to combine documents.",
    context_settings={"help_option_names": ["-h", "-?", "--help"]},
    add_completion=False,
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Optional[Path], verbose: bool) -> ConfigModel:
    """Load configuration and set up logging, exiting with 4 on failure."""

    try:
        cfg = load_config(config_path)
    except ValidationError as exc:
        _safe_exit(4, f"Invalid configuration: {str(exc).splitlines()[0]}")
    except (yaml.YAMLError, ValueError, OSError) as exc:
        _safe_exit(4, f"Cannot load configuration: {exc}")
    configure_logging("DEBUG" if verbose else cfg.logging.level)
    return cfg


def _resolve_strip(flag: bool | None, cfg: ConfigModel) -> bool:
    """Command-line flag wins; the configuration applies when it is omitted."""

    return cfg.extraction.strip_field_instructions if flag is None else flag


def _exit_for(exc: ExtractionError) -> NoReturn:
    code = 3 if isinstance(exc, ArchiveReadError) else 5
    _safe_exit(code, f"Error: {exc}")


@app.callback()
def main() -> None:
    """Entry point for the docmerge command group."""
    pass


@app.command()
def merge(
    patterns: List[str] = typer.Argument(  # noqa: B008
        ..., help="DOCX file paths or glob patterns, e.g. 'reports/*.docx'"
    ),
    strip_hyperlinks: Optional[bool] = typer.Option(  # noqa: B008
        None,
        "--strip-hyperlinks/--keep-hyperlinks",
        "-s/-S",
        help="Remove hyperlink field instructions from the output (default from config)",
    ),
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", "-o", help="Output file (default from config: merged.txt)"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    encoding_out: Optional[str] = typer.Option(  # noqa: B008
        None, "--encoding", help="Output file encoding"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Merge the text of every DOCX file matching PATTERNS into one file."""

    cfg = _load(config_path, verbose)
    strip = _resolve_strip(strip_hyperlinks, cfg)
    destination = out_path if out_path is not None else Path(cfg.output.path)
    encoding = encoding_out or cfg.output.encoding

    paths = expand_patterns(patterns)
    if not paths:
        _safe_exit(1, "No files found matching the specified patterns.")
    logger.info("Merging %d file(s), strip_field_instructions=%s", len(paths), strip)

    try:
        merged = merge_docx_files(paths, strip)
    except ExtractionError as exc:
        _exit_for(exc)

    try:
        write_merged_text(destination, merged, encoding=encoding)
    except (OSError, LookupError) as exc:
        _safe_exit(3, f"Cannot write {destination}: {exc}")
    typer.echo(f"Merged text written to {destination}")


@app.command()
def extract(
    in_path: Path = typer.Argument(..., help="DOCX file to read"),  # noqa: B008
    strip_hyperlinks: Optional[bool] = typer.Option(  # noqa: B008
        None,
        "--strip-hyperlinks/--keep-hyperlinks",
        "-s/-S",
        help="Remove hyperlink field instructions from the output (default from config)",
    ),
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", "-o", help="Write the text to this file instead of stdout"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Print the plain text of a single DOCX file."""

    cfg = _load(config_path, verbose)
    strip = _resolve_strip(strip_hyperlinks, cfg)

    try:
        text = extract_docx(in_path, strip)
    except ExtractionError as exc:
        _exit_for(exc)

    if out_path is None:
        typer.echo(text)
        return
    try:
        write_merged_text(out_path, text, encoding=cfg.output.encoding)
    except (OSError, LookupError) as exc:
        _safe_exit(3, f"Cannot write {out_path}: {exc}")
    typer.echo(f"Text written to {out_path}")
