"""CLI command implementations"""

import logging
import os
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdpack.config import Settings, load_config
from mdpack.core.frontmatter import normalize
from mdpack.core.models import BuildResult
from mdpack.core.pipeline import policy_from_settings, run_build, run_convert


RootOpt    = Annotated[Optional[str],  typer.Option("--root-dir", help="Source documentation tree")]
DestOpt    = Annotated[Optional[str],  typer.Option("--dest-dir", help="Parent of working tree and archive")]
ZipOpt     = Annotated[Optional[str],  typer.Option("--zip-filename", help="Archive file name")]
IndexOpt   = Annotated[Optional[str],  typer.Option("--index-name", help="Substring marking index files")]
VersionOpt = Annotated[Optional[str],  typer.Option("--version-code", help="Working directory name")]
LayoutOpt  = Annotated[Optional[str],  typer.Option("--layout", help="mirror or promote")]
HiddenOpt  = Annotated[Optional[bool], typer.Option("--hidden/--no-hidden", help="Emit 'hidden: false' in front matter")]
VerboseOpt = Annotated[bool,           typer.Option("--verbose", "-v", help="Log every copied file")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1; flag the step when run as a CI action."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    if os.getenv("GITHUB_ACTIONS") == "true":
        typer.echo(f"::error::{cause or msg}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")


def _echo_written(result: BuildResult) -> None:
    for src, dest in result.written:
        typer.echo(f"  {src} -> {dest}")


def build_cmd(
    root: RootOpt = None,
    dest: DestOpt = None,
    zip_filename: ZipOpt = None,
    index_name: IndexOpt = None,
    version_code: VersionOpt = None,
    layout: LayoutOpt = None,
    hidden: HiddenOpt = None,
    verbose: VerboseOpt = False,
    ):
    """Run the full pipeline: clean -> convert -> archive."""
    _configure_logging(verbose)
    settings = _settings(overrides={
        "root_directory": root, "destination_directory": dest, "zip_filename": zip_filename,
        "index_name": index_name, "version_code": version_code, "layout": layout, "hidden": hidden,
    })
    try:
        result = run_build(settings)
    except Exception as e:
        _fail("Build failed", e)
    _echo_written(result)
    typer.echo(f"Archived {len(result.written)} document(s) to {result.archive_path}")


def convert_cmd(
    root: RootOpt = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory (default: working dir)")] = None,
    index_name: IndexOpt = None,
    layout: LayoutOpt = None,
    hidden: HiddenOpt = None,
    verbose: VerboseOpt = False,
    ):
    """Write the normalized tree without archiving it."""
    _configure_logging(verbose)
    settings = _settings(overrides={
        "root_directory": root, "index_name": index_name, "layout": layout, "hidden": hidden,
    })
    try:
        result = run_convert(settings, Path(out) if out else None)
    except Exception as e:
        _fail("Convert failed", e)
    _echo_written(result)
    typer.echo(f"Converted {len(result.written)} document(s) to {result.working_dir}/")


def normalize_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to normalize")],
    layout: LayoutOpt = None,
    hidden: HiddenOpt = None,
    ):
    """Print a single document with its rewritten front matter."""
    settings = _settings(overrides={"layout": layout, "hidden": hidden})
    try:
        text = path.read_text(encoding="utf-8-sig")
    except OSError as e:
        _fail(f"Cannot read {path}", e)
    typer.echo(normalize(text, policy_from_settings(settings).normalize, source=str(path)), nl=False)
