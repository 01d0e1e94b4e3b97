"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdpack.cli.commands import build_cmd, convert_cmd, normalize_cmd


app = typer.Typer(name="mdpack", no_args_is_help=True, help="Markdown documentation tree to zip archive converter")

app.command(name="build")(build_cmd)
app.command(name="convert")(convert_cmd)
app.command(name="normalize")(normalize_cmd)
