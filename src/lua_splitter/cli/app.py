import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from lua_splitter.core.errors import LuaParseError
from lua_splitter.core.split import run_split
from lua_splitter.writer import DirectoryWriter

_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

app = typer.Typer(
    name="lua-splitter",
    help="Split top-level Lua functions into standalone modules behind require() wrappers.",
    context_settings=_CONTEXT_SETTINGS,
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False, show_time=False)],
    )


@app.command(context_settings=_CONTEXT_SETTINGS)
def split(
    input_path: Annotated[
        Path,
        typer.Argument(help="Lua source file to split.", exists=True, dir_okay=False, readable=True),
    ],
    out_dir: Annotated[
        Path,
        typer.Argument(help="Directory for the extracted modules and modified.lua.", file_okay=False),
    ],
) -> None:
    """Extract each top-level function into <slug>.lua and write the rewritten source to modified.lua."""
    _configure_logging()

    try:
        result, modified_location = run_split(input_path, DirectoryWriter(out_dir))
    except LuaParseError as exc:
        err_console.print(f"[red]Could not parse {escape(str(input_path))}:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from None
    except UnicodeDecodeError:
        err_console.print(f"[red]{escape(str(input_path))} is not valid UTF-8.[/red]")
        raise typer.Exit(1) from None

    for module in result.modules:
        console.print(f"Wrote module: {escape(module.filename)}", soft_wrap=True)
        if module.degraded:
            console.print(
                f"[yellow]  {escape(module.symbol)}: header not recognised, module is a stub[/yellow]",
                soft_wrap=True,
            )
    console.print(f"Wrote: {escape(modified_location)}", soft_wrap=True)


def main() -> None:
    app()
