from pathlib import Path
from typing import Annotated

import typer

from sprite_trigger.assets.loader import Loader
from sprite_trigger.assets.placeholder import generate_placeholder_sheet
from sprite_trigger.demo.scene import CHARACTER_LAYOUT, CHARACTER_SHEET


def generate_sheet_command(
    output: Annotated[
        Path | None,
        typer.Argument(help="Where to write the PNG; defaults to the asset root"),
    ] = None,
    force: Annotated[
        bool, typer.Option("--force", help="Overwrite an existing file")
    ] = False,
) -> None:
    target = output if output is not None else Loader().resolve_path(CHARACTER_SHEET)
    if target.exists() and not force:
        typer.echo(f"{target} already exists; pass --force to overwrite", err=True)
        raise typer.Exit(code=1)
    generate_placeholder_sheet(target, CHARACTER_LAYOUT)
    typer.echo(f"wrote {target}")
