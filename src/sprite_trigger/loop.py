import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from sprite_trigger.cli.commands.describe_sheet import describe_sheet_command
from sprite_trigger.cli.commands.generate_sheet import generate_sheet_command
from sprite_trigger.cli.commands.run import run_command

app = typer.Typer()

app.command(name="run")(run_command)
app.command(name="describe-sheet")(describe_sheet_command)
app.command(name="generate-sheet")(generate_sheet_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
