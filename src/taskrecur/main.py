"""Main entry point for the taskrecur CLI."""

import typer

from taskrecur.commands import (
    config_command,
    describe_command,
    presets_command,
    preview_command,
    validate_command,
    version_command,
)
from taskrecur.utils.typer_helpers import SuggestingGroup
from taskrecur.utils.ui.console import set_color

app = typer.Typer(
    name="taskrecur",
    cls=SuggestingGroup,
    help="Preview, validate and describe recurring task rules",
    no_args_is_help=True,
)

app.add_typer(config_command.app, name="config", help="Configuration management")

app.command("preview")(preview_command.preview_command)
app.command("validate")(validate_command.validate_command)
app.command("describe")(describe_command.describe_command)
app.command("presets")(presets_command.presets_command)
app.command("version")(version_command.version)


@app.callback()
def root(
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
) -> None:
    """Preview, validate and describe recurring task rules."""
    set_color(not no_color)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
