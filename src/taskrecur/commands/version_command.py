"""Command 'version' of taskrecur"""

import typer

from taskrecur import __version__
from taskrecur.services.config_service import get_config_service
from taskrecur.utils.logger import get_log_path
from taskrecur.utils.ui.console import get_console

from .decorators import command_wrapper

console = get_console(highlight=False)


@command_wrapper
def version(
    paths: bool = typer.Option(
        False, "--paths", help="Also show the config and log file locations"
    ),
) -> None:
    """Show version information"""
    console.print(f"taskrecur {__version__}")
    if paths:
        console.print(f"Config: {get_config_service().config_path}", soft_wrap=True)
        console.print(f"Log: {get_log_path()}", soft_wrap=True)
