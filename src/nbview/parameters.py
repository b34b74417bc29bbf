"""Command line interface parameters."""
import sys
from typing import Optional

import typer
from rich import console

from nbview import __version__, option_values
from nbview.option_values import BackendEnum, ThemeEnum


def version_callback(value: Optional[bool] = None) -> None:
    """Return the package version.

    Args:
        value (bool): Whether to return the version.

    Raises:
        Exit: Exits the command line interface with an exit code of 0.
    """
    if value:
        typer.echo(f"nbview {__version__}")
        raise typer.Exit()


def _theme_callback(theme_argument: ThemeEnum) -> str:
    """Convert theme argument to a Pygments style name."""
    translated_theme = translate_theme(theme_argument.value)
    return translated_theme


def translate_theme(theme_value: str) -> str:
    """Translate the theme from CLI value to pygments theme."""
    theme_alias = {
        "dark": "monokai",
        "light": "default",
    }
    lowered_theme_argument = theme_value.lower()
    pygments_theme = theme_alias.get(lowered_theme_argument, lowered_theme_argument)
    return pygments_theme


def _list_themes_callback(value: Optional[bool] = None) -> None:
    """List all available themes."""
    if value:
        stdout_console = console.Console(file=sys.stdout)
        for theme in option_values.get_all_available_themes():
            translated_theme = translate_theme(theme)
            theme_title = (
                f"{theme} / {translated_theme}" if theme in ("dark", "light") else theme
            )
            stdout_console.print(theme_title, highlight=False)
        raise typer.Exit()


file_argument = typer.Argument(
    ...,
    help="Jupyter notebook file(s) to render as HTML."
    " Use a dash ('-') to read from standard input.",
    exists=False,
    dir_okay=False,
    allow_dash=True,
)
output_option = typer.Option(
    None,
    "--output",
    "-o",
    help="Write the rendered page to this file instead of standard output.",
    dir_okay=False,
    writable=True,
)
backend_option = typer.Option(
    BackendEnum.STANDALONE,
    "--backend",
    "-b",
    help="How markdown and code cells are rendered. 'standalone' renders"
    " code as plain preformatted text, 'host-delegated' passes markdown and"
    " fenced code through the rich-text renderer.",
    envvar="NBVIEW_BACKEND",
    case_sensitive=False,
)
theme_option = typer.Option(
    "dark",
    "--theme",
    "-t",
    help="The theme to use for syntax highlighting."
    " Call '--list-themes' to list all available themes.",
    envvar="NBVIEW_THEME",
    callback=_theme_callback,
)
list_themes_option = typer.Option(
    None,
    "--list-themes",
    "--lt",
    help="List all available themes.",
    callback=_list_themes_callback,
    is_eager=True,
)
strict_option = typer.Option(
    False,
    "--strict",
    "-s",
    help="Validate notebooks against the Jupyter notebook schema.",
    envvar="NBVIEW_STRICT",
)
verbose_option = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Log rendering details.",
    envvar="NBVIEW_VERBOSE",
)
version_option = typer.Option(
    None,
    "--version",
    "-V",
    help="Display the version and exit.",
    callback=version_callback,
    is_eager=True,
)
