"""Command-line interface."""
import asyncio
import dataclasses
import logging
import os
import pathlib
from pathlib import Path
from typing import IO, AnyStr, List, Optional, Sequence, Union

import click
import jinja2
import typer
from pygments.formatters import HtmlFormatter
from rich import console, style, text, traceback
from rich.logging import RichHandler

from nbview import parameters
from nbview.component import element
from nbview.display import NotebookDisplay
from nbview.option_values import BackendEnum, ThemeEnum

app = typer.Typer()
traceback.install(theme="ansi_dark")
logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Section:
    """A rendered notebook file."""

    title: str
    body: str


def _make_invalid_notebook_message(
    file: Union[
        Sequence[Union[Path, IO[AnyStr]]],
        Union[Path, IO[AnyStr]],
    ]
) -> str:
    """Create message signifying which paths are invalid."""
    files = file if isinstance(file, Sequence) else [file]
    file_names = [
        os.fsdecode(file) if isinstance(file, Path) else file.name for file in files
    ]

    if len(file_names) == 1:
        verb = "is"
        plural = ""

    else:
        verb = "are"
        plural = "s"

    invalid_notebook_message = (
        f"{', '.join(file_names)} {verb}" f" not a valid Jupyter Notebook path{plural}."
    )
    return invalid_notebook_message


def _configure_logging(verbose: bool) -> None:
    """Send log records to standard error through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(message)s",
        handlers=[RichHandler(console=console.Console(stderr=True))],
        force=True,
    )


def _render_page(sections: List[Section], theme: str) -> str:
    """Render the HTML page holding every notebook."""
    env = jinja2.Environment(
        loader=jinja2.PackageLoader("nbview"),
        autoescape=jinja2.select_autoescape(default=True),
    )
    page_template = env.get_template("notebook_template.jinja")
    highlight_css = HtmlFormatter(style=theme).get_style_defs(".jupyter-cell pre")
    title = sections[0].title if len(sections) == 1 else "Jupyter Notebooks"
    page: str = page_template.render(
        title=title, sections=sections, highlight_css=highlight_css
    )
    return page


async def _render_file(
    notebook_text: str, path: Path, backend: BackendEnum, strict: bool
) -> NotebookDisplay:
    """Render a single notebook file."""
    notebook_display = NotebookDisplay(
        path=path if path != pathlib.Path("-") else None,
        backend=backend,
        strict=strict,
    )
    await notebook_display.load(notebook_text)
    return notebook_display


@app.command()
def main(
    file: List[Path] = parameters.file_argument,
    output: Optional[Path] = parameters.output_option,
    backend: BackendEnum = parameters.backend_option,
    theme: ThemeEnum = parameters.theme_option,
    list_themes: Optional[bool] = parameters.list_themes_option,
    strict: bool = parameters.strict_option,
    verbose: bool = parameters.verbose_option,
    version: Optional[bool] = parameters.version_option,
) -> None:
    """Render Jupyter Notebooks as HTML."""
    _configure_logging(verbose)
    error_console = console.Console(stderr=True)
    sections = []
    successful_render = False
    for notebook_file in file:
        with click.open_file(
            os.fsdecode(notebook_file), encoding="utf-8"
        ) as opened_notebook_file:
            notebook_text = opened_notebook_file.read()
        notebook_display = asyncio.run(
            _render_file(notebook_text, notebook_file, backend=backend, strict=strict)
        )
        if notebook_display.error is None:
            successful_render = True
        else:
            logger.debug("Failed to render %s", notebook_file)
            error_console.print(
                text.Text(
                    _make_invalid_notebook_message(notebook_file),
                    style=style.Style(color="color(178)"),
                )
            )
        title = (
            "<stdin>"
            if notebook_display.path is None
            else os.fsdecode(notebook_display.path)
        )
        sections.append(
            Section(title=title, body=element.to_html(notebook_display.content))
        )

    if not successful_render:
        message = _make_invalid_notebook_message(file)
        raise typer.BadParameter(message, param_hint="'FILE...'")

    page = _render_page(sections, theme=theme)
    if output is None:
        typer.echo(page, nl=False)
    else:
        output.write_text(page, encoding="utf-8")
        logger.debug("Wrote %s", output)


typer_click_object = typer.main.get_command(app)
if __name__ == "__main__":
    typer_click_object()  # pragma: no cover
