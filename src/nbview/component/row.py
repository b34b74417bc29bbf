"""Jupyter notebook rows."""
import logging
from collections.abc import Mapping
from typing import Any, Union

from lxml.html import HtmlElement

from nbview import errors
from nbview.component import element
from nbview.component.content.input import CodeCell, MarkdownCell
from nbview.component.markdown import HostRenderer, StandaloneMarkdown

logger = logging.getLogger(__name__)

Cell = Union[MarkdownCell, CodeCell]


def create_cell(cell: Any) -> Union[Cell, None]:
    """Create the cell matching a notebook cell's type.

    Args:
        cell (Any): The notebook cell.

    Returns:
        Union[Cell, None]: The cell if its type is known, else None.
    """
    if not isinstance(cell, Mapping):
        return None
    cell_type = cell.get("cell_type")
    rendered_cell: Union[Cell, None] = None
    if cell_type == "markdown":
        rendered_cell = MarkdownCell.from_cell(cell)
    elif cell_type == "code":
        rendered_cell = CodeCell.from_cell(cell)
    return rendered_cell


def render_error(container: HtmlElement, message: str) -> HtmlElement:
    """Render an error message block."""
    return element.create_element(container, "div", cls="jupyter-error", text=message)


def _subject(cell: Cell) -> str:
    """Name the kind of cell for error messages."""
    return "markdown" if isinstance(cell, MarkdownCell) else "code"


def _replace_with_error(
    cell_element: HtmlElement, cell: Cell, exception: Exception
) -> None:
    """Replace the content of a cell that failed to render."""
    render_exception = errors.RenderError.from_exception(exception, _subject(cell))
    logger.warning("%s", render_exception, exc_info=exception)
    element.empty(cell_element)
    render_error(cell_element, str(render_exception))


def render_cell(
    cell: Any, container: HtmlElement, markdown: StandaloneMarkdown
) -> HtmlElement:
    """Render a Jupyter notebook cell synchronously.

    Args:
        cell (Any): The notebook cell to render.
        container (HtmlElement): The notebook wrapper to append to.
        markdown (StandaloneMarkdown): The markdown renderer.

    Returns:
        HtmlElement: The cell wrapper, empty if the cell type is unknown.
    """
    cell_element = element.create_element(container, "div", cls="jupyter-cell")
    rendered_cell = create_cell(cell)
    if rendered_cell is not None:
        try:
            rendered_cell.render(cell_element, markdown)
        except Exception as exception:
            _replace_with_error(cell_element, rendered_cell, exception)
    return cell_element


async def render_cell_async(
    cell: Any,
    container: HtmlElement,
    renderer: HostRenderer,
    base_path: str,
    owner: Any,
) -> HtmlElement:
    """Render a Jupyter notebook cell with a host rich-text renderer.

    Args:
        cell (Any): The notebook cell to render.
        container (HtmlElement): The notebook wrapper to append to.
        renderer (HostRenderer): The host rich-text renderer.
        base_path (str): The directory relative paths are resolved
            against.
        owner (Any): The object the rendered content belongs to.

    Returns:
        HtmlElement: The cell wrapper, empty if the cell type is unknown.
    """
    cell_element = element.create_element(container, "div", cls="jupyter-cell")
    rendered_cell = create_cell(cell)
    if rendered_cell is not None:
        try:
            await rendered_cell.render_async(cell_element, renderer, base_path, owner)
        except Exception as exception:
            _replace_with_error(cell_element, rendered_cell, exception)
    return cell_element
