"""Render the notebook."""
import dataclasses
import logging
import os
import pathlib
from dataclasses import InitVar
from pathlib import Path
from typing import Any, List, Optional, Union

import jsonschema
import nbformat
from lxml.html import HtmlElement
from nbformat import validator
from nbformat.notebooknode import NotebookNode

from nbview import errors
from nbview.component import element, row
from nbview.component.markdown import (
    HostRenderer,
    MarkdownItHostRenderer,
    StandaloneMarkdown,
)

logger = logging.getLogger(__name__)


def parse_notebook(text: str, strict: bool = False) -> NotebookNode:
    """Parse and validate notebook text.

    Args:
        text (str): The raw notebook JSON.
        strict (bool): Whether to validate the notebook against the
            Jupyter notebook schema. By default only the presence of a
            ``cells`` list is checked.

    Returns:
        NotebookNode: The parsed notebook.

    Raises:
        ParseError: If the text is empty, is not JSON, or is not shaped
            like a notebook.
    """
    if not text:
        raise errors.ParseError("File content is empty")
    try:
        notebook_dict = nbformat.reader.parse_json(text)
    except nbformat.reader.NotJSONError as exception:
        raise errors.ParseError(str(exception)) from exception
    except RecursionError as exception:
        raise errors.ParseError("Notebook is nested too deeply") from exception

    if not isinstance(notebook_dict, dict) or not isinstance(
        notebook_dict.get("cells"), list
    ):
        raise errors.ParseError("Invalid Jupyter notebook format")

    try:
        notebook_node: NotebookNode = nbformat.from_dict(  # type: ignore[no-untyped-call]
            notebook_dict
        )
    except RecursionError as exception:
        raise errors.ParseError("Notebook is nested too deeply") from exception

    if strict:
        try:
            nbformat.validate(notebook_node)  # type: ignore[no-untyped-call]
        except (
            AttributeError,
            KeyError,
            validator.NotebookValidationError,
            jsonschema.ValidationError,
        ) as exception:
            raise errors.ParseError(
                f"Invalid Jupyter notebook format: {exception}"
            ) from exception
    return notebook_node


@dataclasses.dataclass()
class Notebook:
    """Construct a Notebook object to render Jupyter Notebooks.

    Args:
        notebook_node: A NotebookNode of the notebook to render.
        relative_dir: The directory relative links in markdown are
            resolved against by host renderers. If ``None`` will assume
            the current directory. By default ``None``.
    """

    notebook_node: NotebookNode
    relative_dir: InitVar[Optional[Path]] = None

    def __post_init__(self, relative_dir: Optional[Path]) -> None:
        """Constructor."""
        self.cells: List[Any] = self.notebook_node["cells"]
        self.relative_dir = (
            pathlib.Path().resolve() if relative_dir is None else relative_dir
        )

    @classmethod
    def from_text(
        cls, text: str, relative_dir: Optional[Path] = None, strict: bool = False
    ) -> "Notebook":
        """Create a Notebook from notebook text.

        Raises:
            ParseError: If the text is not a valid Jupyter notebook.
        """
        notebook_node = parse_notebook(text, strict=strict)
        return cls(notebook_node, relative_dir=relative_dir)

    @property
    def base_path(self) -> str:
        """The base path handed to host renderers."""
        return os.fsdecode(self.relative_dir)

    def _fail(
        self, container: HtmlElement, exception: Exception
    ) -> errors.RenderError:
        """Replace everything rendered so far with an error block."""
        logger.exception("Error rendering Jupyter notebook")
        render_exception = errors.RenderError(
            f"Error parsing notebook: {exception}", subject="notebook"
        )
        element.empty(container)
        row.render_error(container, str(render_exception))
        return render_exception

    def render(self, container: HtmlElement) -> Union[errors.RenderError, None]:
        """Render the notebook with the standalone markdown renderer.

        Args:
            container (HtmlElement): The element to render into. Its
                previous content is removed.

        Returns:
            Union[RenderError, None]: The error shown in place of the
            notebook, if rendering failed.
        """
        element.empty(container)
        markdown = StandaloneMarkdown()
        try:
            notebook_element = element.create_element(
                container, "div", cls="jupyter-notebook"
            )
            for cell in self.cells:
                row.render_cell(cell, notebook_element, markdown=markdown)
        except Exception as exception:
            return self._fail(container, exception)
        return None

    async def render_async(
        self,
        container: HtmlElement,
        renderer: Optional[HostRenderer] = None,
        owner: Any = None,
    ) -> Union[errors.RenderError, None]:
        """Render the notebook with a host rich-text renderer.

        Cells are rendered one at a time, in order.

        Args:
            container (HtmlElement): The element to render into. Its
                previous content is removed.
            renderer (Optional[HostRenderer]): The host rich-text
                renderer. By default ``MarkdownItHostRenderer``.
            owner (Any): The object the rendered content belongs to.

        Returns:
            Union[RenderError, None]: The error shown in place of the
            notebook, if rendering failed.
        """
        element.empty(container)
        host_renderer = MarkdownItHostRenderer() if renderer is None else renderer
        try:
            notebook_element = element.create_element(
                container, "div", cls="jupyter-notebook"
            )
            for cell in self.cells:
                await row.render_cell_async(
                    cell,
                    notebook_element,
                    renderer=host_renderer,
                    base_path=self.base_path,
                    owner=owner,
                )
        except Exception as exception:
            return self._fail(container, exception)
        return None


def render_text(
    text: str,
    container: HtmlElement,
    relative_dir: Optional[Path] = None,
    strict: bool = False,
) -> Union[errors.NBViewError, None]:
    """Render notebook text, such as the body of a ``jupyter`` fenced block.

    Args:
        text (str): The raw notebook JSON.
        container (HtmlElement): The element to render into.
        relative_dir (Optional[Path]): The directory of the notebook.
        strict (bool): Whether to validate against the notebook schema.

    Returns:
        Union[NBViewError, None]: The error shown in the container, if
        any.
    """
    try:
        rendered_notebook = Notebook.from_text(
            text, relative_dir=relative_dir, strict=strict
        )
    except errors.ParseError as exception:
        logger.warning("Invalid Jupyter content: %s", exception)
        element.empty(container)
        row.render_error(container, f"Error parsing Jupyter content: {exception}")
        return exception
    return rendered_notebook.render(container)
