"""Input notebook cells."""
import dataclasses
import re
from collections.abc import Mapping
from typing import Any, List

from lxml.html import HtmlElement

from nbview.component import element
from nbview.component.content import output
from nbview.component.content.output import Output
from nbview.component.markdown import HostRenderer, StandaloneMarkdown
from nbview.data import join_fragments

DEFAULT_LANGUAGE = "python"
_BACKTICK_RUN = re.compile(r"`{3,}")


def get_source(cell: Mapping) -> str:
    """Return the cell source, or an empty string if it is missing."""
    source = join_fragments(cell.get("source", ""))
    return source if source is not None else ""


def get_language(cell: Mapping) -> str:
    """Return the language hint stored in the cell metadata."""
    metadata = cell.get("metadata")
    vscode = metadata.get("vscode") if isinstance(metadata, Mapping) else None
    language_id = vscode.get("languageId") if isinstance(vscode, Mapping) else None
    if isinstance(language_id, str) and language_id:
        return language_id
    return DEFAULT_LANGUAGE


def fence_code(source: str, language: str) -> str:
    """Wrap code in a markdown fence longer than any backtick run inside."""
    longest_run = max(
        (len(match.group()) for match in _BACKTICK_RUN.finditer(source)), default=2
    )
    fence = "`" * (longest_run + 1)
    return f"{fence}{language}\n{source}\n{fence}"


@dataclasses.dataclass
class Cell:
    """A generic Jupyter cell."""

    source: str

    def render(self, container: HtmlElement, markdown: StandaloneMarkdown) -> None:
        """Render the cell."""

    async def render_async(
        self,
        container: HtmlElement,
        renderer: HostRenderer,
        base_path: str,
        owner: Any,
    ) -> None:
        """Render the cell with a host rich-text renderer."""


@dataclasses.dataclass
class MarkdownCell(Cell):
    """A Jupyter markdown cell."""

    @classmethod
    def from_cell(cls, cell: Mapping) -> "MarkdownCell":
        """Create a markdown cell from a notebook cell."""
        return cls(get_source(cell))

    def render(self, container: HtmlElement, markdown: StandaloneMarkdown) -> None:
        """Render the markdown cell."""
        markdown_container = element.create_element(
            container, "div", cls="jupyter-markdown-cell"
        )
        markdown.render(self.source, markdown_container)

    async def render_async(
        self,
        container: HtmlElement,
        renderer: HostRenderer,
        base_path: str,
        owner: Any,
    ) -> None:
        """Render the markdown cell with a host rich-text renderer."""
        markdown_container = element.create_element(
            container, "div", cls="jupyter-markdown-cell"
        )
        await renderer(self.source, markdown_container, base_path, owner)


@dataclasses.dataclass
class CodeCell(Cell):
    """A Jupyter code cell."""

    language: str = DEFAULT_LANGUAGE
    outputs: List[Output] = dataclasses.field(default_factory=list)

    @classmethod
    def from_cell(cls, cell: Mapping) -> "CodeCell":
        """Create a code cell from a notebook cell."""
        cell_outputs = cell.get("outputs")
        outputs = (
            [output.from_output(cell_output) for cell_output in cell_outputs]
            if isinstance(cell_outputs, list)
            else []
        )
        return cls(get_source(cell), language=get_language(cell), outputs=outputs)

    def _render_input(self, container: HtmlElement) -> HtmlElement:
        """Render the code container and its language label."""
        code_container = element.create_element(
            container, "div", cls="jupyter-code-input"
        )
        element.create_element(
            code_container, "div", cls="jupyter-code-language", text=self.language
        )
        return code_container

    def _render_outputs(self, container: HtmlElement) -> None:
        """Render the outputs of the code cell, if there are any."""
        if not self.outputs:
            return
        output_container = element.create_element(
            container, "div", cls="jupyter-output"
        )
        for cell_output in self.outputs:
            cell_output.render(output_container)

    def render(self, container: HtmlElement, markdown: StandaloneMarkdown) -> None:
        """Render the code cell as preformatted text."""
        code_container = self._render_input(container)
        code_block = element.create_element(
            code_container, "pre", cls=f"language-{self.language}"
        )
        element.create_element(code_block, "code", text=self.source)
        self._render_outputs(container)

    async def render_async(
        self,
        container: HtmlElement,
        renderer: HostRenderer,
        base_path: str,
        owner: Any,
    ) -> None:
        """Render the code cell as a fenced block with a host renderer."""
        code_container = self._render_input(container)
        markdown_code = fence_code(self.source, language=self.language)
        await renderer(markdown_code, code_container, base_path, owner)
        self._render_outputs(container)
