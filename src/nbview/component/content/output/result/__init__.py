"""Execution results from Jupyter notebooks."""
import dataclasses
from typing import ClassVar, List, Tuple

from lxml.html import HtmlElement
from nbformat import NotebookNode

from nbview.component.content.output.result import display_data
from nbview.component.content.output.result.display_data import DisplayData


@dataclasses.dataclass
class Result:
    """An execute result or display data output."""

    display_data: List[DisplayData]
    output_types: ClassVar[Tuple[str, ...]] = ("execute_result", "display_data")

    @classmethod
    def from_output(cls, output: NotebookNode) -> "Result":
        """Create a result from a notebook output with a ``data`` mapping."""
        rendered_display_data = list(display_data.render_display_data(output["data"]))
        return cls(rendered_display_data)

    def render(self, container: HtmlElement) -> None:
        """Render each display data into the output container."""
        for display in self.display_data:
            display.render(container)
