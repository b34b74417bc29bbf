"""Notebook stream results."""
import dataclasses
from typing import ClassVar

from lxml.html import HtmlElement
from nbformat import NotebookNode

from nbview.component import element
from nbview.data import join_fragments


@dataclasses.dataclass
class Stream:
    """A stream output."""

    content: str
    name: str = "stdout"
    output_type: ClassVar[str] = "stream"

    @classmethod
    def from_output(cls, output: NotebookNode) -> "Stream":
        """Create stream from notebook output."""
        stream_text = join_fragments(output.get("text"))
        if stream_text is None:
            raise ValueError("Output does not contain stream text")
        return cls(stream_text, name=output.get("name", "stdout"))

    def render(self, container: HtmlElement) -> None:
        """Render the stream, marking standard error output."""
        stream_class = "jupyter-output-stream"
        if self.name == "stderr":
            stream_class = f"{stream_class} jupyter-output-stream-stderr"
        element.create_element(container, "pre", cls=stream_class, text=self.content)
