"""Notebook outputs that are not rendered."""
import dataclasses

from lxml.html import HtmlElement


@dataclasses.dataclass
class Ignored:
    """An unknown or malformed output."""

    output_type: str

    def render(self, container: HtmlElement) -> None:
        """Render nothing."""
