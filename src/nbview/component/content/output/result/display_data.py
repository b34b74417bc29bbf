"""Notebook display data and execute result."""
import dataclasses
import logging
from typing import ClassVar, Iterator, List, Type, Union

from lxml.html import HtmlElement

from nbview.component import element
from nbview.data import Data, join_fragments

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class DisplayData:
    """A notebook's display data."""

    content: str
    data_type: ClassVar[str]

    @classmethod
    def from_data(cls, data: Data) -> Union["DisplayData", None]:
        """Create display data from notebook data.

        Returns None if the payload for ``data_type`` is malformed.
        """
        content = join_fragments(data[cls.data_type])
        if content is None:
            logger.debug("Skipping malformed %s payload", cls.data_type)
            return None
        return cls(content)

    def render(self, container: HtmlElement) -> None:
        """Render the display data into the output container."""
        raise NotImplementedError


@dataclasses.dataclass
class PlainDisplay(DisplayData):
    """Notebook plain display data."""

    data_type: ClassVar[str] = "text/plain"

    def render(self, container: HtmlElement) -> None:
        """Render the plain text."""
        element.create_element(
            container, "pre", cls="jupyter-output-result", text=self.content
        )


@dataclasses.dataclass
class PNGDisplay(DisplayData):
    """Notebook PNG display data."""

    data_type: ClassVar[str] = "image/png"

    @classmethod
    def from_data(cls, data: Data) -> Union["DisplayData", None]:
        """Create PNG display data, dropping whitespace from the payload."""
        encoded_image = data[cls.data_type]
        if not isinstance(encoded_image, str):
            logger.debug("Skipping malformed %s payload", cls.data_type)
            return None
        return cls("".join(encoded_image.split()))

    @property
    def source(self) -> str:
        """The data URI of the image."""
        return f"data:image/png;base64,{self.content}"

    def render(self, container: HtmlElement) -> None:
        """Render the image."""
        image_container = element.create_element(
            container, "div", cls="jupyter-output-image"
        )
        element.create_element(
            image_container,
            "img",
            attrib={"src": self.source, "alt": "Jupyter output image"},
        )


@dataclasses.dataclass
class SVGDisplay(DisplayData):
    """Notebook SVG display data."""

    data_type: ClassVar[str] = "image/svg+xml"

    def render(self, container: HtmlElement) -> None:
        """Inject the SVG markup."""
        svg_container = element.create_element(
            container, "div", cls="jupyter-output-svg"
        )
        element.set_inner_html(svg_container, self.content)


@dataclasses.dataclass
class HTMLDisplay(DisplayData):
    """Notebook HTML display data."""

    data_type: ClassVar[str] = "text/html"

    def render(self, container: HtmlElement) -> None:
        """Inject the HTML markup."""
        html_container = element.create_element(
            container, "div", cls="jupyter-output-html"
        )
        element.set_inner_html(html_container, self.content)


DISPLAY_ORDER: List[Type[DisplayData]] = [
    PlainDisplay,
    PNGDisplay,
    SVGDisplay,
    HTMLDisplay,
]


def render_display_data(data: Data) -> Iterator[DisplayData]:
    """Yield the recognized display data in display order.

    Args:
        data (Data): The notebook output data, keyed by MIME type.

    Yields:
        DisplayData: The display data for each recognized MIME type.
    """
    for display_data_type in DISPLAY_ORDER:
        if display_data_type.data_type in data:
            display_data = display_data_type.from_data(data)
            if display_data is not None:
                yield display_data
