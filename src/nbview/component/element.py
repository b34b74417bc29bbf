"""Build the rendered HTML tree."""
import re
from typing import Dict, List, Optional, Union

from lxml import html
from lxml.html import HtmlElement

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")
_XML_INCOMPATIBLE = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def clean_text(value: str) -> str:
    """Remove ANSI escapes and characters lxml refuses to store."""
    plain_text = _ANSI_ESCAPE.sub("", value)
    return _XML_INCOMPATIBLE.sub("", plain_text)


def create_container(cls: Optional[str] = None) -> HtmlElement:
    """Create a detached ``div`` to render into."""
    container: HtmlElement = html.Element("div")
    if cls is not None:
        container.set("class", cls)
    return container


def create_element(
    parent: HtmlElement,
    tag: str,
    cls: Optional[str] = None,
    text: Optional[str] = None,
    attrib: Optional[Dict[str, str]] = None,
) -> HtmlElement:
    """Append a new element to ``parent``.

    Args:
        parent (HtmlElement): The element to append to.
        tag (str): The tag of the new element.
        cls (Optional[str]): The CSS class of the new element.
        text (Optional[str]): The text content of the new element.
        attrib (Optional[Dict[str, str]]): Extra attributes.

    Returns:
        HtmlElement: The appended element.
    """
    element: HtmlElement = html.Element(tag, attrib or {})
    if cls is not None:
        element.set("class", cls)
    if text is not None:
        element.text = clean_text(text)
    parent.append(element)
    return element


def empty(element: HtmlElement) -> None:
    """Remove the children and text of an element, keeping its attributes."""
    for child in list(element):
        element.remove(child)
    element.text = None


def parse_fragments(markup: str) -> List[Union[str, HtmlElement]]:
    """Parse markup into its leading text followed by its elements.

    Full documents, stray doctypes, and XML declarations are accepted. Their
    body content is kept and everything else is dropped.
    """
    document = html.document_fromstring(f"<html><body>{markup}</body></html>")
    body = document.find("body")
    if body is None:
        return []
    fragments: List[Union[str, HtmlElement]] = list(body)
    if body.text:
        fragments.insert(0, body.text)
    return fragments


def append_html(element: HtmlElement, markup: str) -> None:
    """Parse markup and append it after the existing content of an element."""
    cleaned_markup = clean_text(markup)
    if not cleaned_markup:
        return
    for fragment in parse_fragments(cleaned_markup):
        if not isinstance(fragment, str):
            element.append(fragment)
        elif len(element):
            last_child = element[-1]
            last_child.tail = (last_child.tail or "") + fragment
        else:
            element.text = (element.text or "") + fragment


def set_inner_html(element: HtmlElement, markup: str) -> None:
    """Replace the content of an element with parsed markup."""
    empty(element)
    append_html(element, markup)


def text_content(element: HtmlElement) -> str:
    """Return all the text inside an element."""
    content: str = element.text_content()
    return content


def to_html(element: HtmlElement) -> str:
    """Serialize an element."""
    markup: str = html.tostring(element, encoding="unicode")
    return markup
