"""Render markdown into the HTML tree."""
import functools
import os
import pathlib
from typing import Any, Awaitable, Callable, Iterable, List
from urllib import parse

import markdown_it
import pygments
import validators
from lxml.html import HtmlElement
from markdown_it.token import Token
from mdit_py_plugins.dollarmath import dollarmath_plugin
from pygments import lexers
from pygments.formatters import HtmlFormatter
from pygments.util import ClassNotFound

from nbview.component import element

HostRenderer = Callable[[str, HtmlElement, str, Any], Awaitable[None]]


def highlight_code(code: str, language_name: str, attributes: str) -> str:
    """Highlight fenced code with Pygments.

    Returns an empty string when the language is unknown, which tells
    markdown-it to escape the code itself.
    """
    try:
        lexer = lexers.get_lexer_by_name(language_name)
    except ClassNotFound:
        return ""
    highlighted_code: str = pygments.highlight(
        code, lexer, HtmlFormatter(nowrap=True)
    )
    return highlighted_code


@functools.lru_cache(maxsize=None)
def create_parser() -> markdown_it.MarkdownIt:
    """Create the markdown parser used for notebook markdown."""
    markdown_parser = (
        markdown_it.MarkdownIt(
            "commonmark",
            {
                "html": True,
                "linkify": True,
                "typographer": True,
                "highlight": highlight_code,
            },
        )
        .enable(["linkify", "replacements", "smartquotes", "table", "strikethrough"])
        .use(
            dollarmath_plugin,
            allow_labels=False,
            allow_space=True,
            allow_digits=False,
            double_inline=True,
        )
    )
    return markdown_parser


def render_markdown(markup: str) -> str:
    """Render markdown as HTML."""
    rendered_markdown: str = create_parser().render(markup)
    return rendered_markdown


class StandaloneMarkdown:
    """Render markdown synchronously with markdown-it."""

    def render(self, markup: str, target: HtmlElement) -> None:
        """Render the markdown into ``target``."""
        element.append_html(target, render_markdown(markup))


def _walk_tokens(tokens: Iterable[Token]) -> Iterable[Token]:
    """Yield tokens and their inline children."""
    for token in tokens:
        yield token
        if token.children:
            yield from _walk_tokens(token.children)


def resolve_destination(destination: str, base_path: str) -> str:
    """Resolve a relative link or image destination against a base path.

    URLs, anchors, and URIs with a scheme, such as ``data:`` and
    ``mailto:``, are returned untouched.
    """
    if (
        not destination
        or destination.startswith("#")
        or validators.url(destination)
        or parse.urlsplit(destination).scheme
    ):
        return destination
    # destination comes in a url quoted format
    destination_path = pathlib.Path(parse.unquote(destination))
    if not destination_path.is_absolute():
        destination_path = pathlib.Path(base_path) / destination_path
    return os.fsdecode(destination_path.resolve())


class MarkdownItHostRenderer:
    """An asynchronous rich-text renderer aware of the document location.

    Implements the ``HostRenderer`` call signature, so it may stand in
    for a host application's own renderer.
    """

    link_attributes = {"image": "src", "link_open": "href"}

    async def __call__(
        self, markup: str, target: HtmlElement, base_path: str, owner: Any
    ) -> None:
        """Render markdown into ``target``.

        Args:
            markup (str): The markdown to render.
            target (HtmlElement): The element to render into.
            base_path (str): The directory relative destinations are
                resolved against.
            owner (Any): The object the rendered content belongs to.
        """
        markdown_parser = create_parser()
        env: dict = {}
        tokens: List[Token] = markdown_parser.parse(markup, env)
        for token in _walk_tokens(tokens):
            attribute = self.link_attributes.get(token.type)
            if attribute is None:
                continue
            destination = token.attrGet(attribute)
            if isinstance(destination, str):
                token.attrSet(attribute, resolve_destination(destination, base_path))
        rendered_markdown = markdown_parser.renderer.render(
            tokens, markdown_parser.options, env
        )
        element.append_html(target, rendered_markdown)
