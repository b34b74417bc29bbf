"""Package-wide test fixtures."""
import json
from typing import Any, Callable, Dict, List, Optional

import nbformat
import pytest
from lxml.html import HtmlElement
from nbformat.notebooknode import NotebookNode

from nbview import notebook
from nbview.component import element


@pytest.fixture
def make_notebook_dict() -> Callable[[Optional[Dict[str, Any]]], Dict[str, Any]]:
    """Fixture that returns function that constructs notebook dict."""

    def _make_notebook_dict(cell: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Create valid notebook dictionary around single cell."""
        notebook = {
            "cells": [
                {
                    "cell_type": "code",
                    "execution_count": None,
                    "id": "conceptual-conditions",
                    "metadata": {},
                    "outputs": [],
                    "source": "",
                }
            ],
            "metadata": {
                "kernelspec": {
                    "display_name": "nbview",
                    "language": "python",
                    "name": "nbview",
                },
                "language_info": {
                    "codemirror_mode": {"name": "ipython", "version": 3},
                    "file_extension": ".py",
                    "mimetype": "text/x-python",
                    "name": "python",
                    "nbconvert_exporter": "python",
                    "pygments_lexer": "ipython3",
                    "version": "3.8.6",
                },
            },
            "nbformat": 4,
            "nbformat_minor": 5,
        }
        if cell is not None:
            notebook["cells"] = [cell]
        return notebook

    return _make_notebook_dict


@pytest.fixture
def make_notebook(
    make_notebook_dict: Callable[[Optional[Dict[str, Any]]], Dict[str, Any]]
) -> Callable[[Optional[Dict[str, Any]]], NotebookNode]:
    """Fixture that returns a function that creates a base notebook."""

    def _make_notebook(cell: Optional[Dict[str, Any]] = None) -> NotebookNode:
        """Create a NotebookNode.

        Args:
            cell (Optional[Dict[str, Any]], optional): The cell for the
                NotebookNode. Defaults to None.

        Returns:
            NotebookNode: The NotebookNode containing the inputted cell.
        """
        notebook = make_notebook_dict(cell)
        notebook_node: NotebookNode = nbformat.from_dict(
            notebook
        )  # type: ignore[no-untyped-call]
        return notebook_node

    return _make_notebook


@pytest.fixture
def container() -> HtmlElement:
    """Fixture that returns an empty container to render into."""
    return element.create_container("view-content")


@pytest.fixture
def render_cells(
    container: HtmlElement,
) -> Callable[[List[Any]], HtmlElement]:
    """Fixture that returns a function rendering cells into the container."""

    def _render_cells(cells: List[Any]) -> HtmlElement:
        """Render the cells and return the notebook wrapper."""
        notebook_text = json.dumps({"cells": cells})
        error = notebook.render_text(notebook_text, container)
        assert error is None
        notebook_element: HtmlElement = container[0]
        return notebook_element

    return _render_cells
