"""The Jupyter notebook data."""
from typing import Any, Dict, List, Union

from nbformat import NotebookNode

Data = Dict[str, Union[str, List[str], NotebookNode]]


def join_fragments(value: Any) -> Union[str, None]:
    """Join multiline notebook text.

    Notebook text is stored either as a list of fragments that already
    carry their line breaks, or as a single string.

    Args:
        value (Any): The stored text.

    Returns:
        Union[str, None]: The joined text, or None if ``value`` is not
        notebook text.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, list) and all(
        isinstance(fragment, str) for fragment in value
    ):
        return "".join(value)
    return None
