"""Jupyter notebook output data."""
import logging
from collections.abc import Mapping
from typing import Any, Union

from nbview.component.content.output.ignored import Ignored
from nbview.component.content.output.result import Result
from nbview.component.content.output.stream import Stream

logger = logging.getLogger(__name__)

Output = Union[Stream, Result, Ignored]


def from_output(output: Any) -> Output:
    """Create the output variant matching a notebook output.

    Args:
        output (Any): The notebook output.

    Returns:
        Output: A ``Stream`` or ``Result``, or ``Ignored`` if the output
        type is unknown or the output lacks the fields its type needs.
    """
    if not isinstance(output, Mapping):
        return Ignored(output_type="")

    output_type = output.get("output_type", "")
    rendered_output: Output
    if output_type == Stream.output_type:
        try:
            rendered_output = Stream.from_output(output)
        except ValueError:
            logger.debug("Skipping stream output without text")
            rendered_output = Ignored(output_type)

    elif output_type in Result.output_types and isinstance(
        output.get("data"), Mapping
    ):
        rendered_output = Result.from_output(output)

    else:
        rendered_output = Ignored(output_type)

    return rendered_output
