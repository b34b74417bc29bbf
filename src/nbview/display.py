"""A read-only notebook view for host applications."""
import dataclasses
import logging
from pathlib import Path
from typing import ClassVar, Optional, Tuple, Union

from lxml.html import HtmlElement

from nbview import errors
from nbview.component import element, row
from nbview.component.markdown import HostRenderer
from nbview.notebook import Notebook
from nbview.option_values import BackendEnum

logger = logging.getLogger(__name__)

VIEW_TYPE = "jupyter-notebook"
FILE_EXTENSIONS: Tuple[str, ...] = ("ipynb",)


@dataclasses.dataclass
class NotebookDisplay:
    """Display a notebook file inside a host view.

    Args:
        content: The content region of the view. Rendered notebooks are
            placed here.
        path: The path of the displayed file, if any.
        backend: Whether to render markdown with the standalone renderer
            or delegate to ``renderer``. By default ``'standalone'``.
        renderer: The host rich-text renderer used by the
            ``'host-delegated'`` backend. By default
            ``MarkdownItHostRenderer``.
        strict: Whether to validate notebooks against the Jupyter
            notebook schema. By default ``False``.
    """

    content: HtmlElement = dataclasses.field(default_factory=element.create_container)
    path: Optional[Path] = None
    backend: BackendEnum = BackendEnum.STANDALONE
    renderer: Optional[HostRenderer] = None
    strict: bool = False
    view_type: ClassVar[str] = VIEW_TYPE

    def __post_init__(self) -> None:
        """Constructor."""
        self.data = ""
        self.error: Union[errors.NBViewError, None] = None

    def display_name(self) -> str:
        """Return the title of the view."""
        return self.path.stem if self.path is not None else "Jupyter Notebook"

    def icon_key(self) -> str:
        """Return the icon of the view."""
        return "code"

    async def load(self, data: str) -> None:
        """Render notebook text into the view.

        The text is kept so it can be saved, refreshed, or retried.
        Failures replace the view content with an error block and a
        retry button.
        """
        self.data = data
        element.empty(self.content)
        try:
            notebook = Notebook.from_text(
                data,
                relative_dir=self.path.parent if self.path is not None else None,
                strict=self.strict,
            )
        except errors.ParseError as exception:
            self.error = exception
        else:
            if self.backend == BackendEnum.HOST_DELEGATED:
                self.error = await notebook.render_async(
                    self.content, renderer=self.renderer, owner=self
                )
            else:
                self.error = notebook.render(self.content)

        if self.error is not None:
            self._render_error(self.error)

    def _render_error(self, exception: errors.NBViewError) -> None:
        """Show a load error with a retry button."""
        logger.warning("Error loading Jupyter notebook: %s", exception)
        element.empty(self.content)
        row.render_error(self.content, f"Error loading Jupyter notebook: {exception}")
        element.create_element(
            self.content, "button", cls="jupyter-retry-button", text="Retry"
        )

    async def retry(self) -> None:
        """Render the stored text again."""
        await self.load(self.data)

    async def refresh(self) -> None:
        """Render the stored text again, if there is any."""
        if self.data:
            await self.load(self.data)

    def save(self) -> str:
        """Return the notebook text, unchanged."""
        return self.data

    def clear(self) -> None:
        """Forget the stored text and empty the view."""
        self.data = ""
        self.error = None
        element.empty(self.content)
