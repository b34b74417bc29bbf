"""nbview errors."""


class NBViewError(Exception):
    """Base nbview error."""


class ParseError(NBViewError):
    """Error when input notebook text is invalid."""


class RenderError(NBViewError):
    """Error when a notebook or one of its cells fails to render."""

    def __init__(self, message: str, subject: str = "") -> None:
        """Constructor."""
        self.subject = subject
        super().__init__(message)

    @classmethod
    def from_exception(cls, exception: Exception, subject: str) -> "RenderError":
        """Wrap an exception raised while rendering ``subject``."""
        return cls(f"{subject.capitalize()} render error: {exception}", subject)
