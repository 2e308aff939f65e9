"""Exception classes for marklite.

The lexer never raises: malformed Markdown degrades to literal text. These
exceptions cover misuse of the lower-level APIs (hand-built token sequences,
corrupt serialized data).
"""

from __future__ import annotations


class MarkliteError(Exception):
    """Base exception for all marklite errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(MarkliteError):
    """Error during HTML rendering.

    Raised when the renderer receives a token it cannot turn into HTML,
    such as a LINK or IMAGE token without a target URL.
    """

    def __init__(self, message: str, token: object | None = None) -> None:
        """Initialize render error.

        Args:
            message: Error description
            token: The offending token (optional)
        """
        self.token = token
        if token is not None:
            message = f"{message}: {token!r}"
        super().__init__(message)


class SerializationError(MarkliteError):
    """Error while restoring tokens from a dict or JSON payload."""

    pass
