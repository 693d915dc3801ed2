"""
Shared error types for page rendering.
"""


class PageRenderError(RuntimeError):
    """Raised when a page cannot be assembled."""


class EntityNotFound(PageRenderError):
    """Raised when the memo, tag or user behind a page does not exist."""
