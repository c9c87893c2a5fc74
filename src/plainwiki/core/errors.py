"""PlainWiki exception hierarchy.

Every error carries the HTTP status it maps to, so the application needs a
single exception handler for the whole family.
"""


class WikiError(Exception):
    """Base for all wiki errors."""

    status_code: int = 500


class PageNotFound(WikiError):
    """No page file exists for the requested title."""

    status_code = 404

    def __init__(self, title: str) -> None:
        super().__init__(f"Page not found: {title}")
        self.title = title


class RouteNotFound(WikiError):
    """The request path does not match the route grammar."""

    status_code = 404

    def __init__(self, path: str) -> None:
        super().__init__(f"Not found: {path}")
        self.path = path


class InvalidTitle(WikiError):
    """A title is not usable as a page identifier."""

    status_code = 400

    def __init__(self, title: str) -> None:
        super().__init__(f"Invalid page title: {title!r}")
        self.title = title


class StorageError(WikiError):
    """An I/O failure in the page store."""


class TemplateNotFound(WikiError):
    """A layout or content template is missing from the loaded set."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Template not found: {name}")
        self.name = name


class RenderError(WikiError):
    """A template failed to render against its payload."""
