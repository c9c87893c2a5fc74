"""Data models for PlainWiki."""

import re
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class Page(BaseModel):
    """Represents a wiki page."""

    title: str
    body: bytes = b""

    @property
    def text(self) -> str:
        """Return the body decoded for display."""
        return self.body.decode("utf-8", errors="replace")


class IndexPayload(BaseModel):
    """Listing of all page titles."""

    kind: Literal["index"] = "index"
    items: list[str] = Field(default_factory=list)


class ViewPayload(BaseModel):
    """A single page rendered for reading."""

    kind: Literal["view"] = "view"
    title: str
    body: str

    @classmethod
    def from_page(cls, page: Page) -> "ViewPayload":
        return cls(title=page.title, body=page.text)


class EditPayload(BaseModel):
    """Edit form state. ``exists`` is False for a page not yet saved."""

    kind: Literal["edit"] = "edit"
    title: str
    body: str = ""
    exists: bool = False

    @classmethod
    def from_page(cls, page: Page) -> "EditPayload":
        return cls(title=page.title, body=page.text, exists=True)


PagePayload = Annotated[
    Union[IndexPayload, ViewPayload, EditPayload],
    Field(discriminator="kind"),
]


# Page titles double as filenames, so only alphanumerics are allowed.
TITLE_PATTERN = r"[a-zA-Z0-9]+"

_TITLE_RE = re.compile(TITLE_PATTERN)


def is_valid_title(title: str) -> bool:
    """Check whether a title is a usable page identifier."""
    return _TITLE_RE.fullmatch(title) is not None
