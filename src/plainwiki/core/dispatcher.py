"""Route grammar for wiki requests.

Every request path must match one of::

    /
    /<operation>/<identifier>

with ``operation`` one of view, edit, save or delete and ``identifier``
alphanumeric. The match is anchored at both ends. This is the only check
standing between a URL and a filename in the page store.
"""

import re
from typing import NamedTuple

from plainwiki.core.errors import RouteNotFound
from plainwiki.core.models import TITLE_PATTERN, is_valid_title

OPERATIONS = ("view", "edit", "save", "delete")

ROUTE_PATTERN = re.compile(
    rf"^(?:/|/({'|'.join(OPERATIONS)})/({TITLE_PATTERN}))$"
)


class RouteMatch(NamedTuple):
    """Operation and page identifier extracted from a path."""

    operation: str
    identifier: str


def match_path(path: str) -> RouteMatch:
    """Match a request path against the route grammar.

    The root path yields operation ``"index"`` with an empty identifier.
    Raises RouteNotFound for anything else that does not match.
    """
    m = ROUTE_PATTERN.fullmatch(path)
    if m is None:
        raise RouteNotFound(path)
    operation, identifier = m.group(1, 2)
    if operation is None:
        return RouteMatch("index", "")
    return RouteMatch(operation, identifier)


def page_identifier(name: str) -> str:
    """FastAPI dependency returning the validated page identifier.

    Checks the decoded path parameter itself, so escaped separators or
    punctuation (`%3F`, `%23`, `%20`) never reach a handler.
    """
    if not is_valid_title(name):
        raise RouteNotFound(name)
    return name
