"""Tests for the route grammar."""

import pytest

from plainwiki.core.dispatcher import RouteMatch, match_path
from plainwiki.core.errors import RouteNotFound


class TestMatchPath:
    def test_root(self):
        assert match_path("/") == RouteMatch("index", "")

    @pytest.mark.parametrize("operation", ["view", "edit", "save", "delete"])
    def test_operations(self, operation):
        assert match_path(f"/{operation}/Page1") == RouteMatch(operation, "Page1")

    @pytest.mark.parametrize(
        "path",
        [
            "",
            "//",
            "/view",
            "/view/",
            "/view/test/",
            "/view/test/extra",
            "/view/../../etc/passwd",
            "/view/foo bar",
            "/view/foo.txt",
            "/view/foo-bar",
            "/view/foo%20bar",
            "/VIEW/test",
            "/rename/test",
            "/view/test\n",
            "x/view/test",
        ],
    )
    def test_rejects(self, path):
        with pytest.raises(RouteNotFound):
            match_path(path)
