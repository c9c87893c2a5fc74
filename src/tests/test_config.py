"""Unit tests for application configuration."""

import logging
from pathlib import Path
from unittest.mock import patch

from plainwiki.config import TEMPLATES_DIR, Settings, load_settings


class TestSettings:
    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.storage_path == Path("data")
            assert s.templates_dir == TEMPLATES_DIR
            assert s.debug is False
            assert s.app_title == "PlainWiki"
            assert s.port == 8080

    def test_from_env(self):
        env = {
            "PLAINWIKI_STORAGE_PATH": "/tmp/wiki",
            "PLAINWIKI_DEBUG": "true",
            "PLAINWIKI_APP_TITLE": "MyWiki",
            "PLAINWIKI_PORT": "9000",
        }
        with patch.dict("os.environ", env, clear=True):
            s = Settings(_env_file=None)
            assert s.storage_path == Path("/tmp/wiki")
            assert s.debug is True
            assert s.app_title == "MyWiki"
            assert s.port == 9000

    def test_from_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("PLAINWIKI_STORAGE_PATH=/srv/pages\n")
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=env_file)
            assert s.storage_path == Path("/srv/pages")

    def test_packaged_templates_present(self):
        for name in ("base.html", "index.html", "view.html", "edit.html"):
            assert (TEMPLATES_DIR / name).is_file()


class TestLoadSettings:
    def test_loads_environment(self):
        with patch.dict("os.environ", {"PLAINWIKI_APP_TITLE": "Notes"}, clear=True):
            assert load_settings().app_title == "Notes"

    def test_invalid_config_falls_back_to_defaults(self, caplog):
        with patch.dict("os.environ", {"PLAINWIKI_PORT": "not-a-port"}, clear=True):
            with caplog.at_level(logging.ERROR, logger="plainwiki.config"):
                s = load_settings()
        assert s.port == 8080
        assert s.storage_path == Path("data")
        assert "Error loading configuration" in caplog.text
