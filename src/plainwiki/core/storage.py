"""Storage abstraction for wiki pages."""

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from plainwiki.core.errors import InvalidTitle, PageNotFound, StorageError
from plainwiki.core.models import Page, is_valid_title

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Abstract base class for page storage."""

    @abstractmethod
    async def load_page(self, title: str) -> Page:
        """Get a page by title. Raises PageNotFound if missing."""
        ...

    @abstractmethod
    async def save_page(self, title: str, body: bytes) -> Page:
        """Save a page, replacing any existing body."""
        ...

    @abstractmethod
    async def delete_page(self, title: str) -> None:
        """Delete a page. Raises PageNotFound if missing."""
        ...

    @abstractmethod
    async def list_pages(self) -> list[str]:
        """List all page titles."""
        ...

    @abstractmethod
    async def page_exists(self, title: str) -> bool:
        """Check if a page exists."""
        ...


class FileStorage(Storage):
    """File-based storage implementation.

    Each page is one file, ``<base_path>/<title>.txt``, holding the raw body
    bytes with no header. The storage root is created on first save; reads
    against a missing root behave as an empty wiki.
    """

    EXTENSION = ".txt"
    TEMP_PREFIX = ".tmp-"

    def __init__(self, base_path: Path):
        self.base_path = Path(base_path)

    def _get_path(self, title: str) -> Path:
        """Get full path for a page, rejecting unsafe titles."""
        if not is_valid_title(title):
            raise InvalidTitle(title)
        return self.base_path / f"{title}{self.EXTENSION}"

    async def load_page(self, title: str) -> Page:
        """Get a page by title."""
        path = self._get_path(title)
        try:
            body = path.read_bytes()
        except FileNotFoundError:
            raise PageNotFound(title) from None
        except OSError as e:
            logger.error("Failed to read page %s: %s", title, e)
            raise StorageError(f"Failed to read page {title}: {e}") from e

        return Page(title=title, body=body)

    async def save_page(self, title: str, body: bytes) -> Page:
        """Save a page.

        The body goes to a temporary file in the storage root which is then
        renamed over the page file, so readers see either the old or the new
        body and never a partial write.
        """
        path = self._get_path(title)
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=self.TEMP_PREFIX, dir=self.base_path
            )
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(body)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error("Failed to save page %s: %s", title, e)
            raise StorageError(f"Failed to save page {title}: {e}") from e

        logger.info("Saved page %s (%d bytes)", title, len(body))
        return Page(title=title, body=body)

    async def delete_page(self, title: str) -> None:
        """Delete a page."""
        path = self._get_path(title)
        try:
            path.unlink()
        except FileNotFoundError:
            raise PageNotFound(title) from None
        except OSError as e:
            logger.error("Failed to delete page %s: %s", title, e)
            raise StorageError(f"Failed to delete page {title}: {e}") from e

        logger.info("Deleted page %s", title)

    async def list_pages(self) -> list[str]:
        """List all page titles."""
        titles = []
        try:
            for path in self.base_path.iterdir():
                if path.suffix != self.EXTENSION or not path.is_file():
                    continue
                # Skip anything that could not have been saved as a page
                if is_valid_title(path.stem):
                    titles.append(path.stem)
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.error("Failed to list pages in %s: %s", self.base_path, e)
            raise StorageError(f"Failed to list pages: {e}") from e
        return sorted(titles)

    async def page_exists(self, title: str) -> bool:
        """Check if a page exists."""
        return self._get_path(title).is_file()
