"""PlainWiki FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from plainwiki.config import Settings, load_settings
from plainwiki.core.compositor import TemplateCompositor
from plainwiki.core.dispatcher import page_identifier
from plainwiki.core.errors import PageNotFound, WikiError
from plainwiki.core.models import EditPayload, IndexPayload, ViewPayload
from plainwiki.core.storage import FileStorage

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Settings, storage and the template set are created once here and
    captured by the route handlers; nothing is re-read per request except
    the pages themselves.
    """
    if settings is None:
        settings = load_settings()

    storage = FileStorage(settings.storage_path)
    compositor = TemplateCompositor(settings.templates_dir, app_title=settings.app_title)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan: report where pages are served from."""
        logger.info(
            "%s serving pages from %s", settings.app_title, storage.base_path.resolve()
        )
        yield

    app = FastAPI(
        title=settings.app_title,
        debug=settings.debug,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.storage = storage
    app.state.compositor = compositor

    @app.exception_handler(WikiError)
    async def wiki_error_handler(request: Request, exc: WikiError):
        """Map wiki errors to plain-text responses."""
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return PlainTextResponse(str(exc), status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Framework errors (unmatched paths, wrong methods) as plain text too."""
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code, headers=exc.headers
        )

    @app.get("/", response_class=HTMLResponse)
    async def index():
        """Home page - list all pages."""
        payload = IndexPayload(items=await storage.list_pages())
        return HTMLResponse(compositor.render("All Pages", "index", payload))

    @app.get("/view/{name}", response_class=HTMLResponse)
    async def view_page(name: str = Depends(page_identifier)):
        """View a wiki page."""
        try:
            page = await storage.load_page(name)
        except PageNotFound:
            # Page doesn't exist - redirect to edit to create it
            logger.debug("Page %s not found, redirecting to editor", name)
            return RedirectResponse(url=f"/edit/{name}", status_code=302)

        payload = ViewPayload.from_page(page)
        return HTMLResponse(compositor.render(f"View {name}", "view", payload))

    @app.get("/edit/{name}", response_class=HTMLResponse)
    async def edit_page(name: str = Depends(page_identifier)):
        """Edit page form."""
        try:
            payload = EditPayload.from_page(await storage.load_page(name))
        except PageNotFound:
            # New page
            payload = EditPayload(title=name)

        return HTMLResponse(compositor.render(f"Edit {name}", "edit", payload))

    @app.post("/save/{name}")
    async def save_page(
        name: str = Depends(page_identifier),
        title: str = Form(""),
        body: str = Form(""),
    ):
        """Save page content.

        The form's title names the stored page and falls back to the URL
        identifier when left empty.
        """
        page = await storage.save_page(title or name, body.encode("utf-8"))
        return RedirectResponse(url=f"/view/{page.title}", status_code=302)

    @app.post("/delete/{name}")
    async def delete_page(name: str = Depends(page_identifier)):
        """Delete a page."""
        await storage.delete_page(name)
        return RedirectResponse(url="/", status_code=302)

    return app


app = create_app()
