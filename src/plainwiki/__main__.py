"""Run the wiki server: ``python -m plainwiki``."""

import uvicorn

from plainwiki.config import configure_logging, load_settings


def main() -> None:
    settings = load_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level)
    # Imported after logging is configured
    uvicorn.run(
        "plainwiki.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
