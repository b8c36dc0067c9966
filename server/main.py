"""Main application entry point"""
import uvicorn
import logging
from api.app import create_app
from config.settings import settings

logger = logging.getLogger(__name__)

# Create FastAPI app for ASGI servers (e.g., uvicorn/gunicorn)
app = create_app()


def _banner(title: str, rows: list[str]) -> str:
    width = max(len(line) for line in [title, *rows]) + 4
    lines = [
        "╔" + "═" * width + "╗",
        "║" + title.center(width) + "║",
        "╠" + "═" * width + "╣",
        *("║  " + row.ljust(width - 2) + "║" for row in rows),
        "╚" + "═" * width + "╝",
    ]
    return "\n".join(lines)


def main():
    """Start the application"""

    logger.info("\n" + _banner(
        "Sahayak Portal Server Starting",
        [
            f"Address: http://{settings.HOST}:{settings.PORT}",
            f"Docs: http://{settings.HOST}:{settings.PORT}/docs",
            f"LLM: {settings.GEMINI_MODEL}",
        ],
    ))

    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
