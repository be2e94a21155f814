import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from fastapi.responses import PlainTextResponse

from yt2mp3.config import get_settings
from yt2mp3.exceptions import Yt2Mp3Error
from yt2mp3.routers import convert, info

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Interactive docs only while developing
_docs_enabled = settings.environment == "development"

app = FastAPI(
    title="yt2mp3 API",
    version="1.0.0",
    docs_url="/docs" if _docs_enabled else None,
    redoc_url="/redoc" if _docs_enabled else None,
    openapi_url="/openapi.json" if _docs_enabled else None,
)


async def _error_response(request: Request, exc: Yt2Mp3Error) -> PlainTextResponse:
    """Render any service error as plain text with its own status code."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


app.add_exception_handler(Yt2Mp3Error, _error_response)

# CORS - allow everything unless narrowed in settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins.split(","),
    allow_methods=settings.cors_methods.split(","),
    allow_headers=settings.cors_headers.split(","),
    expose_headers=["Content-Disposition"],
)

if settings.https_redirect:
    app.add_middleware(HTTPSRedirectMiddleware)


# Routers
app.include_router(convert.router, tags=["convert"])
app.include_router(info.router, tags=["info"])


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


def run():
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
