"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cta_rewriter import __version__
from cta_rewriter.api.routes import build_adapters, router
from cta_rewriter.models import ErrorResponse
from cta_rewriter.utils.config import get_settings
from cta_rewriter.utils.logger import get_logger, setup_logging
from cta_rewriter.utils.sanitization import NO_MESSAGE_ERROR


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    settings = get_settings()
    logger = setup_logging(level=settings.log_level, log_file=settings.log_file)

    key_status = settings.validate_api_keys()
    missing_keys = [k for k, v in key_status.items() if not v]
    if missing_keys:
        logger.warning(f"Missing API keys for: {', '.join(missing_keys)}")
        logger.warning("Requests to those providers will fail until a key is set.")

    app.state.adapters = build_adapters()
    logger.info(f"CTA rewriter ready with providers: {', '.join(app.state.adapters)}")

    yield


app = FastAPI(
    title="CTA Rewriter",
    description="Rewrites 'click here' links into engaging calls to action",
    version=__version__,
    lifespan=lifespan,
)

# Browser frontend is served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report an unreadable request body as a missing message."""
    get_logger().warning(f"Unreadable body for {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=NO_MESSAGE_ERROR).model_dump(),
    )


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "CTA Rewriter",
        "version": __version__,
        "endpoints": {
            "openai": "POST /chat",
            "anthropic": "POST /claude-chat",
            "google": "POST /gemini-chat",
            "health": "GET /health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    settings = get_settings()
    return {
        "status": "healthy",
        "api_keys": settings.validate_api_keys(),
    }


def run() -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "cta_rewriter.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
