"""Chat Playground Service - FastAPI Application Entry Point

A FastAPI service demonstrating the different ways of prompting a chat model:
plain prompts, structured replies, prompt templates and per-call options.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chat_playground import __version__
from chat_playground.config import settings
from chat_playground.routers import chat_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger("chat_playground")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    # Startup
    logger.info(
        "Starting Chat Playground Service",
        extra={"environment": settings.environment, "port": settings.port},
    )
    logger.info(f"LLM provider: {settings.llm_provider}, model: {settings.chat_model}")
    logger.info(f"Log Level: {settings.log_level}")

    yield

    # Shutdown
    logger.info("Shutting down Chat Playground Service")


app = FastAPI(
    title="Chat Playground Service",
    description="Examples of calling a chat model from a web application",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
)

app.include_router(chat_router)


@app.get("/")
async def root():
    """Root endpoint - basic service status."""
    return {"service": "chat-playground", "status": "running"}


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring and load balancer probes."""
    return {
        "status": "healthy",
        "version": __version__,
        "environment": settings.environment,
    }


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors.

    Covers failures of the upstream chat API and replies that cannot be
    mapped. Logs the error and returns a user-friendly message without
    internal details.
    """
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={
            "path": request.url.path,
            "method": request.method,
        },
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "internal_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )
