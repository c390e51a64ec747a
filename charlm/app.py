"""
Character Language Model Service
Main application entry point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from charlm.config import settings
from charlm.utils.logger import setup_logger
from charlm.api.routers import markov_router

# Setup logging
logger = setup_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager for service initialization"""
    logger.info(f"[BOOT] Starting {settings.SERVICE_NAME} v{settings.SERVICE_VERSION}...")
    logger.info(f"[BOOT] Default window length: {settings.DEFAULT_WINDOW_LENGTH}")
    yield
    logger.info("[SHUTDOWN] Clearing cached models...")
    markov_router.MODEL_CACHE.clear()
    logger.info("[SHUTDOWN] Service stopped")


# Create FastAPI app
app = FastAPI(
    title="Character Language Model Service",
    description="Train character-level Markov models and generate text from them",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"[ERR] Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "ok": False,
            "error": {
                "code": "CHARLM_SERVICE_ERROR",
                "message": "Internal server error occurred",
                "details": {"type": type(exc).__name__},
            },
        },
    )


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "ok": True,
        "data": {
            "status": "healthy",
            "cached_models": len(markov_router.MODEL_CACHE),
        },
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "endpoints": {
            "health": "/health",
            "docs": "/docs",
            "markov": "/markov/*",
        },
    }


app.include_router(markov_router.router, prefix="/markov", tags=["Markov"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "charlm.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
