"""Main FastAPI application entry point."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import settings
from app.routes import qa, verses
from core.utils.logger import logger

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    debug=settings.DEBUG
)


@app.on_event("startup")
async def startup_event():
    """Log configuration on startup."""
    logger.info("Biblical Wisdom Guide Starting...")
    logger.info(f"OpenAI: {'Configured' if settings.OPENAI_API_KEY else 'Not Configured'} (model: {settings.OPENAI_MODEL})")
    logger.info(f"Verse API: {settings.BIBLE_API_BASE_URL} (translation: {settings.BIBLE_API_TRANSLATION})")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(qa.router, prefix="/api/qa", tags=["Q&A"])
app.include_router(verses.router, prefix="/api/verses", tags=["Verses"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Biblical Wisdom Guide API",
        "version": settings.API_VERSION,
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
