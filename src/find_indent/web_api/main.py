"""
FastAPI Application
===================
Main entry point for the find_indent API.

Run with:
    uvicorn find_indent.web_api.main:app --reload
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from find_indent import __version__
from find_indent.web_api.config import settings
from find_indent.web_api.routers import detect, health

# Create application
app = FastAPI(
    title="find_indent API",
    description="Heuristic indentation style detection",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(detect.router, prefix="/detect", tags=["Detect"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "find_indent API",
        "version": __version__,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


# For running directly: python -m find_indent.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
