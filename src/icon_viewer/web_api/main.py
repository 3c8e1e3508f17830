"""
FastAPI Application
==================
Main entry point for the icon viewer over HTTP.

Run with:
    uvicorn icon_viewer.web_api.main:app --reload
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from icon_viewer import __version__
from icon_viewer.web_api.config import settings
from icon_viewer.web_api.routers import health, scan, viewer

# Create application
app = FastAPI(
    title="Icon Viewer API",
    description="Browse the icons under a folder as a themeable grid",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(scan.router, prefix="/scan", tags=["Scan"])
app.include_router(viewer.router, prefix="/viewer", tags=["Viewer"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "Icon Viewer API",
        "version": __version__,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


# For running directly: python -m icon_viewer.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
