"""
Icon Viewer Web API
===================
FastAPI-based HTTP front end for the icon viewer.

Quick Start:
    uvicorn icon_viewer.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
