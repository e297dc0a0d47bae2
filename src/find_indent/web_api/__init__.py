"""
find_indent Web API
===================
FastAPI-based REST API for indentation detection.

Quick Start:
    uvicorn find_indent.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
