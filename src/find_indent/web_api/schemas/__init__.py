"""
Pydantic Schemas
================
Request and response models for the API.
"""
from .detect import DetectRequest, DetectResponse

__all__ = ["DetectRequest", "DetectResponse"]
