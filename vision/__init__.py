"""
Cloud Vision access for the label detection service.

This package exposes:
- `VisionClient` / `get_vision_client` : shared, lazily created REST client
- `LabelDetector`                      : Base64 encoding + response normalization
- `UploadedImage`, `LabelResult`       : request-scoped data models
"""

from vision.client import VisionClient, get_vision_client
from vision.detector import LabelDetector
from vision.errors import ExternalServiceError, LabelDetectionError
from vision.schemas import LabelResult, UploadedImage

__all__ = [
    "VisionClient",
    "get_vision_client",
    "LabelDetector",
    "ExternalServiceError",
    "LabelDetectionError",
    "LabelResult",
    "UploadedImage",
]
