"""
FastAPI layer for the image label detection service.

Exposes:
- `main`     : FastAPI application with the upload form, `/uploadImage`,
               graph and health endpoints
- `receiver` : multipart upload extraction
- `schemas`  : JSON response models
"""
