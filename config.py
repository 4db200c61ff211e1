"""
Centralized configuration for the label detection service.

Values come from the environment, optionally seeded from a `.env` file.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Google Cloud Vision. Without an API key, Application Default Credentials
# (GOOGLE_APPLICATION_CREDENTIALS) are used.
GOOGLE_VISION_API_KEY = os.getenv("GOOGLE_VISION_API_KEY") or None
VISION_ENDPOINT = os.getenv(
    "VISION_ENDPOINT",
    "https://vision.googleapis.com/v1/images:annotate",
)
VISION_SCOPES = ["https://www.googleapis.com/auth/cloud-platform"]
