from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional

import google.auth
import requests
from google.auth.exceptions import DefaultCredentialsError
from google.auth.transport.requests import AuthorizedSession

import config
from vision.errors import ExternalServiceError

log = logging.getLogger(__name__)

_client = None
_client_lock = threading.Lock()


class VisionClient:
    """
    Thin client for the Cloud Vision `images:annotate` REST endpoint.

    Owns a single HTTP session that is reused for every call. Each call to
    `annotate` sends exactly one request: no retries, no timeout override.
    """

    def __init__(
        self,
        session: requests.Session,
        endpoint: str = config.VISION_ENDPOINT,
        api_key: Optional[str] = None,
    ):
        self.session = session
        self.endpoint = endpoint
        self.api_key = api_key

    def annotate(self, image_request: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send one AnnotateImageRequest and return its AnnotateImageResponse.

        Raises:
            ExternalServiceError: transport failure, non-2xx status, or an
                `error` object in the per-image response.
        """
        params = {"key": self.api_key} if self.api_key else None

        try:
            resp = self.session.post(
                self.endpoint,
                params=params,
                json={"requests": [image_request]},
            )
        except requests.RequestException as e:
            raise ExternalServiceError(str(e)) from e

        if not resp.ok:
            raise ExternalServiceError(_error_message(resp))

        try:
            body = resp.json()
        except ValueError as e:
            raise ExternalServiceError(f"Malformed response from vision service: {e}") from e

        responses = body.get("responses") or [{}]
        result = responses[0] or {}

        error = result.get("error")
        if error:
            message = error.get("message") if isinstance(error, dict) else None
            raise ExternalServiceError(message or str(error))

        return result


def _error_message(resp: requests.Response) -> str:
    try:
        message = resp.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        message = None
    return message or f"Vision service returned HTTP {resp.status_code} {resp.reason}"


def get_vision_client() -> VisionClient:
    """
    Returns the process-wide VisionClient, creating it on first use.

    Uses `GOOGLE_VISION_API_KEY` when set, otherwise Application Default
    Credentials. Detection nodes run in executor threads, so creation is
    serialized by `_client_lock`.
    """
    global _client

    with _client_lock:
        if _client is None:
            if config.GOOGLE_VISION_API_KEY:
                log.info("[VISION] using API key authentication")
                session = requests.Session()
            else:
                try:
                    credentials, project = google.auth.default(scopes=config.VISION_SCOPES)
                except DefaultCredentialsError as e:
                    raise ExternalServiceError(str(e)) from e
                log.info("[VISION] using application default credentials (project=%s)", project)
                session = AuthorizedSession(credentials)

            _client = VisionClient(
                session,
                endpoint=config.VISION_ENDPOINT,
                api_key=config.GOOGLE_VISION_API_KEY,
            )

    return _client
