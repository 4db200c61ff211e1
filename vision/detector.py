from __future__ import annotations

import base64
import logging
from typing import Any, Dict, List, Optional

from vision.client import VisionClient, get_vision_client
from vision.schemas import LabelResult

log = logging.getLogger(__name__)


def encode_image(content: bytes) -> str:
    """Standard Base64, as required for `image.content` on the wire."""
    return base64.b64encode(content).decode("ascii")


def normalize_label(annotation: Dict[str, Any]) -> LabelResult:
    """Trim the description and clamp the service score into [0, 1]."""
    description = (annotation.get("description") or "").strip()
    score = float(annotation.get("score") or 0.0)
    return LabelResult(description=description, score=min(max(score, 0.0), 1.0))


class LabelDetector:
    """
    Label detection over a shared VisionClient.

    The client is injected; when none is given, the process-wide client from
    `get_vision_client()` is resolved on first use. Results keep the order
    the service returned them in.
    """

    def __init__(self, client: Optional[VisionClient] = None):
        self._client = client

    @property
    def client(self) -> VisionClient:
        if self._client is None:
            self._client = get_vision_client()
        return self._client

    def detect_labels(self, content: bytes) -> List[LabelResult]:
        image_request = {
            "image": {"content": encode_image(content)},
            "features": [{"type": "LABEL_DETECTION"}],
        }

        result = self.client.annotate(image_request)
        annotations = result.get("labelAnnotations") or []

        labels = [normalize_label(a) for a in annotations]
        log.info("[DETECT] %d labels", len(labels))
        return labels
