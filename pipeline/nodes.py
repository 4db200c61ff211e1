from __future__ import annotations

import logging
from typing import Any, Dict

from langchain_core.runnables import RunnableConfig

from pipeline.formatting import format_label, to_data_uri
from pipeline.state import DETECTING, NO_FILE, RENDERED, LabelState
from vision.detector import LabelDetector
from vision.errors import ExternalServiceError

log = logging.getLogger(__name__)

NO_FILE_MESSAGE = "No file uploaded"


def _detector_from(config: RunnableConfig) -> LabelDetector:
    detector = (config or {}).get("configurable", {}).get("detector")
    return detector if detector is not None else LabelDetector()


def check_upload(state: LabelState) -> Dict[str, Any]:
    """Routes requests without a file away from the vision service."""
    image = state.get("image")

    if image is None:
        log.warning("[UPLOAD] no file in request")
        return {"stage": NO_FILE, "error": NO_FILE_MESSAGE}

    log.info(
        "[UPLOAD] filename='%s', mime_type='%s', %d bytes",
        image.filename,
        image.mime_type,
        image.size_bytes,
    )
    return {"stage": DETECTING, "error": None}


def node_detect(state: LabelState, config: RunnableConfig) -> Dict[str, Any]:
    """Node wrapper around the label detector. Service failures propagate."""
    detector = _detector_from(config)

    try:
        labels = detector.detect_labels(state["image"].content)
    except ExternalServiceError as e:
        log.error("[DETECT] %s", e)
        raise

    log.info("[DETECT] %s", [label.description for label in labels])
    return {"labels": labels}


def format_response(state: LabelState) -> Dict[str, Any]:
    """Packs the labels and the inline image for the view layer."""
    labels = state.get("labels") or []
    lines = [format_label(label) for label in labels]

    log.info("[RENDER] %d lines", len(lines))
    return {
        "stage": RENDERED,
        "lines": lines,
        "image_src": to_data_uri(state["image"]),
    }
