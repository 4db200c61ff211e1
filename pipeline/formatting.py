from __future__ import annotations

import base64

from vision.schemas import LabelResult, UploadedImage


def format_score(score: float) -> str:
    """0.956 -> '95.60%'"""
    return f"{score * 100:.2f}%"


def format_label(label: LabelResult) -> str:
    return f"{label.description} -> {format_score(label.score)}"


def to_data_uri(image: UploadedImage) -> str:
    payload = base64.b64encode(image.content).decode("ascii")
    return f"data:{image.mime_type};base64,{payload}"
