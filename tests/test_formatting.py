from __future__ import annotations

import base64

from pipeline.formatting import format_label, format_score, to_data_uri
from vision.schemas import LabelResult, UploadedImage


def test_format_score_two_decimals():
    assert format_score(0.956) == "95.60%"
    assert format_score(0.8) == "80.00%"
    assert format_score(1.0) == "100.00%"
    assert format_score(0.0) == "0.00%"


def test_format_label():
    assert format_label(LabelResult(description="Cat", score=0.8)) == "Cat -> 80.00%"


def test_data_uri_round_trips_bytes():
    content = bytes(range(256)) * 3
    image = UploadedImage.from_bytes(content, "image/jpeg")

    uri = to_data_uri(image)

    header, payload = uri.split(",", 1)
    assert header == "data:image/jpeg;base64"
    assert base64.b64decode(payload) == content


def test_uploaded_image_defaults():
    image = UploadedImage.from_bytes(b"", None)
    assert image.mime_type == "application/octet-stream"
    assert image.size_bytes == 0
