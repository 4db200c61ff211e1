from __future__ import annotations

from typing import Any, Optional

from starlette.datastructures import UploadFile

from vision.schemas import UploadedImage


async def receive_upload(file: Any) -> Optional[UploadedImage]:
    """
    Read the `file` form field into an UploadedImage.

    Returns None when the request carried no file: a missing field, a plain
    text value under that name, or the empty part a browser submits when
    nothing was chosen. Size and MIME type are not checked.
    """
    if not isinstance(file, UploadFile):
        return None

    content = await file.read()
    if not file.filename and not content:
        return None

    return UploadedImage.from_bytes(content, file.content_type, file.filename)
