from typing import List, Optional

from pydantic import BaseModel

from vision.schemas import LabelResult


class UploadResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    image_src: Optional[str] = None
    labels: List[LabelResult] = []
    lines: List[str] = []
    total: int = 0


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
