from typing import Optional

from pydantic import BaseModel, Field


class UploadedImage(BaseModel):
    content: bytes
    mime_type: str
    size_bytes: int = Field(ge=0)
    filename: Optional[str] = None

    @classmethod
    def from_bytes(
        cls,
        content: bytes,
        mime_type: Optional[str],
        filename: Optional[str] = None,
    ) -> "UploadedImage":
        return cls(
            content=content,
            mime_type=mime_type or "application/octet-stream",
            size_bytes=len(content),
            filename=filename,
        )


class LabelResult(BaseModel):
    description: str
    score: float = Field(ge=0.0, le=1.0)
