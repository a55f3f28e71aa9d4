from typing import Literal

from pydantic import BaseModel, Field


class UploadedDocument(BaseModel):
    """A résumé file received with one /analyze request."""
    filename: str = Field(..., description="Client-supplied file name")
    content: bytes = Field(b"", description="Raw file bytes")

    @property
    def size(self) -> int:
        return len(self.content)


class ChatMessage(BaseModel):
    role: Literal["system", "user"]
    content: str
