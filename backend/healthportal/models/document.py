# backend/healthportal/models/document.py

from datetime import datetime

from .base import CamelModel


class Document(CamelModel):
    id: int
    user_id: int
    name: str
    content_type: str
    size: int
    uploaded_at: datetime

    @property
    def size_label(self) -> str:
        return f"{self.size / (1024 * 1024):.1f} MB"
