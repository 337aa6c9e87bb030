from __future__ import annotations
from dataclasses import dataclass

from documentlifecycle.models.document_status import DocumentStatus


@dataclass(frozen=True, slots=True)
class DocumentStatusSnapshot:
    """
    Read-only status view for the host to render.
    ``content_preview`` is already truncated.
    """
    status: DocumentStatus
    author: str
    content_preview: str

    def describe(self) -> str:
        return (
            f"--- STATUS --- Document (Author: {self.author}): "
            f"State: {self.status.value}, Content: \"{self.content_preview}\""
        )
