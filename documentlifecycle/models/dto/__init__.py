from .document_status_dto import DocumentStatusSnapshot

__all__ = ["DocumentStatusSnapshot"]
