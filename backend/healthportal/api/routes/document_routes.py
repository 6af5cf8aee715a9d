# backend/healthportal/api/routes/document_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile

from healthportal.api.deps import get_settings, get_store, require_user
from healthportal.core.config import Settings
from healthportal.models import Document
from healthportal.services.storage import MemStorage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users/{user_id}/documents", tags=["documents"])


@router.get("", response_model=List[Document])
def list_documents(user_id: int, store: MemStorage = Depends(get_store)):
    return store.get_documents_by_user(user_id)


@router.post("", response_model=Document, status_code=201)
async def upload_document(
    user_id: int,
    file: UploadFile = File(...),
    store: MemStorage = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """
    Accept a PDF, JPEG or PNG up to MAX_UPLOAD_BYTES. Only the metadata is
    kept; the bytes are read to measure the size and then dropped.
    """
    require_user(store, user_id)

    content_type = file.content_type or ""
    if content_type not in settings.ALLOWED_UPLOAD_TYPES:
        raise HTTPException(status_code=400, detail=f"Invalid file type: {content_type or 'unknown'}")

    data = await file.read()
    if len(data) > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="File too large")

    document = store.create_document(user_id, file.filename or "document", content_type, len(data))
    logger.info("User %d uploaded %s (%s)", user_id, document.name, document.size_label)
    return document


@router.delete("/{document_id}", status_code=204)
def remove_document(user_id: int, document_id: int, store: MemStorage = Depends(get_store)):
    if store.remove_document(user_id, document_id) is None:
        raise HTTPException(status_code=404, detail="Document not found")
    logger.info("User %d removed document %d", user_id, document_id)
    return Response(status_code=204)
