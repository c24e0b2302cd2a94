"""
Memory API endpoints - add memories (with an optional photo), list, delete,
and the derived "places to visit" view
"""
import datetime as dt
from typing import Optional
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from wanderlog.core.dependencies import get_current_user, get_memory_service
from wanderlog.core.exceptions import PhotoTooLargeError
from wanderlog.core.validation import parse_tags, require_text
from wanderlog.models.user import User
from wanderlog.schemas.base import Envelope, Message
from wanderlog.schemas.memory import MemoryCreate, MemoryRead, PlacesToVisitResponse
from wanderlog.services.memory_service import MemoryService
from wanderlog.services.photo_storage import PhotoUpload

router = APIRouter(tags=["memories"])


async def _read_photo(photo: UploadFile, max_size_mb: int) -> PhotoUpload:
    """Read an uploaded photo, never buffering more than one byte past the size limit"""
    limit_bytes = max_size_mb * 1024 * 1024
    if photo.size is not None and photo.size > limit_bytes:
        raise PhotoTooLargeError(photo.size / (1024 * 1024), max_size_mb)
    return PhotoUpload(
        filename=photo.filename,
        content_type=photo.content_type,
        content=await photo.read(limit_bytes + 1),
    )


@router.post(
    "/trips/{trip_id}/memories",
    response_model=Envelope[MemoryRead],
    status_code=status.HTTP_201_CREATED,
)
async def create_memory(
    trip_id: int,
    title: str = Form(..., max_length=255),
    date: dt.date = Form(...),
    description: Optional[str] = Form(None),
    tags: str = Form("", description="Comma-separated tags"),
    photo: Optional[UploadFile] = File(None),
    service: MemoryService = Depends(get_memory_service),
    current_user: User = Depends(get_current_user),
):
    """
    Add a memory to a trip

    - **title**: Required
    - **date**: Required
    - **description**: Optional free text
    - **tags**: Comma-separated, e.g. "restaurant, sunset, future visit"
    - **photo**: Optional image, stored before the memory is written
    """
    memory_data = MemoryCreate(
        title=require_text(title, "title"),
        description=description or None,
        tags=parse_tags(tags),
        date=date,
    )

    upload = None
    if photo is not None and photo.filename:
        upload = await _read_photo(photo, service.max_photo_size_mb)

    memory = service.create_memory(current_user.id, trip_id, memory_data, upload)

    return Envelope(status="ok", data=MemoryRead.model_validate(memory))


@router.get("/trips/{trip_id}/memories", response_model=Envelope[list[MemoryRead]])
async def list_trip_memories(
    trip_id: int,
    service: MemoryService = Depends(get_memory_service),
    current_user: User = Depends(get_current_user),
):
    """
    List memories referencing a trip, including those of a deleted trip
    """
    memories = service.list_trip_memories(trip_id, current_user.id)
    return Envelope(status="ok", data=[MemoryRead.model_validate(m) for m in memories])


@router.get("/memories", response_model=Envelope[list[MemoryRead]])
async def list_memories(
    service: MemoryService = Depends(get_memory_service),
    current_user: User = Depends(get_current_user),
):
    memories = service.list_user_memories(current_user.id)
    return Envelope(status="ok", data=[MemoryRead.model_validate(m) for m in memories])


@router.get("/memories/places-to-visit", response_model=Envelope[PlacesToVisitResponse])
async def list_places_to_visit(
    q: Optional[str] = Query(None, description="Case-insensitive title/description search"),
    service: MemoryService = Depends(get_memory_service),
    current_user: User = Depends(get_current_user),
):
    """
    Memories tagged with "future", "visit" or "todo", recomputed per request
    """
    memories = service.list_places_to_visit(current_user.id, q)

    return Envelope(
        status="ok",
        data=PlacesToVisitResponse(
            query=(q or "").strip(),
            total=len(memories),
            memories=[MemoryRead.model_validate(m) for m in memories],
        )
    )


@router.delete("/memories/{memory_id}", response_model=Envelope[Message])
async def delete_memory(
    memory_id: int,
    service: MemoryService = Depends(get_memory_service),
    current_user: User = Depends(get_current_user),
):
    service.delete_memory(memory_id, current_user.id)
    return Envelope(status="ok", data=Message(message="Memory deleted"))
