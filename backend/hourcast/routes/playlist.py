"""Playlist order (24-hour schedule) API routes."""
from fastapi import APIRouter, Depends

from hourcast.dependencies import get_schedule_service
from hourcast.schemas.playlist import (
    PlaylistOrderResponse, PlaylistOrderUpdate, PlaylistOrderUpdated,
)
from hourcast.services import ScheduleService

router = APIRouter(prefix="/api/playlist", tags=["playlist"])


@router.get("/order", response_model=PlaylistOrderResponse)
async def get_order(schedules: ScheduleService = Depends(get_schedule_service)):
    """Current hour-to-file table."""
    return {"order": schedules.get_schedule().to_list()}


@router.post("/order", response_model=PlaylistOrderUpdated)
async def replace_order(
    body: PlaylistOrderUpdate,
    schedules: ScheduleService = Depends(get_schedule_service),
):
    """Replace the whole table. Rejected tables leave the current one in place."""
    schedule = schedules.replace_schedule(body.order)
    return {"success": True, "order": schedule.to_list()}
