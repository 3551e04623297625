"""Playlist order request/response schemas."""
from typing import Any

from hourcast.models.schedule import ScheduleSlot
from hourcast.schemas.base import CamelModel


class PlaylistOrderUpdate(CamelModel):
    # Slots are validated by Schedule.from_candidate so that any bad entry
    # surfaces as one InvalidSchedule instead of a field-level 422.
    order: list[Any]


class PlaylistOrderResponse(CamelModel):
    order: list[ScheduleSlot]


class PlaylistOrderUpdated(PlaylistOrderResponse):
    success: bool = True
