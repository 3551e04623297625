"""Schedule Service: read and wholesale-replace the active 24-slot table.

The schedule is kept in memory only. A restart brings back the all-empty
table.
"""
import logging
from typing import Any, Optional

from hourcast.errors import InvalidSchedule
from hourcast.models.schedule import Schedule
from hourcast.services.file_storage import BlobStore

logger = logging.getLogger(__name__)


class ScheduleService:
    """Owns the active Schedule.

    With ``require_existing_files`` set, every assigned filename must name
    a blob currently in ``blobs``. Off by default: dangling references are
    left for the playback side to deal with.
    """

    def __init__(self, blobs: Optional[BlobStore] = None, require_existing_files: bool = False):
        if require_existing_files and blobs is None:
            raise ValueError("require_existing_files needs a BlobStore")
        self.blobs = blobs
        self.require_existing_files = require_existing_files
        self._schedule = Schedule.empty()

    def get_schedule(self) -> Schedule:
        return self._schedule

    def replace_schedule(self, candidate: Any) -> Schedule:
        """Validate ``candidate`` and make it the active schedule.

        All checks run before the swap; on InvalidSchedule the previous
        table stays active untouched.
        """
        try:
            schedule = Schedule.from_candidate(candidate)
            if self.require_existing_files:
                self._check_references(schedule)
        except InvalidSchedule as e:
            logger.warning("Rejected schedule update: %s", e.message)
            raise

        self._schedule = schedule
        logger.info(
            "Schedule replaced (%d of %d hours assigned)",
            sum(1 for s in schedule if s.filename is not None),
            len(schedule),
        )
        return schedule

    def _check_references(self, schedule: Schedule) -> None:
        for slot in schedule:
            if slot.filename is not None and not self.blobs.exists(slot.filename):
                raise InvalidSchedule(
                    f"invalid hour assignments: slot {slot.hour} references unknown file {slot.filename!r}"
                )
