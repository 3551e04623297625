"""Domain models for stored files and the daily schedule."""
from hourcast.models.file_record import FileRecord, MetadataEntry
from hourcast.models.schedule import HOURS_PER_DAY, Schedule, ScheduleSlot

__all__ = [
    "FileRecord", "MetadataEntry",
    "HOURS_PER_DAY", "Schedule", "ScheduleSlot",
]
