"""The fixed 24-slot hour-to-file table.

A ``Schedule`` is immutable. Replacing the active schedule means building a
new one with ``Schedule.from_candidate`` and swapping the reference, so a
reader never sees a half-applied table.
"""
from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, ValidationError

from hourcast.errors import InvalidSchedule

HOURS_PER_DAY = 24


class ScheduleSlot(BaseModel):
    """One hour of the day and the file assigned to it, if any."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    hour: StrictInt
    # Required key; null means the hour is unassigned
    filename: Optional[StrictStr]


class Schedule:
    __slots__ = ("_slots",)

    def __init__(self, slots: Iterable[ScheduleSlot]):
        slots = tuple(slots)
        _check_shape(slots)
        self._slots = slots

    @classmethod
    def empty(cls) -> "Schedule":
        return cls(ScheduleSlot(hour=h, filename=None) for h in range(HOURS_PER_DAY))

    @classmethod
    def from_candidate(cls, candidate: Any) -> "Schedule":
        """Validate a submitted table and build a Schedule from it.

        ``candidate`` is a sequence of slot mappings (or ``ScheduleSlot``
        instances). Entries must arrive in hour order; they are never
        re-sorted. Raises ``InvalidSchedule`` describing the first problem.
        """
        if not isinstance(candidate, (list, tuple)):
            raise InvalidSchedule("invalid playlist order format: expected a list of slots")
        if len(candidate) != HOURS_PER_DAY:
            raise InvalidSchedule(
                f"invalid playlist order format: expected {HOURS_PER_DAY} slots, got {len(candidate)}"
            )

        slots = []
        for index, entry in enumerate(candidate):
            if isinstance(entry, ScheduleSlot):
                slots.append(entry)
                continue
            try:
                slots.append(ScheduleSlot.model_validate(entry))
            except ValidationError as e:
                first = e.errors()[0]
                field = ".".join(str(p) for p in first["loc"]) or "slot"
                raise InvalidSchedule(
                    f"invalid hour assignments: slot {index} {field}: {first['msg']}"
                ) from e
        return cls(slots)

    @property
    def slots(self) -> tuple[ScheduleSlot, ...]:
        return self._slots

    def assigned_files(self) -> set[str]:
        return {s.filename for s in self._slots if s.filename is not None}

    def to_list(self) -> list[dict]:
        return [s.model_dump() for s in self._slots]

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self):
        return iter(self._slots)

    def __getitem__(self, hour: int) -> ScheduleSlot:
        return self._slots[hour]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schedule):
            return NotImplemented
        return self._slots == other._slots

    def __hash__(self) -> int:
        return hash(self._slots)

    def __repr__(self) -> str:
        assigned = sum(1 for s in self._slots if s.filename is not None)
        return f"Schedule(assigned={assigned}/{HOURS_PER_DAY})"


def _check_shape(slots: tuple[ScheduleSlot, ...]) -> None:
    if len(slots) != HOURS_PER_DAY:
        raise InvalidSchedule(
            f"invalid playlist order format: expected {HOURS_PER_DAY} slots, got {len(slots)}"
        )
    for index, slot in enumerate(slots):
        if slot.hour != index:
            raise InvalidSchedule(
                f"invalid hour assignments: slot {index} has hour {slot.hour}"
            )
