from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one day.

    ``total_hours`` / ``ot_hours`` are derived and only present when both
    punches exist. ``status`` is coerced into ``AttendanceStatus`` by the
    functions that classify it, so a raw store value can be passed through.
    """

    employee_id: str
    date: date
    status: AttendanceStatus
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    total_hours: Optional[float] = None
    ot_hours: Optional[float] = None
    notes: str = ""

    @property
    def key(self) -> tuple[str, date]:
        return (self.employee_id, self.date)

    @property
    def is_open(self) -> bool:
        return bool(self.check_in) and not self.check_out
