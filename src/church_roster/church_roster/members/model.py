from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class Member:
    """도메인 엔티티: 교인 (member) and their attendance by date.

    `attendance` maps 'YYYY-MM-DD' to 출석/결석. A missing date is "unset",
    which is not the same as an explicit 결석.
    """

    id: int
    name: str
    position: str
    phone: str
    attendance: dict[str, str] = field(default_factory=dict)

    def status_on(self, date_key: str) -> str | None:
        return self.attendance.get(date_key)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position,
            "phone": self.phone,
            "attendance": dict(self.attendance),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Member":
        return cls(
            id=data["id"],
            name=data["name"],
            position=data["position"],
            phone=data["phone"],
            attendance=dict(data.get("attendance") or {}),
        )
