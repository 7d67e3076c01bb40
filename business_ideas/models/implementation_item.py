"""Implementation item domain model: a trackable execution task for an idea."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ItemStatus(str, Enum):
    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    BLOCKED = "blocked"


@dataclass
class ImplementationItem:
    """Owner, dates and completion percentage of one piece of execution work."""

    idea_id: int
    item_type: str
    name: str
    owner: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    completion_percentage: int = 0
    status: str = ItemStatus.NOT_STARTED.value
    id: Optional[int] = None
    created_at: str = ""
    updated_at: str = ""

    def to_row(self) -> dict[str, Any]:
        return {
            "idea_id": self.idea_id,
            "item_type": self.item_type,
            "name": self.name,
            "owner": self.owner,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "completion_percentage": self.completion_percentage,
            "status": self.status,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "ImplementationItem":
        return cls(
            id=row["id"],
            idea_id=row["idea_id"],
            item_type=row["item_type"],
            name=row["name"],
            owner=row.get("owner"),
            start_date=row.get("start_date"),
            end_date=row.get("end_date"),
            completion_percentage=row.get("completion_percentage") or 0,
            status=row.get("status") or ItemStatus.NOT_STARTED.value,
            created_at=row.get("created_at", ""),
            updated_at=row.get("updated_at", ""),
        )

    def to_wire(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "ideaId": self.idea_id,
            "itemType": self.item_type,
            "name": self.name,
            "owner": self.owner,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "completionPercentage": self.completion_percentage,
            "status": self.status,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "ImplementationItem":
        return cls(
            idea_id=payload.get("ideaId"),
            item_type=payload.get("itemType"),
            name=payload.get("name"),
            owner=payload.get("owner"),
            start_date=payload.get("startDate"),
            end_date=payload.get("endDate"),
            completion_percentage=payload.get("completionPercentage") or 0,
            status=payload.get("status") or ItemStatus.NOT_STARTED.value,
        )
