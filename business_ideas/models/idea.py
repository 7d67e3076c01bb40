"""Idea domain model: the root record every other entity hangs off."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from business_ideas.models._json import dump_json, load_json


class IdeaStatus(str, Enum):
    """Known lifecycle values. The column itself accepts any string."""

    DRAFT = "draft"
    VALIDATED = "validated"
    PLANNING = "planning"
    IMPLEMENTING = "implementing"
    ACTIVE = "active"


@dataclass
class Idea:
    """A business idea with its summary, description and key bullet points."""

    summary: str
    description: str
    bullet_points: list[str] = field(default_factory=list)
    status: str = IdeaStatus.DRAFT.value
    company_name: Optional[str] = None
    is_active: bool = True
    id: Optional[int] = None
    created_at: str = ""
    updated_at: str = ""

    # -- Serialisation helpers for SQLite JSON columns --

    def bullet_points_json(self) -> str:
        return dump_json(self.bullet_points, [])

    def to_row(self) -> dict[str, Any]:
        """Mutable columns in stored form."""
        return {
            "summary": self.summary,
            "description": self.description,
            "bullet_points": self.bullet_points_json(),
            "status": self.status,
            "company_name": self.company_name,
            "is_active": 1 if self.is_active else 0,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Idea":
        return cls(
            id=row["id"],
            summary=row["summary"],
            description=row["description"],
            bullet_points=load_json(row.get("bullet_points"), []),
            status=IdeaStatus.DRAFT.value if row.get("status") is None else row["status"],
            company_name=row.get("company_name"),
            is_active=bool(row.get("is_active", 1)),
            created_at=row.get("created_at", ""),
            updated_at=row.get("updated_at", ""),
        )

    # -- Wire (camelCase JSON) shape --

    def to_wire(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "summary": self.summary,
            "description": self.description,
            "bulletPoints": list(self.bullet_points),
            "status": self.status,
            "companyName": self.company_name,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "isActive": self.is_active,
        }

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "Idea":
        is_active = payload.get("isActive")
        status = payload.get("status")
        return cls(
            summary=payload.get("summary"),
            description=payload.get("description"),
            bullet_points=list(payload.get("bulletPoints") or []),
            status=IdeaStatus.DRAFT.value if status is None else status,
            company_name=payload.get("companyName") or None,
            is_active=True if is_active is None else bool(is_active),
        )
