"""Business plan domain model: templated sections plus a task list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from business_ideas.models._json import dump_json, load_json


@dataclass
class BusinessPlan:
    """A planning document generated from a template for one idea."""

    idea_id: int
    template_id: Optional[str] = None
    sections: dict[str, Any] = field(default_factory=dict)
    tasks: list[Any] = field(default_factory=list)
    id: Optional[int] = None
    created_at: str = ""
    updated_at: str = ""

    def to_row(self) -> dict[str, Any]:
        return {
            "idea_id": self.idea_id,
            "template_id": self.template_id,
            "sections": dump_json(self.sections, {}),
            "tasks": dump_json(self.tasks, []),
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "BusinessPlan":
        return cls(
            id=row["id"],
            idea_id=row["idea_id"],
            template_id=row.get("template_id"),
            sections=load_json(row.get("sections"), {}),
            tasks=load_json(row.get("tasks"), []),
            created_at=row.get("created_at", ""),
            updated_at=row.get("updated_at", ""),
        )

    def to_wire(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "ideaId": self.idea_id,
            "templateId": self.template_id,
            "sections": self.sections,
            "tasks": self.tasks,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "BusinessPlan":
        sections = payload.get("sections")
        tasks = payload.get("tasks")
        return cls(
            idea_id=payload.get("ideaId"),
            template_id=payload.get("templateId"),
            sections={} if sections is None else sections,
            tasks=[] if tasks is None else tasks,
        )
