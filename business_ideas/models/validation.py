"""Validation domain model: a scored feasibility assessment of an idea."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from business_ideas.models._json import dump_json, load_json


@dataclass
class Validation:
    idea_id: int
    validation_data: dict[str, Any] = field(default_factory=dict)
    score: Optional[int] = None
    id: Optional[int] = None
    created_at: str = ""

    def validation_data_json(self) -> str:
        return dump_json(self.validation_data, {})

    def to_row(self) -> dict[str, Any]:
        return {
            "idea_id": self.idea_id,
            "validation_data": self.validation_data_json(),
            "score": self.score,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Validation":
        return cls(
            id=row["id"],
            idea_id=row["idea_id"],
            validation_data=load_json(row.get("validation_data"), {}),
            score=row.get("score"),
            created_at=row.get("created_at", ""),
        )

    def to_wire(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "ideaId": self.idea_id,
            "validationData": self.validation_data,
            "score": self.score,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "Validation":
        data = payload.get("validationData")
        return cls(
            idea_id=payload.get("ideaId"),
            validation_data={} if data is None else data,
            score=payload.get("score"),
        )
