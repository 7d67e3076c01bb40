"""Request bodies. Field names follow the camelCase wire format."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


# -- Ideas ---------------------------------------------------------------------

class IdeaCreate(WireModel):
    summary: str
    description: str
    bullet_points: Optional[list[str]] = Field(default=None, alias="bulletPoints")
    status: Optional[str] = None
    company_name: Optional[str] = Field(default=None, alias="companyName")


class IdeaUpdate(IdeaCreate):
    # Omitted status / isActive keep the stored values.
    is_active: Optional[bool] = Field(default=None, alias="isActive")


# -- Validations ---------------------------------------------------------------

class ValidationUpdate(WireModel):
    validation_data: Optional[dict[str, Any]] = Field(default=None, alias="validationData")
    score: Optional[int] = None


class ValidationCreate(ValidationUpdate):
    idea_id: int = Field(alias="ideaId")


# -- Business plans ------------------------------------------------------------

class BusinessPlanUpdate(WireModel):
    template_id: Optional[str] = Field(default=None, alias="templateId")
    sections: Optional[dict[str, Any]] = None
    tasks: Optional[list[Any]] = None


class BusinessPlanCreate(BusinessPlanUpdate):
    idea_id: int = Field(alias="ideaId")


# -- Implementation items ------------------------------------------------------

class ImplementationItemUpdate(WireModel):
    item_type: str = Field(alias="itemType")
    name: str
    owner: Optional[str] = None
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")
    completion_percentage: Optional[int] = Field(
        default=None, ge=0, le=100, alias="completionPercentage"
    )
    status: Optional[str] = None


class ImplementationItemCreate(ImplementationItemUpdate):
    idea_id: int = Field(alias="ideaId")
