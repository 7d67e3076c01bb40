"""Business plan routes. Creating one moves the idea into planning."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from business_ideas.db.business_plan_repo import BusinessPlanRepository
from business_ideas.db.idea_repo import IdeaRepository
from business_ideas.errors import NotFoundError
from business_ideas.models.business_plan import BusinessPlan
from server.dependencies import get_business_plan_repo, get_idea_repo
from server.schemas import BusinessPlanCreate, BusinessPlanUpdate

router = APIRouter(prefix="/api/business-plans", tags=["business-plans"])


@router.get("/{idea_id}")
def get_latest_business_plan(
    idea_id: int, repo: BusinessPlanRepository = Depends(get_business_plan_repo)
):
    plan = repo.get_latest_for_idea(idea_id)
    if not plan:
        raise NotFoundError("Business plan")
    return plan.to_wire()


@router.post("", status_code=201)
def create_business_plan(
    body: BusinessPlanCreate,
    repo: BusinessPlanRepository = Depends(get_business_plan_repo),
    ideas: IdeaRepository = Depends(get_idea_repo),
):
    if not ideas.exists(body.idea_id):
        raise NotFoundError("Idea")
    plan = repo.create(BusinessPlan.from_wire(body.to_payload()))
    return plan.to_wire()


@router.put("/{plan_id}")
def update_business_plan(
    plan_id: int,
    body: BusinessPlanUpdate,
    repo: BusinessPlanRepository = Depends(get_business_plan_repo),
):
    existing = repo.get_by_id(plan_id)
    if not existing:
        raise NotFoundError("Business plan")

    changes = BusinessPlan.from_wire(body.to_payload())
    changes.idea_id = existing.idea_id
    updated = repo.update(plan_id, changes)
    if not updated:
        raise NotFoundError("Business plan")
    return updated.to_wire()


@router.delete("/{plan_id}", status_code=204)
def delete_business_plan(
    plan_id: int, repo: BusinessPlanRepository = Depends(get_business_plan_repo)
):
    if not repo.delete(plan_id):
        raise NotFoundError("Business plan")
    return Response(status_code=204)
