"""Validation routes. Creating one marks the idea as validated."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from business_ideas.db.idea_repo import IdeaRepository
from business_ideas.db.validation_repo import ValidationRepository
from business_ideas.errors import NotFoundError
from business_ideas.models.validation import Validation
from server.dependencies import get_idea_repo, get_validation_repo
from server.schemas import ValidationCreate, ValidationUpdate

router = APIRouter(prefix="/api/validations", tags=["validations"])


@router.get("/{idea_id}")
def get_latest_validation(
    idea_id: int, repo: ValidationRepository = Depends(get_validation_repo)
):
    """Most recent validation for an idea."""
    validation = repo.get_latest_for_idea(idea_id)
    if not validation:
        raise NotFoundError("Validation")
    return validation.to_wire()


@router.post("", status_code=201)
def create_validation(
    body: ValidationCreate,
    repo: ValidationRepository = Depends(get_validation_repo),
    ideas: IdeaRepository = Depends(get_idea_repo),
):
    if not ideas.exists(body.idea_id):
        raise NotFoundError("Idea")
    validation = repo.create(Validation.from_wire(body.to_payload()))
    return validation.to_wire()


@router.put("/{validation_id}")
def update_validation(
    validation_id: int,
    body: ValidationUpdate,
    repo: ValidationRepository = Depends(get_validation_repo),
):
    existing = repo.get_by_id(validation_id)
    if not existing:
        raise NotFoundError("Validation")

    changes = Validation.from_wire(body.to_payload())
    changes.idea_id = existing.idea_id
    updated = repo.update(validation_id, changes)
    if not updated:
        raise NotFoundError("Validation")
    return updated.to_wire()


@router.delete("/{validation_id}", status_code=204)
def delete_validation(
    validation_id: int, repo: ValidationRepository = Depends(get_validation_repo)
):
    if not repo.delete(validation_id):
        raise NotFoundError("Validation")
    return Response(status_code=204)
