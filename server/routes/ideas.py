"""Idea CRUD routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from business_ideas.db.idea_repo import IdeaRepository
from business_ideas.errors import NotFoundError
from business_ideas.models.idea import Idea
from server.dependencies import get_idea_repo
from server.schemas import IdeaCreate, IdeaUpdate

router = APIRouter(prefix="/api/ideas", tags=["ideas"])


@router.get("")
def list_ideas(repo: IdeaRepository = Depends(get_idea_repo)):
    """Active ideas, newest first."""
    return [idea.to_wire() for idea in repo.list_active()]


@router.get("/{idea_id}")
def get_idea(idea_id: int, repo: IdeaRepository = Depends(get_idea_repo)):
    idea = repo.get_by_id(idea_id)
    if not idea:
        raise NotFoundError("Idea")
    return idea.to_wire()


@router.post("", status_code=201)
def create_idea(body: IdeaCreate, repo: IdeaRepository = Depends(get_idea_repo)):
    payload = body.to_payload()
    # New ideas start as draft unless given a non-empty status.
    if not payload["status"]:
        payload["status"] = None
    idea = repo.create(Idea.from_wire(payload))
    return idea.to_wire()


@router.put("/{idea_id}")
def update_idea(
    idea_id: int, body: IdeaUpdate, repo: IdeaRepository = Depends(get_idea_repo)
):
    existing = repo.get_by_id(idea_id)
    if not existing:
        raise NotFoundError("Idea")

    payload = body.to_payload()
    if payload["status"] is None:
        payload["status"] = existing.status
    if payload["isActive"] is None:
        payload["isActive"] = existing.is_active

    updated = repo.update(idea_id, Idea.from_wire(payload))
    if not updated:
        raise NotFoundError("Idea")
    return updated.to_wire()


@router.delete("/{idea_id}", status_code=204)
def delete_idea(idea_id: int, repo: IdeaRepository = Depends(get_idea_repo)):
    if not repo.delete(idea_id):
        raise NotFoundError("Idea")
    return Response(status_code=204)
