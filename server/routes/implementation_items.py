"""Implementation item routes.

Collections live under ``/api/implementation-items``; single items are
addressed as ``/api/implementation-item/{id}``.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from business_ideas.db.idea_repo import IdeaRepository
from business_ideas.db.implementation_repo import ImplementationItemRepository
from business_ideas.errors import NotFoundError
from business_ideas.models.implementation_item import ImplementationItem
from server.dependencies import get_idea_repo, get_implementation_repo
from server.schemas import ImplementationItemCreate, ImplementationItemUpdate

router = APIRouter(prefix="/api", tags=["implementation-items"])


@router.get("/implementation-items/{idea_id}")
def list_implementation_items(
    idea_id: int, repo: ImplementationItemRepository = Depends(get_implementation_repo)
):
    return [item.to_wire() for item in repo.list_for_idea(idea_id)]


@router.post("/implementation-items", status_code=201)
def create_implementation_item(
    body: ImplementationItemCreate,
    repo: ImplementationItemRepository = Depends(get_implementation_repo),
    ideas: IdeaRepository = Depends(get_idea_repo),
):
    if not ideas.exists(body.idea_id):
        raise NotFoundError("Idea")
    item = repo.create(ImplementationItem.from_wire(body.to_payload()))
    return item.to_wire()


@router.get("/implementation-item/{item_id}")
def get_implementation_item(
    item_id: int, repo: ImplementationItemRepository = Depends(get_implementation_repo)
):
    item = repo.get_by_id(item_id)
    if not item:
        raise NotFoundError("Implementation item")
    return item.to_wire()


@router.put("/implementation-item/{item_id}")
def update_implementation_item(
    item_id: int,
    body: ImplementationItemUpdate,
    repo: ImplementationItemRepository = Depends(get_implementation_repo),
):
    existing = repo.get_by_id(item_id)
    if not existing:
        raise NotFoundError("Implementation item")

    changes = ImplementationItem.from_wire(body.to_payload())
    changes.idea_id = existing.idea_id
    updated = repo.update(item_id, changes)
    if not updated:
        raise NotFoundError("Implementation item")
    return updated.to_wire()


@router.delete("/implementation-item/{item_id}", status_code=204)
def delete_implementation_item(
    item_id: int, repo: ImplementationItemRepository = Depends(get_implementation_repo)
):
    if not repo.delete(item_id):
        raise NotFoundError("Implementation item")
    return Response(status_code=204)
