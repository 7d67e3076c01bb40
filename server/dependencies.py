"""FastAPI dependencies: the injected Database and per-request repositories."""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request

from business_ideas.db.business_plan_repo import BusinessPlanRepository
from business_ideas.db.database import Database
from business_ideas.db.idea_repo import IdeaRepository
from business_ideas.db.implementation_repo import ImplementationItemRepository
from business_ideas.db.validation_repo import ValidationRepository


def get_database(request: Request) -> Database:
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise HTTPException(status_code=503, detail="Database not initialized")
    return db


def get_idea_repo(db: Database = Depends(get_database)) -> IdeaRepository:
    return IdeaRepository(db)


def get_validation_repo(db: Database = Depends(get_database)) -> ValidationRepository:
    return ValidationRepository(db)


def get_business_plan_repo(db: Database = Depends(get_database)) -> BusinessPlanRepository:
    return BusinessPlanRepository(db)


def get_implementation_repo(db: Database = Depends(get_database)) -> ImplementationItemRepository:
    return ImplementationItemRepository(db)
