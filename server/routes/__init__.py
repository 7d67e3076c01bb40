"""API routers, one per resource."""

from server.routes import business_plans, ideas, implementation_items, validations

ROUTERS = [
    ideas.router,
    validations.router,
    business_plans.router,
    implementation_items.router,
]

__all__ = ["ROUTERS"]
