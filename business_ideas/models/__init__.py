"""Domain models and their row/wire mappings."""

from business_ideas.models.idea import Idea, IdeaStatus
from business_ideas.models.validation import Validation
from business_ideas.models.business_plan import BusinessPlan
from business_ideas.models.implementation_item import ImplementationItem, ItemStatus

__all__ = [
    "Idea", "IdeaStatus",
    "Validation",
    "BusinessPlan",
    "ImplementationItem", "ItemStatus",
]
