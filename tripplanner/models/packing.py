from datetime import datetime
from typing import List, Optional

from pydantic import Field

from tripplanner.models.base import PlannerModel


class PackingItem(PlannerModel):
    id: str
    category_id: str
    name: str = Field(..., min_length=1)
    quantity: int = Field(1, ge=1)
    is_packed: bool = False
    is_essential: bool = False
    notes: Optional[str] = None
    order: int = Field(0, ge=0)
    # set the first time the item is packed, never cleared
    first_packed_at: Optional[datetime] = None


class PackingCategory(PlannerModel):
    id: str
    list_id: str
    name: str = Field(..., min_length=1)
    icon: Optional[str] = None
    order: int = Field(0, ge=0)
    items: List[PackingItem] = Field(default_factory=list)


class PackingList(PlannerModel):
    id: str
    trip_id: str
    name: str = Field(..., min_length=1)
    categories: List[PackingCategory] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    def all_items(self) -> List[PackingItem]:
        return [item for category in self.categories for item in category.items]
