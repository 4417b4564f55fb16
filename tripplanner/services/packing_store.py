"""
Packing Store - packing lists with ordered categories and items
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from tripplanner.models.packing import PackingCategory, PackingItem, PackingList
from tripplanner.services import ordering
from tripplanner.services.base_store import EntityStore
from tripplanner.services.packing_templates import PackingTemplate

logger = logging.getLogger(__name__)


def _find(children, child_id):
    for child in children:
        if child.id == child_id:
            return child
    return None


class PackingStore(EntityStore[PackingList]):
    """
    A packing list owns categories, a category owns items. Both levels keep
    a contiguous 0-based ``order``.
    """

    model = PackingList
    storage_key = "packing"
    timestamp_fields = ("created_at", "updated_at")
    touch_field = "updated_at"
    sort_field = "created_at"
    protected_fields = ("id", "categories")

    def _prepare(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        payload["categories"] = []
        return payload

    # ------------------------------------------------------------------ #
    # categories
    # ------------------------------------------------------------------ #

    def add_category(self, list_id: str, data: Mapping[str, Any]) -> Optional[str]:
        category_id = self._new_id()

        def change(packing_list: PackingList) -> str:
            payload = PackingCategory.field_values(data)
            payload.update(id=category_id, list_id=list_id, items=[],
                           order=len(packing_list.categories))
            packing_list.categories = ordering.append(
                packing_list.categories, PackingCategory.model_validate(payload)
            )
            return category_id

        return self._modify(list_id, change)

    def update_category(self, list_id: str, category_id: str, **fields: Any) -> Optional[PackingCategory]:
        fields = PackingCategory.field_values(fields, exclude=("id", "list_id", "items", "order"))

        def change(packing_list: PackingList) -> Optional[PackingCategory]:
            for index, category in enumerate(packing_list.categories):
                if category.id == category_id:
                    updated = PackingCategory.model_validate({**category.model_dump(), **fields})
                    packing_list.categories[index] = updated
                    return updated
            return None

        return self._modify(list_id, change)

    def delete_category(self, list_id: str, category_id: str) -> bool:
        def change(packing_list: PackingList) -> Optional[bool]:
            packing_list.categories, removed = ordering.remove(packing_list.categories, category_id)
            return True if removed is not None else None

        return bool(self._modify(list_id, change))

    def reorder_categories(self, list_id: str, category_ids: Sequence[str]) -> bool:
        def change(packing_list: PackingList) -> bool:
            packing_list.categories = ordering.reorder(packing_list.categories, category_ids)
            return True

        return bool(self._modify(list_id, change))

    def apply_template(self, list_id: str, template: PackingTemplate) -> Optional[List[str]]:
        """
        Append the template's categories and items to a list in one write

        Returns:
            Ids of the new categories, or None when the list does not exist
        """
        def change(packing_list: PackingList) -> List[str]:
            category_ids = []
            for source in template.categories:
                category_id = self._new_id()
                items = [
                    PackingItem(
                        id=self._new_id(),
                        category_id=category_id,
                        name=item.name,
                        quantity=item.quantity,
                        is_essential=item.is_essential,
                        order=position,
                    )
                    for position, item in enumerate(source.items)
                ]
                category = PackingCategory(
                    id=category_id, list_id=list_id, name=source.name, icon=source.icon, items=items,
                )
                packing_list.categories = ordering.append(packing_list.categories, category)
                category_ids.append(category_id)
            return category_ids

        category_ids = self._modify(list_id, change)
        if category_ids is not None:
            logger.info("Packing template applied", extra={"list_id": list_id, "template": template.id})
        return category_ids

    # ------------------------------------------------------------------ #
    # items
    # ------------------------------------------------------------------ #

    def _stamp_packed(self, item: PackingItem) -> PackingItem:
        if item.is_packed and item.first_packed_at is None:
            item.first_packed_at = self._clock()
        return item

    def get_item(self, list_id: str, category_id: str, item_id: str) -> Optional[PackingItem]:
        packing_list = self.get(list_id)
        category = _find(packing_list.categories, category_id) if packing_list else None
        return _find(category.items, item_id) if category else None

    def add_item(self, list_id: str, category_id: str, data: Mapping[str, Any]) -> Optional[str]:
        item_id = self._new_id()

        def change(packing_list: PackingList) -> Optional[str]:
            category = _find(packing_list.categories, category_id)
            if category is None:
                return None
            payload = PackingItem.field_values(data, exclude=("first_packed_at",))
            payload.update(id=item_id, category_id=category_id, order=len(category.items))
            item = self._stamp_packed(PackingItem.model_validate(payload))
            category.items = ordering.append(category.items, item)
            return item_id

        return self._modify(list_id, change)

    def update_item(self, list_id: str, category_id: str, item_id: str, **fields: Any) -> Optional[PackingItem]:
        fields = PackingItem.field_values(fields, exclude=("id", "category_id", "order", "first_packed_at"))

        def change(packing_list: PackingList) -> Optional[PackingItem]:
            category = _find(packing_list.categories, category_id)
            if category is None:
                return None
            for index, item in enumerate(category.items):
                if item.id == item_id:
                    updated = self._stamp_packed(PackingItem.model_validate({**item.model_dump(), **fields}))
                    category.items[index] = updated
                    return updated
            return None

        return self._modify(list_id, change)

    def delete_item(self, list_id: str, category_id: str, item_id: str) -> bool:
        def change(packing_list: PackingList) -> Optional[bool]:
            category = _find(packing_list.categories, category_id)
            if category is None:
                return None
            category.items, removed = ordering.remove(category.items, item_id)
            return True if removed is not None else None

        return bool(self._modify(list_id, change))

    def toggle_item_packed(self, list_id: str, category_id: str, item_id: str) -> Optional[bool]:
        """Flip ``is_packed``; returns the new value or None when not found"""
        def change(packing_list: PackingList) -> Optional[bool]:
            category = _find(packing_list.categories, category_id)
            item = _find(category.items, item_id) if category else None
            if item is None:
                return None
            item.is_packed = not item.is_packed
            self._stamp_packed(item)
            return item.is_packed

        return self._modify(list_id, change)

    def reorder_items(self, list_id: str, category_id: str, item_ids: Sequence[str]) -> bool:
        def change(packing_list: PackingList) -> Optional[bool]:
            category = _find(packing_list.categories, category_id)
            if category is None:
                return None
            category.items = ordering.reorder(category.items, item_ids)
            return True

        return bool(self._modify(list_id, change))

    def move_item_to_category(
        self, list_id: str, from_category_id: str, to_category_id: str, item_id: str
    ) -> bool:
        """Move an item to the end of another category of the same list"""
        def change(packing_list: PackingList) -> Optional[bool]:
            source = _find(packing_list.categories, from_category_id)
            target = _find(packing_list.categories, to_category_id)
            if source is None or target is None or source is target:
                return None
            source.items, moved = ordering.remove(source.items, item_id)
            if moved is None:
                return None
            moved.category_id = to_category_id
            target.items = ordering.append(target.items, moved)
            return True

        return bool(self._modify(list_id, change))

    # ------------------------------------------------------------------ #
    # selectors
    # ------------------------------------------------------------------ #

    def get_packed_items_count(self, list_id: str) -> Tuple[int, int]:
        """(packed, total), both weighted by item quantity"""
        packing_list = self.get(list_id)
        if packing_list is None:
            return 0, 0
        items = packing_list.all_items()
        packed = sum(i.quantity for i in items if i.is_packed)
        total = sum(i.quantity for i in items)
        return packed, total

    def get_essential_items(self, list_id: str) -> List[PackingItem]:
        packing_list = self.get(list_id)
        if packing_list is None:
            return []
        return [item for item in packing_list.all_items() if item.is_essential]

    def is_complete(self, list_id: str) -> bool:
        """A list is complete when it has items and all of them are packed"""
        packed, total = self.get_packed_items_count(list_id)
        return total > 0 and packed == total
