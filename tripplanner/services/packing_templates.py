"""
Predefined packing templates (beach, city, hiking, business).

A template is a list of categories with default items; applying one to a
packing list appends its categories in this order.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class TemplateItem:
    name: str
    quantity: int = 1
    is_essential: bool = False


@dataclass(frozen=True)
class TemplateCategory:
    name: str
    icon: Optional[str]
    items: Tuple[TemplateItem, ...]


@dataclass(frozen=True)
class PackingTemplate:
    id: str
    name: str
    description: str
    categories: Tuple[TemplateCategory, ...]

    @property
    def item_count(self) -> int:
        return sum(len(c.items) for c in self.categories)


def _items(*rows) -> Tuple[TemplateItem, ...]:
    """Rows are ``(name, quantity, is_essential)``"""
    return tuple(TemplateItem(name, quantity, essential) for name, quantity, essential in rows)


TEMPLATES: List[PackingTemplate] = [
    PackingTemplate(
        id="beach",
        name="Beach Holiday",
        description="Everything for relaxed days by the sea",
        categories=(
            TemplateCategory("Clothing", "👕", _items(
                ("T-shirts", 5, True),
                ("Shorts", 3, True),
                ("Swimwear", 2, True),
                ("Light trousers", 1, False),
                ("Summer dress", 2, False),
                ("Flip-flops", 1, True),
                ("Sandals", 1, False),
                ("Underwear", 7, True),
                ("Sun hat", 1, True),
            )),
            TemplateCategory("Beach", "🏖️", _items(
                ("Beach towel", 2, True),
                ("Sunscreen", 1, True),
                ("Sunglasses", 1, True),
                ("Beach bag", 1, False),
                ("Snorkel set", 1, False),
                ("Beach ball", 1, False),
                ("Beach tent", 1, False),
            )),
            TemplateCategory("Toiletries", "🧴", _items(
                ("Toothbrush", 1, True),
                ("Toothpaste", 1, True),
                ("Shampoo", 1, True),
                ("Shower gel", 1, True),
                ("Deodorant", 1, True),
                ("After-sun lotion", 1, False),
                ("Razor", 1, False),
            )),
            TemplateCategory("Electronics", "📱", _items(
                ("Phone charger", 1, True),
                ("Camera", 1, False),
                ("E-reader", 1, False),
                ("Power bank", 1, False),
                ("Headphones", 1, False),
            )),
        ),
    ),
    PackingTemplate(
        id="city",
        name="City Break",
        description="Made for sightseeing and culture",
        categories=(
            TemplateCategory("Clothing", "👔", _items(
                ("T-shirts", 4, True),
                ("Shirts/blouses", 2, False),
                ("Jeans", 2, True),
                ("Sweater", 1, True),
                ("Jacket", 1, True),
                ("Comfortable shoes", 1, True),
                ("Dress shoes", 1, False),
                ("Underwear", 5, True),
                ("Socks", 5, True),
            )),
            TemplateCategory("Documents", "📄", _items(
                ("Passport/ID", 1, True),
                ("Credit card", 1, True),
                ("Cash", 1, True),
                ("Hotel reservation", 1, True),
                ("Travel insurance", 1, False),
                ("City map", 1, False),
            )),
            TemplateCategory("Electronics", "💻", _items(
                ("Phone charger", 1, True),
                ("Camera", 1, False),
                ("Travel adapter", 1, True),
                ("Power bank", 1, True),
                ("Headphones", 1, False),
            )),
            TemplateCategory("Miscellaneous", "🎒", _items(
                ("Daypack", 1, True),
                ("Umbrella", 1, False),
                ("Guidebook", 1, False),
                ("Water bottle", 1, False),
                ("Snacks", 1, False),
            )),
        ),
    ),
    PackingTemplate(
        id="hiking",
        name="Hiking Trip",
        description="Gear for outdoor adventures",
        categories=(
            TemplateCategory("Clothing", "🥾", _items(
                ("Hiking trousers", 2, True),
                ("Base layer shirts", 4, True),
                ("Fleece jacket", 1, True),
                ("Rain jacket", 1, True),
                ("Hiking boots", 1, True),
                ("Hiking socks", 4, True),
                ("Beanie", 1, False),
                ("Gloves", 1, False),
                ("Underwear", 5, True),
            )),
            TemplateCategory("Gear", "🎒", _items(
                ("Hiking backpack", 1, True),
                ("Trekking poles", 1, False),
                ("Headlamp", 1, True),
                ("Pocket knife", 1, False),
                ("Compass", 1, False),
                ("Trail map", 1, True),
                ("Water bottle", 1, True),
                ("Sit pad", 1, False),
            )),
            TemplateCategory("Food", "🍎", _items(
                ("Granola bars", 10, True),
                ("Nuts", 1, False),
                ("Dried fruit", 1, False),
                ("Lunch box", 1, False),
                ("Hydration bladder", 1, False),
            )),
            TemplateCategory("First Aid", "🏥", _items(
                ("First aid kit", 1, True),
                ("Blister plasters", 5, True),
                ("Painkillers", 1, True),
                ("Insect repellent", 1, True),
                ("Sunscreen", 1, True),
                ("Emergency blanket", 1, False),
            )),
        ),
    ),
    PackingTemplate(
        id="business",
        name="Business Trip",
        description="Professional and organised on the road",
        categories=(
            TemplateCategory("Clothing", "👔", _items(
                ("Suit", 2, True),
                ("Shirts/blouses", 3, True),
                ("Tie/scarf", 2, False),
                ("Business shoes", 1, True),
                ("Belt", 1, True),
                ("Underwear", 4, True),
                ("Socks", 4, True),
                ("Pyjamas", 1, False),
                ("Sportswear", 1, False),
            )),
            TemplateCategory("Documents", "📋", _items(
                ("Passport/ID", 1, True),
                ("Business cards", 1, True),
                ("Presentation (USB)", 1, True),
                ("Notepad", 1, True),
                ("Corporate credit card", 1, True),
                ("Flight tickets", 1, True),
                ("Hotel confirmation", 1, True),
            )),
            TemplateCategory("Electronics", "💼", _items(
                ("Laptop", 1, True),
                ("Laptop charger", 1, True),
                ("Phone charger", 1, True),
                ("Travel adapter", 1, True),
                ("Headphones", 1, False),
                ("HDMI cable", 1, False),
                ("USB stick", 1, True),
            )),
            TemplateCategory("Toiletries", "🧳", _items(
                ("Toothbrush", 1, True),
                ("Toothpaste", 1, True),
                ("Deodorant", 1, True),
                ("Perfume/aftershave", 1, False),
                ("Razor", 1, True),
                ("Hairbrush", 1, False),
                ("Medication", 1, False),
            )),
        ),
    ),
]

TEMPLATES_BY_ID: Dict[str, PackingTemplate] = {t.id: t for t in TEMPLATES}


def get_template(template_id: str) -> Optional[PackingTemplate]:
    return TEMPLATES_BY_ID.get(template_id)
