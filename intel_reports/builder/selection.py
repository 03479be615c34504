"""Single- and multi-entity selection state for configuration fields."""

import enum
from typing import List, Optional

from intel_reports.models.report import SearchableEntity


DEFAULT_MAX_SELECTED = 5


class SelectionOutcome(str, enum.Enum):
    """Result of trying to add an entity to a multi-selection."""
    ADDED = "added"
    DUPLICATE = "duplicate"
    FULL = "full"


class SingleSelection:
    """Holds at most one selected entity."""

    def __init__(self):
        self.entity: Optional[SearchableEntity] = None

    def select(self, entity: Optional[SearchableEntity]):
        self.entity = entity

    def clear(self):
        self.entity = None

    @property
    def slug(self) -> Optional[str]:
        return self.entity.slug if self.entity else None

    def __bool__(self) -> bool:
        return self.entity is not None


class MultiSelection:
    """
    Ordered list of selected entities, unique by slug and bounded in size.

    Adding a duplicate or adding past the bound leaves the list untouched and
    reports why through the returned SelectionOutcome.
    """

    def __init__(self, max_items: int = DEFAULT_MAX_SELECTED):
        self.max_items = max_items
        self._items: List[SearchableEntity] = []

    def add(self, entity: SearchableEntity) -> SelectionOutcome:
        if len(self._items) >= self.max_items:
            return SelectionOutcome.FULL
        if self.contains(entity.slug):
            return SelectionOutcome.DUPLICATE
        self._items.append(entity)
        return SelectionOutcome.ADDED

    def remove(self, slug: str) -> bool:
        before = len(self._items)
        self._items = [item for item in self._items if item.slug != slug]
        return len(self._items) != before

    def contains(self, slug: str) -> bool:
        return any(item.slug == slug for item in self._items)

    def clear(self):
        self._items = []

    @property
    def items(self) -> List[SearchableEntity]:
        return list(self._items)

    def slugs(self) -> List[str]:
        return [item.slug for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))
