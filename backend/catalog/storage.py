import threading

from catalog.schemas import Item

SEED_ITEMS = (
    {"id": 1, "name": "Item One", "price": 100},
    {"id": 2, "name": "Item Two", "price": 200},
)


class ItemStore:
    def __init__(self):
        self._lock = threading.Lock()
        self._items: list[Item] = []
        self.reset()

    def __len__(self):
        with self._lock:
            return len(self._items)

    def list(self) -> list[Item]:
        with self._lock:
            return list(self._items)

    def create(self, data: dict) -> Item:
        # Identifier and append must happen under the same lock.
        with self._lock:
            stored = Item(**{**data, "id": len(self._items) + 1})
            self._items.append(stored)
            return stored

    def reset(self) -> None:
        with self._lock:
            self._items = [Item(**seed) for seed in SEED_ITEMS]
