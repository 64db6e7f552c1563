"""Unit tests for the in-memory StorefrontStore."""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

from storefront.models.order import OrderStatus
from storefront.services.store import StorefrontStore


class TestCart:
    def test_cart_returns_copy(self):
        store = StorefrontStore()
        store.add_to_cart({"id": 1})

        snapshot = store.cart
        snapshot.append({"id": 2})
        assert store.cart == [{"id": 1}]

    def test_clear_cart(self):
        store = StorefrontStore()
        store.add_to_cart("a")
        store.clear_cart()
        assert store.cart == []


class TestPlaceOrder:
    def test_assigns_pending_status_and_timestamp(self):
        store = StorefrontStore()
        before = datetime.now(timezone.utc)

        order = store.place_order("Alice", [{"id": 1}], 12.99)

        assert order.id == 1
        assert order.status == OrderStatus.PENDING
        assert before <= order.timestamp <= datetime.now(timezone.utc)

    def test_ids_come_from_counter(self):
        store = StorefrontStore()
        ids = [store.place_order(None, [], 0).id for _ in range(3)]
        assert ids == [1, 2, 3]

    def test_items_are_copied(self):
        store = StorefrontStore()
        items = [{"id": 1}]

        order = store.place_order("Alice", items, 12.99)
        items.append({"id": 2})
        assert order.items == [{"id": 1}]

    def test_clears_cart(self):
        store = StorefrontStore()
        store.add_to_cart({"id": 1})
        store.place_order("Alice", [{"id": 9}], 1.0)
        assert store.cart == []

    def test_separate_stores_do_not_share_state(self):
        first, second = StorefrontStore(), StorefrontStore()
        first.add_to_cart({"id": 1})
        first.place_order("Alice", [], 0)

        assert second.cart == []
        assert second.orders == []
        assert second.place_order("Bob", [], 0).id == 1

    def test_get_order(self):
        store = StorefrontStore()
        placed = store.place_order("Alice", [], 0)
        assert store.get_order(placed.id) is placed
        assert store.get_order(2) is None


class TestConcurrentAccess:
    def test_parallel_adds_are_all_kept(self):
        store = StorefrontStore()
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(store.add_to_cart, range(400)))

        assert sorted(store.cart) == list(range(400))

    def test_parallel_orders_get_unique_sequential_ids(self):
        store = StorefrontStore()

        def place(n):
            store.add_to_cart(n)
            return store.place_order(f"c{n}", [n], n).id

        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(place, range(200)))

        assert sorted(ids) == list(range(1, 201))
        assert [o.id for o in store.orders] == list(range(1, 201))
