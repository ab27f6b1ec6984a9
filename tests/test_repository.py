import unittest
from datetime import date, datetime

from recordkeeper.domain.exceptions import DuplicateEntityError, InvalidValueError, NotFoundError
from recordkeeper.domain.models import ElectronicItem, GroceryItem, InventoryItem
from recordkeeper.domain.repository import TypedRepository


def _grocery(item_id: int, name: str = "Milk", quantity: int = 50) -> GroceryItem:
    return GroceryItem(id=item_id, name=name, quantity=quantity, expiry_date=date(2025, 8, 30))


class TestTypedRepositoryAdd(unittest.TestCase):
    def test_distinct_adds_are_all_retrievable(self) -> None:
        repo = TypedRepository()
        for item_id in (3, 1, 7, 2):
            repo.add(_grocery(item_id, name=f"item-{item_id}"))

        self.assertEqual(len(repo.get_all()), 4)
        for item_id in (3, 1, 7, 2):
            self.assertEqual(repo.get_by_id(item_id).name, f"item-{item_id}")

    def test_get_all_preserves_insertion_order(self) -> None:
        repo = TypedRepository([_grocery(3), _grocery(1), _grocery(2)])

        self.assertEqual([item.id for item in repo.get_all()], [3, 1, 2])

    def test_duplicate_milk_is_rejected(self) -> None:
        repo = TypedRepository()
        repo.add(_grocery(1, "Milk", 50))

        with self.assertRaises(DuplicateEntityError) as ctx:
            repo.add(_grocery(1, "Duplicate Milk", 10))

        self.assertEqual(ctx.exception.entity_id, 1)
        items = repo.get_all()
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0].name, "Milk")
        self.assertEqual(items[0].quantity, 50)

    def test_get_all_returns_a_snapshot(self) -> None:
        repo = TypedRepository([_grocery(1)])
        snapshot = repo.get_all()
        snapshot.clear()

        self.assertEqual(len(repo), 1)

    def test_repositories_are_isolated(self) -> None:
        electronics = TypedRepository()
        groceries = TypedRepository()
        electronics.add(ElectronicItem(id=1, name="Laptop", quantity=10, brand="Dell", warranty_months=12))
        groceries.add(_grocery(1))

        self.assertEqual(electronics.get_by_id(1).name, "Laptop")
        self.assertEqual(groceries.get_by_id(1).name, "Milk")


class TestTypedRepositoryLookup(unittest.TestCase):
    def test_get_by_id_missing_raises(self) -> None:
        repo = TypedRepository([_grocery(1)])

        with self.assertRaises(NotFoundError):
            repo.get_by_id(42)

    def test_find_first_returns_earliest_match(self) -> None:
        repo = TypedRepository([_grocery(1, "Milk", 5), _grocery(2, "Bread", 30), _grocery(3, "Eggs", 100)])

        found = repo.find_first(lambda item: item.quantity > 10)

        self.assertEqual(found.name, "Bread")

    def test_find_first_without_match_returns_none(self) -> None:
        repo = TypedRepository([_grocery(1)])

        self.assertIsNone(repo.find_first(lambda item: item.name == "Caviar"))

    def test_find_all_filters_in_order(self) -> None:
        repo = TypedRepository([_grocery(1, quantity=5), _grocery(2, quantity=30), _grocery(3, quantity=100)])

        self.assertEqual([item.id for item in repo.find_all(lambda item: item.quantity >= 30)], [2, 3])

    def test_contains_checks_ids(self) -> None:
        repo = TypedRepository([_grocery(1)])

        self.assertIn(1, repo)
        self.assertNotIn(2, repo)


class TestTypedRepositoryRemove(unittest.TestCase):
    def test_remove_present_id(self) -> None:
        repo = TypedRepository([_grocery(1), _grocery(2)])

        removed = repo.remove(1)

        self.assertEqual(removed.id, 1)
        self.assertEqual(len(repo), 1)
        with self.assertRaises(NotFoundError):
            repo.get_by_id(1)

    def test_remove_absent_id_leaves_repository_unchanged(self) -> None:
        repo = TypedRepository([_grocery(1), _grocery(2)])
        revision = repo.revision

        with self.assertRaises(NotFoundError):
            repo.remove(999)
        with self.assertRaises(NotFoundError):
            repo.remove(999)

        self.assertEqual([item.id for item in repo.get_all()], [1, 2])
        self.assertEqual(repo.revision, revision)


class TestTypedRepositoryUpdate(unittest.TestCase):
    def test_update_quantity_mutates_in_place(self) -> None:
        item = _grocery(1, quantity=50)
        repo = TypedRepository([item])

        repo.update_quantity(1, 75)

        self.assertEqual(repo.get_by_id(1).quantity, 75)
        self.assertIs(repo.get_by_id(1), item)

    def test_negative_quantity_is_rejected(self) -> None:
        repo = TypedRepository([_grocery(1, quantity=50)])

        with self.assertRaises(InvalidValueError) as ctx:
            repo.update_quantity(1, -5)

        self.assertEqual(ctx.exception.field, "quantity")
        self.assertEqual(repo.get_by_id(1).quantity, 50)

    def test_negative_quantity_is_checked_before_lookup(self) -> None:
        repo = TypedRepository()

        with self.assertRaises(InvalidValueError):
            repo.update_quantity(5, -1)

    def test_update_quantity_on_missing_id(self) -> None:
        repo = TypedRepository()

        with self.assertRaises(NotFoundError):
            repo.update_quantity(5, 10)

    def test_update_field_validates_through_the_model(self) -> None:
        repo = TypedRepository([ElectronicItem(id=1, name="Laptop", quantity=10, brand="Dell", warranty_months=12)])

        repo.update_field(1, "brand", "Lenovo")
        with self.assertRaises(InvalidValueError):
            repo.update_field(1, "warranty_months", -1)

        item = repo.get_by_id(1)
        self.assertEqual(item.brand, "Lenovo")
        self.assertEqual(item.warranty_months, 12)

    def test_update_field_rejects_id_and_unknown_fields(self) -> None:
        repo = TypedRepository([_grocery(1)])

        with self.assertRaises(InvalidValueError):
            repo.update_field(1, "id", 2)
        with self.assertRaises(InvalidValueError):
            repo.update_field(1, "colour", "white")

        self.assertEqual(repo.get_by_id(1).id, 1)

    def test_update_field_rejects_non_field_attributes(self) -> None:
        repo = TypedRepository([_grocery(1, quantity=50)])
        revision = repo.revision

        for attribute in ("__dict__", "_private", "model_config", "model_dump"):
            with self.subTest(attribute=attribute):
                with self.assertRaises(InvalidValueError):
                    repo.update_field(1, attribute, {})

        item = repo.get_by_id(1)
        self.assertEqual(item.id, 1)
        self.assertEqual(item.quantity, 50)
        self.assertEqual(repo.revision, revision)

    def test_frozen_entity_cannot_be_updated(self) -> None:
        item = InventoryItem(id=1, name="Laptop", quantity=5, date_added=datetime(2024, 1, 2))
        repo = TypedRepository([item])

        with self.assertRaises(InvalidValueError):
            repo.update_quantity(1, 10)
        with self.assertRaises(InvalidValueError):
            repo.update_field(1, "name", "Desktop")

        stored = repo.get_by_id(1)
        self.assertEqual(stored.quantity, 5)
        self.assertEqual(stored.name, "Laptop")

    def test_non_integer_quantity_is_rejected(self) -> None:
        repo = TypedRepository([_grocery(1, quantity=50)])

        for value in (None, "10", 2.5, True):
            with self.subTest(value=value):
                with self.assertRaises(InvalidValueError):
                    repo.update_quantity(1, value)

        self.assertEqual(repo.get_by_id(1).quantity, 50)

    def test_update_field_checks_quantity_before_lookup(self) -> None:
        repo = TypedRepository()

        with self.assertRaises(InvalidValueError):
            repo.update_field(5, "quantity", -1)
        with self.assertRaises(NotFoundError):
            repo.update_field(5, "quantity", 1)

    def test_mutations_bump_revision(self) -> None:
        repo = TypedRepository()
        start = repo.revision

        repo.add(_grocery(1))
        repo.update_quantity(1, 3)
        repo.remove(1)

        self.assertEqual(repo.revision, start + 3)


class TestTypedRepositoryLoadAll(unittest.TestCase):
    def test_load_all_replaces_contents(self) -> None:
        repo = TypedRepository([_grocery(1)])

        repo.load_all([_grocery(5), _grocery(6)])

        self.assertEqual([item.id for item in repo.get_all()], [5, 6])

    def test_load_all_with_duplicates_keeps_previous_contents(self) -> None:
        repo = TypedRepository([_grocery(1)])

        with self.assertRaises(DuplicateEntityError):
            repo.load_all([_grocery(5), _grocery(5)])

        self.assertEqual([item.id for item in repo.get_all()], [1])

    def test_clear_empties_repository(self) -> None:
        repo = TypedRepository([_grocery(1), _grocery(2)])

        repo.clear()

        self.assertEqual(repo.get_all(), [])
