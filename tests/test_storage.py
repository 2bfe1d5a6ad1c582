from models import StoredCollection
from services import DatabaseStorage, MemoryStorage, Workspace
from tests.factories import make_ingredient


def test_memory_storage_copies():
    storage = MemoryStorage()
    items = [{'id': 1, 'name': 'Sal'}]
    storage.save('things', items)
    items[0]['name'] = 'Pimienta'
    assert storage.load('things') == [{'id': 1, 'name': 'Sal'}]
    assert storage.load('missing') is None


def test_database_storage_round_trip(app):
    storage = DatabaseStorage()
    assert storage.load('costoExactoInventory') is None

    storage.save('costoExactoInventory', [{'id': 1, 'name': 'Sal'}])
    storage.save('costoExactoInventory', [{'id': 1, 'name': 'Sal'}, {'id': 2, 'name': 'Azúcar'}])

    assert storage.load('costoExactoInventory') == [{'id': 1, 'name': 'Sal'}, {'id': 2, 'name': 'Azúcar'}]
    assert StoredCollection.query.count() == 1


def test_workspace_over_database(app):
    Workspace(DatabaseStorage()).add_ingredient(make_ingredient(1, 'Harina', '1200', '1', 'kg'))
    reloaded = Workspace(DatabaseStorage())
    assert reloaded.inventory.get(1).purchase_price == 1200
