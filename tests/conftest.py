"""
Shared fixtures for the front counter tests.
"""

import pytest

from database.db_manager import DatabaseManager
from database.category_dao import CategoryDAO
from database.entry_dao import EntryDAO
from services.category_service import CategoryService
from services.entry_service import EntryService
from services.export_service import ExportService
from services.undo_service import UndoService
from services.data_service import DataService


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int):
        self.now += ms


class FakeScheduler:
    """Records scheduled callbacks; tests fire them explicitly."""

    def __init__(self):
        self.pending: dict[int, object] = {}
        self.cancelled: list[int] = []
        self.fired: list[int] = []
        self._next = 0

    def schedule(self, delay_ms, callback):
        self._next += 1
        self.pending[self._next] = callback
        return self._next

    def cancel(self, handle):
        self.cancelled.append(handle)
        self.pending.pop(handle, None)

    def fire(self, handle):
        callback = self.pending.pop(handle)
        self.fired.append(handle)
        callback()

    def fire_all(self):
        for handle in list(self.pending):
            self.fire(handle)


@pytest.fixture
def db():
    manager = DatabaseManager(":memory:")
    manager.initialize()
    yield manager
    manager.close()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def category_dao(db):
    return CategoryDAO(db)


@pytest.fixture
def entry_dao(db):
    return EntryDAO(db)


@pytest.fixture
def categories(category_dao):
    return CategoryService(category_dao)


@pytest.fixture
def entries(entry_dao, clock):
    return EntryService(entry_dao, clock=clock)


@pytest.fixture
def undo(entries, clock, scheduler):
    return UndoService(entries, clock=clock, scheduler=scheduler)


@pytest.fixture
def data_service(category_dao, entry_dao, categories, undo):
    return DataService(category_dao, entry_dao, categories, ExportService(), undo)
