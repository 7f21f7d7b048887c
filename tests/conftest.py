import pytest

from phone_book.app.core.config import get_settings
from phone_book.app.storage.contact_store import ContactStore


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run every test in an empty directory with fresh settings."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PHONE_BOOK_DATA_PATH", raising=False)
    monkeypatch.delenv("PHONE_BOOK_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def data_path(tmp_path):
    """Fixture to provide the path of a contacts file that does not exist yet."""
    return tmp_path / "contacts.csv"


@pytest.fixture
def store(data_path) -> ContactStore:
    """Fixture to provide an empty store backed by data_path."""
    return ContactStore(data_path)
