import pytest

from pocketledger.categories import DEFAULT_CATEGORIES, CategoryService
from pocketledger.models import Category
from pocketledger.storage import load_json


@pytest.fixture
def service(tmp_path):
    return CategoryService(tmp_path / "categories.json")


def test_load_defaults_adds_default_names_in_order(service):
    service.load_defaults("u-1")
    names = [c.name for c in service.user_categories("u-1")]
    assert names == ["Food", "Transportation", "Bills", "Shop", "Entertaiment", "other"]
    assert names == list(DEFAULT_CATEGORIES)


def test_load_defaults_persists(tmp_path, service):
    service.load_defaults("u-1")
    stored = load_json(tmp_path / "categories.json")
    assert len(stored) == len(DEFAULT_CATEGORIES)
    assert all(item["user_id"] == "u-1" for item in stored)


def test_load_defaults_ignores_write_failure(tmp_path):
    service = CategoryService(tmp_path / "missing_dir" / "categories.json")
    service.load_defaults("u-1")
    assert len(service.user_categories("u-1")) == len(DEFAULT_CATEGORIES)


def test_add_category_returns_category(service):
    category = service.add_category("u-1", "Travel")
    assert category == Category(name="Travel", user_id="u-1")
    assert service.user_categories("u-1") == [category]


def test_add_category_allows_duplicates(service):
    service.add_category("u-1", "Travel")
    service.add_category("u-1", "Travel")
    assert [c.name for c in service.user_categories("u-1")] == ["Travel", "Travel"]


def test_add_category_write_failure_raises(tmp_path):
    service = CategoryService(tmp_path / "missing_dir" / "categories.json")
    with pytest.raises(FileNotFoundError):
        service.add_category("u-1", "Travel")


def test_user_categories_filters_by_user(service):
    service.add_category("u-1", "Travel")
    service.add_category("u-2", "Pets")
    service.add_category("u-1", "Books")
    assert [c.name for c in service.user_categories("u-1")] == ["Travel", "Books"]
    assert [c.name for c in service.user_categories("u-2")] == ["Pets"]
    assert service.user_categories("u-3") == []


def test_load_restores_categories(tmp_path, service):
    service.load_defaults("u-1")
    service.add_category("u-2", "Pets")
    other = CategoryService(tmp_path / "categories.json")
    other.load()
    assert other.categories == service.categories