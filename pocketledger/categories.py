"""Per-user expense categories."""

from __future__ import annotations

import contextlib
from pathlib import Path

from .models import Category
from .storage import load_json, save_json

DEFAULT_CATEGORIES = ("Food", "Transportation", "Bills", "Shop", "Entertaiment", "other")


class CategoryService:
    """Keeps expense categories and stores them in a JSON file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.categories: list[Category] = []

    def load(self) -> None:
        data = load_json(self.path)
        self.categories = [Category.from_dict(item) for item in data or []]

    def save(self) -> None:
        save_json(self.path, [category.to_dict() for category in self.categories])

    def load_defaults(self, user_id: str) -> None:
        """Give ``user_id`` the default set of categories.

        A failure to write the file is ignored; the categories stay in memory.
        """
        self.categories.extend(Category(name=name, user_id=user_id) for name in DEFAULT_CATEGORIES)
        with contextlib.suppress(OSError):
            self.save()

    def add_category(self, user_id: str, name: str) -> Category:
        """Add a category for ``user_id``; repeated names are allowed."""
        category = Category(name=name, user_id=user_id)
        self.categories.append(category)
        self.save()
        return category

    def user_categories(self, user_id: str) -> list[Category]:
        return [category for category in self.categories if category.user_id == user_id]