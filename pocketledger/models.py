"""Records kept by the ledger: users, incomes, expenses and categories."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping, TypeVar

_R = TypeVar("_R")


def _record_to_dict(record: Any) -> dict[str, Any]:
    return asdict(record)


def _record_from_dict(cls: type[_R], data: Mapping[str, Any]) -> _R:
    """Build a record from a mapping, ignoring unknown keys and nulls."""
    values = {}
    for field in fields(cls):
        value = data.get(field.name)
        if value is not None:
            values[field.name] = type(field.default)(value)
    return cls(**values)


@dataclass
class User:
    """A member of the household ledger."""

    id: str = ""
    username: str = ""
    email: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _record_to_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> User:
        return _record_from_dict(cls, data)


@dataclass
class _Transaction:
    id: str = ""
    amount: float = 0.0
    date: str = ""
    description: str = ""
    user_id: str = ""


@dataclass
class Income(_Transaction):
    """Money received by a user."""

    source: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _record_to_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Income:
        return _record_from_dict(cls, data)


@dataclass
class Expense(_Transaction):
    """Money spent by a user in a category."""

    category: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _record_to_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Expense:
        return _record_from_dict(cls, data)


@dataclass
class Category:
    """An expense category belonging to one user."""

    name: str = ""
    user_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _record_to_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Category:
        return _record_from_dict(cls, data)