"""Recording, deleting and storing incomes and expenses."""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import Any

from .models import Expense, Income
from .storage import load_json, save_json


class TransactionNotFoundError(LookupError):
    """Raised when no transaction has the requested id."""


def _record(kind: str, fields: dict[str, Any]) -> dict[str, Any]:
    return dict(sorted({"type": kind, **fields}.items()))


class TransactionService:
    """Keeps incomes and expenses and stores them together in one JSON file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.incomes: list[Income] = []
        self.expenses: list[Expense] = []

    def load(self) -> None:
        """Read the file; records without a known string ``type`` are skipped."""
        raw = load_json(self.path)
        incomes: list[Income] = []
        expenses: list[Expense] = []
        for item in raw or []:
            kind = item.get("type")
            if kind == "income":
                incomes.append(Income.from_dict(item))
            elif kind == "expense":
                expenses.append(Expense.from_dict(item))
        self.incomes = incomes
        self.expenses = expenses

    def save(self) -> None:
        records = [_record("income", income.to_dict()) for income in self.incomes]
        records += [_record("expense", expense.to_dict()) for expense in self.expenses]
        save_json(self.path, records)

    def add_income(
        self, user_id: str, amount: float, date: str, description: str, source: str
    ) -> Income:
        income = Income(
            id=str(uuid.uuid4()),
            amount=amount,
            date=date,
            description=description,
            user_id=user_id,
            source=source,
        )
        self.incomes.append(income)
        self.save()
        return income

    def add_expense(
        self, user_id: str, amount: float, date: str, description: str, category: str
    ) -> Expense:
        expense = Expense(
            id=str(uuid.uuid4()),
            amount=amount,
            date=date,
            description=description,
            user_id=user_id,
            category=category,
        )
        self.expenses.append(expense)
        self.save()
        return expense

    def delete(self, transaction_id: str) -> None:
        """Remove the income or, failing that, the expense with this id."""
        for records in (self.incomes, self.expenses):
            for index, record in enumerate(records):
                if record.id == transaction_id:
                    del records[index]
                    self.save()
                    return
        raise TransactionNotFoundError("did not find transaction with this ID")

    def all_transactions(self) -> list[Income | Expense]:
        return [*self.incomes, *self.expenses]