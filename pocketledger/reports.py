"""Summaries of a user's incomes and expenses."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable

from .models import Expense, Income


@dataclass
class MonthlySummary:
    """Income and expense totals for one month."""

    income: float = 0.0
    expense: float = 0.0

    @property
    def balance(self) -> float:
        return self.income - self.expense


def monthly_summary(
    incomes: Iterable[Income], expenses: Iterable[Expense], user_id: str
) -> dict[str, MonthlySummary]:
    """Totals per ``YYYY-MM`` month for ``user_id``, ordered by month."""
    months: defaultdict[str, MonthlySummary] = defaultdict(MonthlySummary)
    for income in incomes:
        if income.user_id == user_id:
            months[income.date[:7]].income += income.amount
    for expense in expenses:
        if expense.user_id == user_id:
            months[expense.date[:7]].expense += expense.amount
    return dict(sorted(months.items()))


def category_totals(expenses: Iterable[Expense], user_id: str) -> dict[str, float]:
    """Amount spent per category by ``user_id``, ordered by category name."""
    totals: defaultdict[str, float] = defaultdict(float)
    for expense in expenses:
        if expense.user_id == user_id:
            totals[expense.category] += expense.amount
    return dict(sorted(totals.items()))


def daily_balance(
    incomes: Iterable[Income], expenses: Iterable[Expense], user_id: str
) -> dict[str, float]:
    """Net amount per date for ``user_id``, ordered by date."""
    balances: defaultdict[str, float] = defaultdict(float)
    for income in incomes:
        if income.user_id == user_id:
            balances[income.date] += income.amount
    for expense in expenses:
        if expense.user_id == user_id:
            balances[expense.date] -= expense.amount
    return dict(sorted(balances.items()))