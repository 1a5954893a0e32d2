# pocketledger

A small interactive ledger for the terminal. It keeps track of members,
their income and their expenses, and prints simple reports. Records are
written as JSON files in a data directory.

## Installing

```
pip install .
```

## Running

```
pocketledger
pocketledger --data-dir path/to/dir
```

`--data-dir` names the directory that holds `users.json`,
`categories.json` and `transactions.json`; it defaults to `data` under the
working directory. The directory must already exist: the program does not
create it, and a failed write is reported as an error in the menu.

The main menu offers:

1. Members management: add a member, list members, choose the active member
2. Record income for the active member
3. Cost registration: record an expense under one of the member's categories
4. View transactions, with the option to delete one by its ID
5. Reports: monthly summary, expenses by category, daily balance
0. Exit

The first member you add becomes the active member and receives a default
set of expense categories (Food, Transportation, Bills, Shop,
Entertaiment, other). New categories can be added while recording an
expense. Leave the date empty to use today's date. Amounts must be
positive numbers. Reports are printed in order of month, category name or
date.

## Limits

The menu starts with an empty ledger each time: it does not read the JSON
files that an earlier session wrote, and the first change it saves replaces
their contents. To work with stored data across sessions, use the services
below and call their `load()` methods.

## Using the library

```python
from pocketledger.users import UserService
from pocketledger.transactions import TransactionService
from pocketledger.reports import monthly_summary, category_totals, daily_balance

users = UserService("data/users.json")
user = users.add_user("alice", "alice@example.com")

ledger = TransactionService("data/transactions.json")
ledger.add_income(user.id, 1200.0, "2024-05-01", "May salary", "Salary")
ledger.add_expense(user.id, 45.5, "2024-05-03", "Groceries", "Food")

for month, entry in monthly_summary(ledger.incomes, ledger.expenses, user.id).items():
    print(month, entry.income, entry.expense, entry.balance)

print(category_totals(ledger.expenses, user.id))
print(daily_balance(ledger.incomes, ledger.expenses, user.id))
```

- `pocketledger.models` holds the records `User`, `Income`, `Expense` and
  `Category`, each with `to_dict()` and `from_dict()`.
- `pocketledger.users.UserService` keeps members. `add_user` raises
  `DuplicateUserError` for a username that is already taken; `find_by_id`
  raises `UserNotFoundError`.
- `pocketledger.categories.CategoryService` keeps per-member categories:
  `load_defaults`, `add_category` (repeated names are allowed) and
  `user_categories`.
- `pocketledger.transactions.TransactionService` keeps incomes and expenses
  in one file, each record tagged with a `type` of `income` or `expense`.
  `delete` raises `TransactionNotFoundError` when no transaction has the
  given ID; `all_transactions` returns incomes followed by expenses.
- `pocketledger.storage` has `load_json` and `save_json` (two-space indent).
- `pocketledger.cli.FinanceApp` is the menu itself; it accepts a data
  directory, an input function and an output stream, so it can be driven
  from code.

Every service saves its file after each change. `load()` raises
`FileNotFoundError` when the file does not exist.

## Tests

```
pip install .[test]
pytest
```