from pocketledger.models import Category, Expense, Income, User


def test_user_round_trip():
    user = User(id="u-1", username="alice", email="alice@example.com")
    assert User.from_dict(user.to_dict()) == user


def test_user_keys():
    user = User(id="u-1", username="alice", email="alice@example.com")
    assert user.to_dict() == {"id": "u-1", "username": "alice", "email": "alice@example.com"}


def test_user_missing_fields_default_to_empty():
    user = User.from_dict({"username": "bob"})
    assert user == User(id="", username="bob", email="")


def test_income_round_trip():
    income = Income(
        id="i-1", amount=250.5, date="2024-03-01", description="salary", user_id="u-1", source="job"
    )
    assert Income.from_dict(income.to_dict()) == income


def test_income_keys():
    income = Income(id="i-1", amount=1.0, source="gift")
    assert set(income.to_dict()) == {"id", "amount", "date", "description", "user_id", "source"}


def test_income_ignores_extra_keys_and_converts_amount():
    income = Income.from_dict({"type": "income", "id": "i-2", "amount": 10, "source": "bonus"})
    assert income.amount == 10.0
    assert isinstance(income.amount, float)
    assert income.source == "bonus"
    assert income.date == ""


def test_expense_round_trip():
    expense = Expense(
        id="e-1", amount=12.25, date="2024-03-02", description="lunch", user_id="u-1", category="Food"
    )
    assert Expense.from_dict(expense.to_dict()) == expense


def test_expense_keys():
    expense = Expense(id="e-1", category="Bills")
    assert set(expense.to_dict()) == {"id", "amount", "date", "description", "user_id", "category"}


def test_expense_missing_fields_default():
    expense = Expense.from_dict({})
    assert expense == Expense()
    assert expense.amount == 0.0


def test_category_round_trip():
    category = Category(name="Food", user_id="u-1")
    assert category.to_dict() == {"name": "Food", "user_id": "u-1"}
    assert Category.from_dict(category.to_dict()) == category