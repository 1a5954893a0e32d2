"""Interactive menu for managing members, incomes, expenses and reports."""

from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path
from typing import Callable, TextIO

from .categories import CategoryService
from .reports import category_totals, daily_balance, monthly_summary
from .transactions import TransactionNotFoundError, TransactionService
from .users import DuplicateUserError, UserNotFoundError, UserService

_NO_ACTIVE_MEMBER = "You should choose an active member first."


class FinanceApp:
    """Menu-driven personal finance manager."""

    def __init__(
        self,
        data_dir: str | Path = "data",
        input_func: Callable[[str], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        base = Path(data_dir)
        self.users = UserService(base / "users.json")
        self.categories = CategoryService(base / "categories.json")
        self.transactions = TransactionService(base / "transactions.json")
        self.active_user_id = ""
        self._input = input_func or input
        self._output = output or sys.stdout

    def _say(self, *parts: object) -> None:
        print(*parts, file=self._output)

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _menu(self, title: str, *lines: str) -> None:
        self._say(title)
        for line in lines:
            self._say(line)

    def _has_active(self, message: str = _NO_ACTIVE_MEMBER) -> bool:
        if not self.active_user_id:
            self._say(message)
        return bool(self.active_user_id)

    def _ask_amount(self, prompt: str) -> float | None:
        try:
            amount = float(self._ask(prompt))
        except ValueError:
            amount = 0.0
        if amount <= 0:
            self._say("Invalid amount.")
            return None
        return amount

    def _ask_date(self) -> str:
        answer = self._ask("Date (YYYY-MM-DD) (it will be for today if you leave it empty): ")
        return answer or date.today().isoformat()

    def run(self) -> None:
        """Show the main menu until the user exits or input ends."""
        actions = {
            "1": self.handle_user_menu,
            "2": self.handle_add_income,
            "3": self.handle_add_expense,
            "4": self.handle_list_transactions,
            "5": self.handle_reports,
        }
        try:
            while True:
                self._menu(
                    "\n=== Personal financial management ===",
                    "1. Members management", "2. Record income", "3. Cost registration",
                    "4. View transactions", "5. Reports", "0. Exit",
                )
                choice = self._ask("Choice is yours: ")
                if choice == "0":
                    self._say("exit ")
                    return
                action = actions.get(choice)
                if action is None:
                    self._say("Invalid choice!")
                else:
                    action()
        except EOFError:
            return

    def handle_user_menu(self) -> None:
        while True:
            self._menu(
                "\n--- Members management ---",
                "1. Add member", "2. View users", "3. Change member status", "0. Back",
            )
            choice = self._ask("Choice: ")
            if choice == "0":
                return
            if choice == "1":
                self._add_member()
            elif choice == "2":
                self._say("\nMembers List: ")
                for user in self.users.list_users():
                    mark = "(Active)" if user.id == self.active_user_id else ""
                    self._say(f"- {user.username} {user.email} - {user.id} {mark}")
            elif choice == "3":
                user_id = self._ask("New user ID in order to get active: ")
                try:
                    self.users.find_by_id(user_id)
                except UserNotFoundError:
                    self._say("User not found.")
                else:
                    self.active_user_id = user_id
                    self._say("Active user has correctly changed.")
            else:
                self._say("Invalid Option.")

    def _add_member(self) -> None:
        username = self._ask("Username: ")
        email = self._ask("Email: ")
        try:
            user = self.users.add_user(username, email)
        except (DuplicateUserError, OSError) as err:
            self._say("Error in Add member proces:", err)
            return
        if not self.active_user_id:
            self.active_user_id = user.id
            self.categories.load_defaults(user.id)
        self._say("user has sucessfully added.")

    def handle_add_income(self) -> None:
        if not self._has_active("You should choose an active user."):
            return
        amount = self._ask_amount("amount of income: ")
        if amount is None:
            return
        source = self._ask("source of income: ")
        when = self._ask_date()
        description = self._ask("Description: ")
        try:
            self.transactions.add_income(self.active_user_id, amount, when, description, source)
        except OSError as err:
            self._say("Error in Recording Income :", err)
        else:
            self._say("Income has cusccessfully registered.")

    def handle_add_expense(self) -> None:
        if not self._has_active():
            return
        amount = self._ask_amount("Amount of charge: ")
        if amount is None:
            return
        categories = self.categories.user_categories(self.active_user_id)
        self._say("Available categories:")
        for number, category in enumerate(categories, start=1):
            self._say(f"{number}. {category.name}")
        self._say("0. Add new Category")
        choice = self._ask("Choose a category ")
        if choice == "0":
            category_name = self._ask("name of category: ")
            try:
                self.categories.add_category(self.active_user_id, category_name)
            except OSError as err:
                self._say("Error in adding new category:", err)
                return
            self._say("New Category added successfully.")
        else:
            index = int(choice) if choice.lstrip("+-").isdigit() else 0
            if not 1 <= index <= len(categories):
                self._say("invalid category.")
                return
            category_name = categories[index - 1].name
        when = self._ask_date()
        description = self._ask("Description: ")
        try:
            self.transactions.add_expense(
                self.active_user_id, amount, when, description, category_name
            )
        except OSError as err:
            self._say("Error in cost registration:", err)
        else:
            self._say("The expense was successfully recorded.")

    def handle_list_transactions(self) -> None:
        if not self._has_active():
            return
        self._say("\n Transactions list:")
        rows = [("Income", "Source", t, t.source) for t in self.transactions.incomes]
        rows += [("Expense", "Category", t, t.category) for t in self.transactions.expenses]
        for kind, label, item, detail in rows:
            if item.user_id == self.active_user_id:
                self._say(
                    f"[{kind}] Amount: {item.amount:.2f}، {label}: {detail}، "
                    f"Date: {item.date}، Description: {item.description}، ID: {item.id}"
                )
        if self._ask("Do you want to delete a transaction? (y/n): ").lower() != "y":
            return
        transaction_id = self._ask("ID of transaction that you want to be deleted: ")
        try:
            self.transactions.delete(transaction_id)
        except (TransactionNotFoundError, OSError) as err:
            self._say("Error deleting transaction:", err)
        else:
            self._say("Transaction successfully deleted.")

    def handle_reports(self) -> None:
        if not self._has_active():
            return
        self._menu(
            "\n--- Reports ---",
            "1. Monthly report", "2. Report based on category", "3. Daily balance", "0. Back",
        )
        choice = self._ask("Choice: ")
        if choice == "0":
            return
        report = {
            "1": self.show_monthly_summary,
            "2": self.show_category_report,
            "3": self.show_daily_balance,
        }.get(choice)
        if report is None:
            self._say("Invalid option.")
        else:
            report()

    def show_monthly_summary(self) -> None:
        if not self._has_active("No active user."):
            return
        summary = monthly_summary(
            self.transactions.incomes, self.transactions.expenses, self.active_user_id
        )
        self._say("📊 Monthly Summary:")
        for month, entry in summary.items():
            self._say(
                f"{month} | Income: {entry.income:.2f} | Expense: {entry.expense:.2f} "
                f"| Balance: {entry.balance:.2f}"
            )

    def show_category_report(self) -> None:
        if not self._has_active("No active user."):
            return
        self._say("📊 Expense by Category:")
        totals = category_totals(self.transactions.expenses, self.active_user_id)
        for category, total in totals.items():
            self._say(f"- {category}: {total:.2f}")

    def show_daily_balance(self) -> None:
        if not self._has_active("No active user."):
            return
        self._say("📅 Daily Balance:")
        balances = daily_balance(
            self.transactions.incomes, self.transactions.expenses, self.active_user_id
        )
        for day, balance in balances.items():
            self._say(f"- {day}: {balance:.2f}")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive finance manager."""
    parser = argparse.ArgumentParser(description="Personal financial management")
    parser.add_argument("--data-dir", default="data", help="directory holding the JSON files")
    args = parser.parse_args(argv)
    FinanceApp(args.data_dir).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())