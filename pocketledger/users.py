"""Registration and lookup of ledger members."""

from __future__ import annotations

import uuid
from pathlib import Path

from .models import User
from .storage import load_json, save_json


class DuplicateUserError(ValueError):
    """Raised when a username is already taken."""


class UserNotFoundError(LookupError):
    """Raised when no user has the requested id."""


class UserService:
    """Keeps the list of users and stores it in a JSON file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.users: list[User] = []

    def load(self) -> None:
        data = load_json(self.path)
        self.users = [User.from_dict(item) for item in data or []]

    def save(self) -> None:
        save_json(self.path, [user.to_dict() for user in self.users])

    def add_user(self, username: str, email: str) -> User:
        """Register a new user; usernames must be unique."""
        if any(user.username == username for user in self.users):
            raise DuplicateUserError("the username is duplicate")
        user = User(id=str(uuid.uuid4()), username=username, email=email)
        self.users.append(user)
        self.save()
        return user

    def list_users(self) -> list[User]:
        return list(self.users)

    def find_by_id(self, user_id: str) -> User:
        for user in self.users:
            if user.id == user_id:
                return user
        raise UserNotFoundError("user not found")