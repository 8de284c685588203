import threading
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from app.users.exceptions import UserNotFoundError
from app.users.models import User, UserCreate


class UserStore(ABC):
    """Access contract shared by every user store."""

    @abstractmethod
    def list(self) -> List[User]:
        pass

    @abstractmethod
    def get(self, user_id: int) -> User:
        pass

    @abstractmethod
    def create(self, payload: UserCreate) -> User:
        pass


def seed_users() -> List[User]:
    return [
        User(id=1, name="Alice", email="alice@example.com"),
        User(id=2, name="Bob", email="bob@example.com"),
    ]


class InMemoryUserStore(UserStore):
    """
    Dictionary of users keyed by id, guarded by a single lock.

    Every operation holds the lock for one dictionary operation only.
    Ids come from a counter advanced in the same critical section as the
    insert, so they are never reused.
    """

    def __init__(self, seed: Optional[Iterable[User]] = None):
        self._users: Dict[int, User] = {}
        self._lock = threading.Lock()
        for user in (seed_users() if seed is None else seed):
            self._users[user.id] = user.model_copy()
        self._next_id = max(self._users, default=0) + 1

    def list(self) -> List[User]:
        with self._lock:
            return [user.model_copy() for user in self._users.values()]

    def get(self, user_id: int) -> User:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            return user.model_copy()

    def create(self, payload: UserCreate) -> User:
        with self._lock:
            user = User(id=self._next_id, name=payload.name, email=payload.email)
            self._users[user.id] = user
            self._next_id += 1
            return user.model_copy()
