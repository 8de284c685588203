from app.users.exceptions import UserNotFoundError
from app.users.models import User, UserCreate
from app.users.store import InMemoryUserStore, UserStore, seed_users

__all__ = [
    "User",
    "UserCreate",
    "UserNotFoundError",
    "UserStore",
    "InMemoryUserStore",
    "seed_users",
]
