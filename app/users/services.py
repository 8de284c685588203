from typing import List

from app.shared.logger import AppLogger
from app.users.exceptions import UserNotFoundError
from app.users.models import User, UserCreate
from app.users.store import UserStore


class UserService:
    def __init__(self, store: UserStore, logger: AppLogger):
        self.store = store
        self.logger = logger

    async def list_users(self) -> List[User]:
        users = self.store.list()
        self.logger.debug("Listed users", count=len(users))
        return users

    async def get_user(self, user_id: int) -> User:
        try:
            user = self.store.get(user_id)
        except UserNotFoundError:
            self.logger.warning("User not found", user_id=user_id)
            raise
        self.logger.debug("User retrieved", user_id=user_id)
        return user

    async def create_user(self, payload: UserCreate) -> User:
        if payload.id is not None:
            self.logger.debug("Ignoring client-supplied id", supplied_id=payload.id)
        user = self.store.create(payload)
        self.logger.info("User registered", user_id=user.id)
        return user
