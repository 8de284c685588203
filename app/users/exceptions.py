class UserNotFoundError(LookupError):
    """Raised when no user is stored under the requested id."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")
