from fastapi import Request

from app.users.services import UserService

# ----------------------------
# Dependency Injection Functions
# ----------------------------
# The service (and the store behind it) is built once per application in
# app.main.create_app and kept on app.state, so every request shares it.


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service
