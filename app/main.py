"""
User directory application entrypoint.
"""

from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from app.config.logger import get_logger, get_settings
from app.users.exceptions import UserNotFoundError
from app.users.routes import router as users_router
from app.users.services import UserService
from app.users.store import InMemoryUserStore, UserStore


def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """
    Build the FastAPI application around a user store.
    A fresh seeded InMemoryUserStore is created when none is given.
    """
    settings = get_settings()
    logger = get_logger(settings.app.app_name)

    app = FastAPI(title=settings.app.app_name)
    app.state.user_service = UserService(
        store=store if store is not None else InMemoryUserStore(),
        logger=get_logger("UserService"),
    )

    app.include_router(users_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return settings.app.banner

    @app.exception_handler(UserNotFoundError)
    async def user_not_found_handler(request: Request, exc: UserNotFoundError):
        return PlainTextResponse(str(exc), status_code=404)

    logger.info("Application configured", routes=len(app.routes))
    return app


app = create_app()


def run():
    settings = get_settings()
    logger = get_logger(settings.app.app_name)
    logger.info("Starting server", url=settings.server.get_url())
    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.app.log_level.lower(),
    )


if __name__ == "__main__":
    run()
