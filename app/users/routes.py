from typing import List

from fastapi import APIRouter, Depends, Path

from app.config.dependencies import get_user_service
from app.users.models import User, UserCreate
from app.users.services import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[User])
async def list_users_endpoint(service: UserService = Depends(get_user_service)):
    return await service.list_users()


@router.get("/{user_id}", response_model=User)
async def get_user_endpoint(
    user_id: int = Path(ge=0),
    service: UserService = Depends(get_user_service),
):
    return await service.get_user(user_id)


@router.post("", response_model=User)
async def create_user_endpoint(
    payload: UserCreate,
    service: UserService = Depends(get_user_service),
):
    return await service.create_user(payload)
