# api/endpoints/users.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status

from ..schemas import Message, User, UserCreate, UserUpdate
from ..security import require_token
from ...db.store import UserStore

NOT_FOUND_MESSAGE = "User not found"

router = APIRouter(
    dependencies=[Depends(require_token)],
    responses={401: {"model": Message, "description": "Invalid or missing token."}},
)


def get_store(request: Request) -> UserStore:
    return request.app.state.store


@router.get(
    "",
    response_model=List[User],
    response_model_exclude_none=True,
    summary="Retrieve all users",
    description="Get a list of all users.",
)
def list_users(store: UserStore = Depends(get_store)):
    return store.list_users()


@router.post(
    "",
    response_model=User,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new user",
    description="Add a new user to the list.",
    responses={400: {"model": Message, "description": "Name is required."}},
)
def create_user(payload: Optional[UserCreate] = None, store: UserStore = Depends(get_store)):
    # Пустое тело обрабатываем так же, как отсутствие имени
    payload = payload or UserCreate()
    if not payload.name:
        raise HTTPException(status_code=400, detail="Name is required")
    return store.create_user(payload.name, city=payload.city, position=payload.position)


@router.put(
    "/{user_id}",
    response_model=User,
    response_model_exclude_none=True,
    summary="Update a user",
    description="Update a user's details.",
    responses={404: {"model": Message, "description": "User not found."}},
)
def update_user(user_id: int, payload: Optional[UserUpdate] = None, store: UserStore = Depends(get_store)):
    changes = payload.changes() if payload else {}
    user = store.update_user(user_id, changes)
    if user is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return user


@router.delete(
    "/{user_id}",
    response_model=Message,
    summary="Delete a user",
    description="Delete a user by ID.",
    responses={404: {"model": Message, "description": "User not found."}},
)
def delete_user(user_id: int, store: UserStore = Depends(get_store)):
    if not store.delete_user(user_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return {"message": "User deleted successfully"}
