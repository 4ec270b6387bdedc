# api/schemas.py
from typing import Dict, Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """Запись пользователя в коллекции."""

    id: int = Field(..., gt=0, examples=[1])
    name: str = Field(..., examples=["Pandukumar"])
    city: Optional[str] = Field(None, examples=["Wgl"])
    position: Optional[str] = Field(None, examples=["angular developer"])


class UserCreate(BaseModel):
    # name проверяется в обработчике, чтобы вернуть 400 "Name is required"
    name: Optional[str] = Field(None, examples=["Test"])
    city: Optional[str] = None
    position: Optional[str] = None


class UserUpdate(BaseModel):
    name: Optional[str] = Field(None, examples=["Madhu Kumar"])
    city: Optional[str] = Field(None, examples=["Hyderabad"])
    position: Optional[str] = Field(None, examples=["React Developer"])

    def changes(self) -> Dict[str, str]:
        """Только переданные и непустые поля; остальные остаются как были."""
        return {
            field: value
            for field, value in self.model_dump().items()
            if value
        }


class Message(BaseModel):
    message: str
