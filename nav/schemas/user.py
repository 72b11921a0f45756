from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional

class UserCreate(BaseModel):
    username: str = Field(min_length=3)
    password: str = Field(min_length=6)

class UserUpdate(BaseModel):
    """Modifs super admin: statut et/ou nouveau mot de passe"""
    status: Optional[bool] = None
    new_password: Optional[str] = Field(default=None, min_length=6)

class PasswordChange(BaseModel):
    old_password: str = Field(min_length=1)
    new_password: str = Field(min_length=6)

class UserResponse(BaseModel):
    id: int
    username: str
    status: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
